"""
Live ASCII Camera

Captures frames from a camera, prints them to the terminal as colored,
edge-aware ASCII art and shows the intermediate stages in an OpenCV window.

Usage:
    python main.py [--camera <index>]
    python main.py --image <path>

Press 'q' in the OpenCV window to quit.
"""

import cv2
import numpy as np
import sys
import argparse
from pathlib import Path

from camera import (CameraError, FrameSource, create_windows, display,
                    clear_terminal, write_ascii, read_key)
from config import PipelineConfig
from modules import GridMismatchError
from pipeline import AsciiArtPipeline


DISPLAY = PipelineConfig.DISPLAY


def show_frame(pipeline: AsciiArtPipeline, frame: np.ndarray) -> bool:
    """
    Process one frame and send it to the terminal and windows.

    Returns:
        False if the frame was skipped
    """
    try:
        results = pipeline.process_frame(frame)
    except GridMismatchError as e:
        print(f"Warning: skipping frame: {e}", file=sys.stderr)
        return False

    clear_terminal()
    write_ascii(results['ascii_art'])

    display(DISPLAY['COMBINED_WINDOW'], pipeline.visualize_results(frame, results))
    display(DISPLAY['SAMPLED_WINDOW'], results['block_colors'])
    return True


def run_camera(device_index: int) -> int:
    """Capture loop: one frame at a time until 'q' is pressed."""
    pipeline = AsciiArtPipeline()
    create_windows()

    try:
        with FrameSource(device_index) as source:
            while True:
                frame = source.capture_next_frame()
                show_frame(pipeline, frame)

                if read_key() == DISPLAY['QUIT_KEY']:
                    break
    except CameraError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        cv2.destroyAllWindows()

    return 0


def run_image(image_path: Path) -> int:
    """Render a single image once and keep the windows open until 'q'."""
    frame = cv2.imread(str(image_path), cv2.IMREAD_COLOR)
    if frame is None:
        print(f"Error: Could not read image: {image_path}", file=sys.stderr)
        return 1

    pipeline = AsciiArtPipeline()
    create_windows()

    if not show_frame(pipeline, frame):
        cv2.destroyAllWindows()
        return 1

    try:
        while read_key() != DISPLAY['QUIT_KEY']:
            pass
    finally:
        cv2.destroyAllWindows()

    return 0


def main():
    parser = argparse.ArgumentParser(description='Edge-aware colored ASCII camera')
    parser.add_argument('--camera', '-c', type=int, default=DISPLAY['CAMERA_INDEX'],
                        help='Camera device index (default: 0)')
    parser.add_argument('--image', '-i', type=str,
                        help='Render a single image file instead of the camera')

    args = parser.parse_args()

    if args.image:
        sys.exit(run_image(Path(args.image)))
    sys.exit(run_camera(args.camera))


if __name__ == "__main__":
    main()
