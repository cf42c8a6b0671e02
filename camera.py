"""
Camera and display adapters.

Thin wrappers around OpenCV capture/window calls and the terminal, so the
capture loop in main.py reads as: capture, process, clear, print, show, key.
"""

import cv2
import numpy as np
import sys

from config import PipelineConfig


class CameraError(RuntimeError):
    """The capture device could not be opened or stopped delivering frames."""


class FrameSource:
    """Captures BGR frames from a camera device."""

    def __init__(self, device_index: int = None):
        if device_index is None:
            device_index = PipelineConfig.DISPLAY['CAMERA_INDEX']
        self.device_index = device_index
        self.capture = None

    def open(self) -> 'FrameSource':
        self.capture = cv2.VideoCapture(self.device_index, cv2.CAP_ANY)
        if not self.capture.isOpened():
            raise CameraError(f"Could not open camera {self.device_index}")
        return self

    def capture_next_frame(self) -> np.ndarray:
        """Read the next frame; a failed read is fatal."""
        if self.capture is None:
            raise CameraError("Camera is not open")

        ok, frame = self.capture.read()
        if not ok or frame is None or frame.size == 0:
            raise CameraError(f"Could not read a frame from camera {self.device_index}")
        return frame

    def release(self):
        if self.capture is not None:
            self.capture.release()
            self.capture = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.release()


def create_windows():
    cv2.namedWindow(PipelineConfig.DISPLAY['COMBINED_WINDOW'], cv2.WINDOW_NORMAL)


def display(window_id: str, image: np.ndarray) -> bool:
    """Show an image; display errors are reported and skipped."""
    try:
        cv2.imshow(window_id, image)
    except cv2.error as e:
        print(f"Warning: could not display '{window_id}': {e}", file=sys.stderr)
        return False
    return True


def clear_terminal():
    sys.stdout.write(PipelineConfig.DISPLAY['CLEAR_SCREEN'])


def write_ascii(ascii_art: str):
    """Print rendered glyphs and reset the terminal color."""
    sys.stdout.write(ascii_art)
    sys.stdout.write(PipelineConfig.GLYPHS['RESET'])
    sys.stdout.flush()


def read_key(delay_ms: int = None) -> int:
    """Poll the OpenCV event loop for a key press (-1 if none)."""
    if delay_ms is None:
        delay_ms = PipelineConfig.DISPLAY['WAIT_MS']
    key = cv2.waitKey(delay_ms)
    return key & 0xFF if key != -1 else -1
