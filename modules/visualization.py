"""
Visualization utilities for the ASCII camera pipeline.
Debug canvas layout and helpers for labelled stage panels.
"""

import cv2
import numpy as np
from typing import List, Optional, Tuple

from config import EDGE_CHARS, NO_EDGE


def to_bgr(img: np.ndarray) -> np.ndarray:
    """Expand a single-channel image to 3 channels; copy color images."""
    if len(img.shape) == 2:
        return cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)
    return img.copy()


def combine_stages(original: np.ndarray,
                   smoothed: np.ndarray,
                   gray: np.ndarray,
                   magnitude: np.ndarray) -> np.ndarray:
    """
    Arrange four pipeline stages on one canvas.

    Layout:
        original   | smoothed
        grayscale  | gradient magnitude

    Args:
        original: BGR frame
        smoothed: Blurred BGR frame
        gray: Grayscale frame
        magnitude: uint8 gradient magnitude image

    Returns:
        BGR canvas of twice the width and height of the inputs
    """
    panels = [original, smoothed, gray, magnitude]
    size = original.shape[:2]
    for panel in panels:
        if panel.shape[:2] != size:
            raise ValueError(f"Stage sizes differ: {panel.shape[:2]} vs {size}")

    h, w = size
    canvas = np.zeros((h * 2, w * 2, 3), dtype=original.dtype)
    canvas[:h, :w] = to_bgr(original)
    canvas[:h, w:] = to_bgr(smoothed)
    canvas[h:, :w] = to_bgr(gray)
    canvas[h:, w:] = to_bgr(magnitude)

    return canvas


def add_label_to_image(img: np.ndarray,
                       text: str,
                       color: Tuple[int, int, int] = (255, 255, 255),
                       bg_color: Tuple[int, int, int] = (0, 0, 0)) -> np.ndarray:
    """
    Add a labelled banner to the top of a stage panel.

    Args:
        img: Input image (BGR or grayscale)
        text: Label text
        color: Text color
        bg_color: Banner color

    Returns:
        BGR copy of the image with the banner drawn
    """
    vis = to_bgr(img)

    h, w = vis.shape[:2]
    font_scale = max(0.4, w / 800.0)
    thickness = max(1, int(w / 400.0))
    bar_h = max(16, int(h * 0.07))

    cv2.rectangle(vis, (0, 0), (w, bar_h), bg_color, -1)
    cv2.putText(vis, text, (10, int(bar_h * 0.75)), cv2.FONT_HERSHEY_SIMPLEX,
                font_scale, color, thickness, cv2.LINE_AA)

    return vis


def draw_edge_grid(img: np.ndarray,
                   edge_grid: np.ndarray,
                   block_size: int,
                   color: Tuple[int, int, int] = (0, 255, 0)) -> np.ndarray:
    """
    Draw each block's edge glyph as a short line segment over the image.

    Blocks without a dominant edge are left untouched.
    """
    vis = to_bgr(img)
    half = block_size / 2.0

    # Segment end offsets per glyph, image y pointing down
    offsets = {
        '_': ((-half, half - 1), (half, half - 1)),
        '/': ((-half, half), (half, -half)),
        '\\': ((-half, -half), (half, half)),
        '|': ((0, -half), (0, half)),
    }

    for row, col in zip(*np.nonzero(edge_grid != NO_EDGE)):
        glyph = EDGE_CHARS[int(edge_grid[row, col])]
        cx = col * block_size + half
        cy = row * block_size + half
        (x1, y1), (x2, y2) = offsets[glyph]
        cv2.line(vis, (int(cx + x1), int(cy + y1)), (int(cx + x2), int(cy + y2)), color, 1)

    return vis


def create_grid_visualization(images: List[np.ndarray],
                              labels: Optional[List[str]] = None,
                              cols: int = 2) -> np.ndarray:
    """
    Tile same-size images into a grid, padding with black panels.

    Args:
        images: Images to arrange
        labels: Optional label per image
        cols: Panels per row

    Returns:
        Grid visualization
    """
    if not images:
        raise ValueError("No images provided")

    panels = [to_bgr(img) for img in images]
    if labels:
        panels = [add_label_to_image(img, label) for img, label in zip(panels, labels)]

    h, w = panels[0].shape[:2]
    rows = int(np.ceil(len(panels) / cols))
    while len(panels) < rows * cols:
        panels.append(np.zeros((h, w, 3), dtype=np.uint8))

    return np.vstack([np.hstack(panels[r * cols:(r + 1) * cols]) for r in range(rows)])
