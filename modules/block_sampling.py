"""
Block Sampling Module

Downsamples the original color frame to one pixel per block so each output
glyph has a color. Also owns the block grid geometry shared with gradient
analysis.
"""

import numpy as np
from typing import Optional, Tuple

from config import PipelineConfig


def grid_shape(height: int, width: int, block_size: int) -> Tuple[int, int]:
    """Number of (rows, cols) of blocks covering a frame, partial blocks included."""
    return -(-height // block_size), -(-width // block_size)


def pixel_at(image: np.ndarray, x: int, y: int) -> Optional[np.ndarray]:
    """Return the pixel at (x, y), or None when outside the frame."""
    h, w = image.shape[:2]
    if 0 <= x < w and 0 <= y < h:
        return image[y, x]
    return None


class BlockSampler:
    """Nearest-neighbor block downsampler."""

    def __init__(self, config: dict = None):
        """
        Initialize block sampler.

        Args:
            config: Optional config dict, uses PipelineConfig.BLOCKS if None
        """
        self.config = config or PipelineConfig.BLOCKS
        self.block_size = self.config['BLOCK_SIZE']

    def grid_shape(self, image: np.ndarray) -> Tuple[int, int]:
        h, w = image.shape[:2]
        return grid_shape(h, w, self.block_size)

    def sample_block(self, image: np.ndarray, col: int, row: int) -> Optional[np.ndarray]:
        """Representative pixel of one block: its top-left pixel."""
        return pixel_at(image, col * self.block_size, row * self.block_size)

    def sample(self, image: np.ndarray) -> np.ndarray:
        """
        Downsample a frame to one pixel per block.

        The top-left pixel of every block is kept (no averaging), so the
        result lines up 1:1 with the gradient analyzer's edge grid.

        Args:
            image: BGR frame (H, W, 3)

        Returns:
            Block colors (ceil(H/B), ceil(W/B), 3), same dtype as the input
        """
        if image is None or image.size == 0:
            raise ValueError("Cannot sample an empty frame")

        step = self.block_size
        return np.ascontiguousarray(image[::step, ::step])
