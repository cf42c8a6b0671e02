"""
Smoothing Module

Applies a small Gaussian blur to suppress sensor noise before edge detection.
"""

import cv2
import numpy as np

from config import PipelineConfig


class Smoother:
    """Blurs frames with a fixed 3x3 Gaussian kernel."""

    def __init__(self, config: dict = None):
        """
        Initialize smoother.

        Args:
            config: Optional config dict, uses PipelineConfig.SMOOTHING if None
        """
        self.config = config or PipelineConfig.SMOOTHING
        self.kernel_size = tuple(self.config['KERNEL_SIZE'])
        self.sigma = self.config['SIGMA']

    def smooth(self, image: np.ndarray) -> np.ndarray:
        """
        Blur a color or grayscale frame.

        Borders are reflected (OpenCV BORDER_DEFAULT), so a flat frame
        comes back unchanged.

        Args:
            image: BGR or single-channel frame

        Returns:
            Blurred frame with the same shape and dtype
        """
        if image is None or image.size == 0:
            raise ValueError("Cannot smooth an empty frame")

        return cv2.GaussianBlur(image, self.kernel_size, self.sigma,
                                borderType=cv2.BORDER_DEFAULT)
