"""
Luminance Module

Reduces a BGR frame to a single brightness channel.
"""

import cv2
import numpy as np

from config import PipelineConfig


class LuminanceReducer:
    """Converts color frames to grayscale."""

    CONVERSIONS = {
        'BGR2GRAY': cv2.COLOR_BGR2GRAY,
        'RGB2GRAY': cv2.COLOR_RGB2GRAY
    }

    def __init__(self, config: dict = None):
        self.config = config or PipelineConfig.LUMINANCE
        self.conversion = self.CONVERSIONS[self.config['CONVERSION']]

    def reduce(self, image: np.ndarray) -> np.ndarray:
        """
        Convert a frame to grayscale.

        Args:
            image: BGR frame (H, W, 3); single-channel frames are copied through

        Returns:
            Grayscale frame (H, W)
        """
        if image is None or image.size == 0:
            raise ValueError("Cannot convert an empty frame")

        if len(image.shape) == 2:
            return image.copy()

        if len(image.shape) != 3 or image.shape[2] != 3:
            raise ValueError(f"Expected a 3-channel frame, got shape {image.shape}")

        return cv2.cvtColor(image, self.conversion)
