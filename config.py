"""
Configuration settings for the ASCII camera pipeline.
Centralized configuration for all modules.
"""

import numpy as np


# Fixed rendering constants
BLOCK_SIZE = 4
GRADIENT_THRESHOLD = 15.0

# Luminance ramp, index 0 for luminance 0 and the last index for 255
ASCII_CHARS = "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "

# Edge glyphs indexed by direction bucket
EDGE_CHARS = "_/\\|"

# Edge grid marker for blocks without a dominant direction
NO_EDGE = -1


class PipelineConfig:
    """Configuration for the entire ASCII rendering pipeline."""

    # Smoothing
    SMOOTHING = {
        'KERNEL_SIZE': (3, 3),
        'SIGMA': 0.0  # derived from kernel size by OpenCV
    }

    # Luminance Reduction (OpenCV channel order)
    LUMINANCE = {
        'CONVERSION': 'BGR2GRAY'
    }

    # Gradient Analysis
    GRADIENT = {
        'BLOCK_SIZE': BLOCK_SIZE,
        'THRESHOLD': GRADIENT_THRESHOLD,
        'VOTE_THRESHOLD': BLOCK_SIZE // 2 - 1,
        'KERNEL_X': np.array([[0, 0, 0],
                              [-1, 0, 1],
                              [0, 0, 0]], dtype=np.float64),
        'KERNEL_Y': np.array([[0, -1, 0],
                              [0, 0, 0],
                              [0, 1, 0]], dtype=np.float64),
        # (low, high] angle ranges in degrees, bucket index per range
        'BINS_GY_POSITIVE': {
            'HORIZONTAL': 15.0,
            'BANDS': [(15.0, 75.0, 1), (75.0, 105.0, 0)],
            'REMAINDER': 2
        },
        'BINS_GY_NON_POSITIVE': {
            'HORIZONTAL': 22.5,
            'BANDS': [(22.5, 67.5, 2), (67.5, 112.5, 0)],
            'REMAINDER': 1
        },
        'HORIZONTAL_BUCKET': 3,
        'DISPLAY_WEIGHT': 0.8
    }

    # Block Sampling
    BLOCKS = {
        'BLOCK_SIZE': BLOCK_SIZE
    }

    # Glyph Composition
    GLYPHS = {
        'RAMP': ASCII_CHARS,
        'EDGE_CHARS': EDGE_CHARS,
        'LUMA_WEIGHTS': (0.2126, 0.7152, 0.0722),  # R, G, B
        'COLOR_ESCAPE': "\x1b[38;2;{};{};{}m",
        'RESET': "\x1b[0m"
    }

    # Display / capture loop
    DISPLAY = {
        'CAMERA_INDEX': 0,
        'COMBINED_WINDOW': 'Combined',
        'SAMPLED_WINDOW': 'Ascii size',
        'QUIT_KEY': ord('q'),
        'WAIT_MS': 1,
        'CLEAR_SCREEN': "\x1b[2J\x1b[H"
    }
