"""
ASCII Camera Modules

This package contains the stages of the frame-to-ASCII pipeline:
- smoothing: 3x3 Gaussian blur
- luminance: BGR to grayscale
- gradient_analysis: gradients and per-block edge direction votes
- block_sampling: one color sample per block
- glyph_composition: edge or luminance glyphs with truecolor escapes
- visualization: debug canvas and stage panels
"""

from .smoothing import Smoother
from .luminance import LuminanceReducer
from .gradient_analysis import GradientAnalyzer, GradientField, EdgeVote
from .block_sampling import BlockSampler
from .glyph_composition import GlyphComposer, GlyphCell, GridMismatchError

__all__ = [
    'Smoother',
    'LuminanceReducer',
    'GradientAnalyzer',
    'GradientField',
    'EdgeVote',
    'BlockSampler',
    'GlyphComposer',
    'GlyphCell',
    'GridMismatchError'
]
