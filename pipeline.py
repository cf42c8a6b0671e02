"""
ASCII Camera Pipeline

Orchestrates all modules to turn one BGR frame into colored ASCII art.
Process: Smoothing -> Luminance -> Gradient Analysis -> Block Sampling -> Glyph Composition

Every call works on a single frame; nothing is carried over between frames.
"""

import numpy as np
from typing import Dict

from modules import Smoother, LuminanceReducer, GradientAnalyzer, BlockSampler, GlyphComposer
from modules.visualization import combine_stages


class AsciiArtPipeline:
    """Main pipeline for frame-to-ASCII conversion."""

    def __init__(self):
        """Initialize all pipeline stages."""
        self.smoother = Smoother()
        self.luminance_reducer = LuminanceReducer()
        self.gradient_analyzer = GradientAnalyzer()
        self.block_sampler = BlockSampler()
        self.glyph_composer = GlyphComposer()

    def process_frame(self, frame: np.ndarray) -> Dict:
        """
        Run the full pipeline on a frame.

        Args:
            frame: BGR input frame

        Returns:
            Dictionary with every intermediate stage and the final 'ascii_art'

        Raises:
            GridMismatchError: if the edge grid and block colors disagree;
                no ASCII art is produced for the frame in that case
        """
        results = {}

        # Step 1: Smoothing
        smoothed = self.smoother.smooth(frame)
        results['smoothed'] = smoothed

        # Step 2: Luminance
        gray = self.luminance_reducer.reduce(smoothed)
        results['gray'] = gray

        # Step 3: Gradient Analysis
        gradient, edge_grid = self.gradient_analyzer.analyze(gray)
        results['gradient'] = gradient
        results['edge_grid'] = edge_grid
        results['magnitude'] = self.gradient_analyzer.magnitude_image(gradient)

        # Step 4: Block Sampling (from the unblurred frame)
        block_colors = self.block_sampler.sample(frame)
        results['block_colors'] = block_colors

        # Step 5: Glyph Composition
        cells = self.glyph_composer.compose(edge_grid, block_colors)
        results['cells'] = cells
        results['ascii_art'] = self.glyph_composer.render(cells)

        return results

    def visualize_results(self, frame: np.ndarray, results: Dict) -> np.ndarray:
        """
        Create the 2x2 debug canvas.

        Args:
            frame: Original BGR frame
            results: Results dictionary from process_frame

        Returns:
            Canvas with original, smoothed, gray and gradient magnitude
        """
        return combine_stages(frame, results['smoothed'], results['gray'], results['magnitude'])
