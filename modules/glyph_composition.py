"""
Glyph Composition Module

Turns the per-block edge decisions and block colors into colored glyphs:
the edge glyph where a block has a dominant direction, a luminance ramp
glyph everywhere else.
"""

import math
import numpy as np
from typing import List, NamedTuple, Tuple

from config import PipelineConfig, NO_EDGE


class GridMismatchError(ValueError):
    """Edge grid and block colors do not cover the same blocks."""


class GlyphCell(NamedTuple):
    """One output character and its RGB color."""
    char: str
    rgb: Tuple[int, int, int]


class GlyphComposer:
    """Builds the colored ASCII art for one frame."""

    def __init__(self, config: dict = None):
        """
        Initialize glyph composer.

        Args:
            config: Optional config dict, uses PipelineConfig.GLYPHS if None
        """
        self.config = config or PipelineConfig.GLYPHS
        self.ramp = self.config['RAMP']
        self.edge_chars = self.config['EDGE_CHARS']
        self.luma_weights = self.config['LUMA_WEIGHTS']
        self.color_escape = self.config['COLOR_ESCAPE']

    def ramp_index(self, luminance: float) -> int:
        """Map a luminance in [0, 255] to the nearest ramp index."""
        scaled = luminance / 255.0 * (len(self.ramp) - 1)
        # round half away from zero; luminance is never negative
        index = int(math.floor(scaled + 0.5))
        return min(max(index, 0), len(self.ramp) - 1)

    def luminance(self, rgb: Tuple[int, int, int]) -> float:
        r, g, b = rgb
        wr, wg, wb = self.luma_weights
        return wr * r + wg * g + wb * b

    def luminance_glyph(self, rgb: Tuple[int, int, int]) -> str:
        """Ramp glyph for a block color."""
        return self.ramp[self.ramp_index(self.luminance(rgb))]

    @staticmethod
    def check_alignment(edge_grid: np.ndarray, colors: np.ndarray) -> bool:
        """True when there is exactly one color sample per edge grid block."""
        return (edge_grid.ndim == 2 and colors.ndim == 3
                and colors.shape[2] == 3
                and edge_grid.shape == colors.shape[:2])

    def compose(self, edge_grid: np.ndarray, colors: np.ndarray) -> List[List[GlyphCell]]:
        """
        Pick a glyph for every block.

        Args:
            edge_grid: Bucket index per block, NO_EDGE for no dominant edge
            colors: BGR color per block, same (rows, cols) as edge_grid

        Returns:
            Rows of GlyphCells, row-major

        Raises:
            GridMismatchError: if the two grids do not line up
        """
        if not self.check_alignment(edge_grid, colors):
            raise GridMismatchError(
                f"Edge grid {edge_grid.shape} does not match block colors {colors.shape}"
            )

        rows = []
        for y in range(edge_grid.shape[0]):
            row = []
            for x in range(edge_grid.shape[1]):
                blue, green, red = (int(c) for c in colors[y, x])
                rgb = (red, green, blue)

                bucket = int(edge_grid[y, x])
                if bucket != NO_EDGE:
                    char = self.edge_chars[bucket]
                else:
                    char = self.luminance_glyph(rgb)

                row.append(GlyphCell(char, rgb))
            rows.append(row)

        return rows

    def render(self, cells: List[List[GlyphCell]]) -> str:
        """
        Format glyph rows as terminal text.

        Each glyph is preceded by a 24-bit foreground color escape and
        followed by a space; every row ends with a newline.
        """
        lines = []
        for row in cells:
            line = "".join(f"{self.color_escape.format(*cell.rgb)}{cell.char} " for cell in row)
            lines.append(line + "\n")
        return "".join(lines)

    def to_ascii_art(self, edge_grid: np.ndarray, colors: np.ndarray) -> str:
        """Compose and render in one step."""
        return self.render(self.compose(edge_grid, colors))
