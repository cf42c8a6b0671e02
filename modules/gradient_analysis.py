"""
Gradient Analysis Module

Computes horizontal and vertical derivatives of a grayscale frame and
classifies every block into an edge direction by majority vote.

Direction buckets, in vote order:
    0: horizontal edge  (vertical gradient)      -> '_'
    1: rising diagonal                            -> '/'
    2: falling diagonal                           -> '\\'
    3: vertical edge    (horizontal gradient)     -> '|'
"""

import cv2
import numpy as np
from typing import NamedTuple, Optional, Tuple

from config import PipelineConfig, EDGE_CHARS, NO_EDGE
from modules.block_sampling import grid_shape


class GradientField(NamedTuple):
    """Per-pixel derivatives of a grayscale frame."""
    gx: np.ndarray
    gy: np.ndarray
    magnitude: np.ndarray
    angle: np.ndarray


class EdgeVote(NamedTuple):
    """Vote tally of one block, one count per direction bucket."""
    horizontal_edge: int = 0
    rising_edge: int = 0
    falling_edge: int = 0
    vertical_edge: int = 0


class GradientAnalyzer:
    """Detects the dominant edge direction of each block."""

    def __init__(self, config: dict = None):
        """
        Initialize gradient analyzer.

        Args:
            config: Optional config dict, uses PipelineConfig.GRADIENT if None
        """
        self.config = config or PipelineConfig.GRADIENT
        self.block_size = self.config['BLOCK_SIZE']
        self.threshold = self.config['THRESHOLD']
        self.vote_threshold = self.config['VOTE_THRESHOLD']
        self.kernel_x = self.config['KERNEL_X']
        self.kernel_y = self.config['KERNEL_Y']
        self.bins_positive = self.config['BINS_GY_POSITIVE']
        self.bins_non_positive = self.config['BINS_GY_NON_POSITIVE']
        self.horizontal_bucket = self.config['HORIZONTAL_BUCKET']
        self.display_weight = self.config['DISPLAY_WEIGHT']

    def compute_gradients(self, gray: np.ndarray) -> GradientField:
        """
        Compute gx, gy, magnitude and angle.

        Args:
            gray: Grayscale frame (H, W)

        Returns:
            GradientField of float64 arrays; angle is |atan2(gy, gx)| in
            degrees, within [0, 180]
        """
        if gray is None or gray.size == 0:
            raise ValueError("Cannot compute gradients of an empty frame")
        if len(gray.shape) != 2:
            raise ValueError(f"Expected a single-channel frame, got shape {gray.shape}")

        gx = cv2.filter2D(gray, cv2.CV_64F, self.kernel_x, borderType=cv2.BORDER_DEFAULT)
        gy = cv2.filter2D(gray, cv2.CV_64F, self.kernel_y, borderType=cv2.BORDER_DEFAULT)

        magnitude = np.hypot(gx, gy)
        # atan2(0, 0) is 0, so flat pixels get angle 0 and fail the threshold
        angle = np.abs(np.degrees(np.arctan2(gy, gx)))

        return GradientField(gx, gy, magnitude, angle)

    def _bucket_layout(self, angle: np.ndarray, bins: dict) -> np.ndarray:
        """Bucket index for every angle under one bin layout."""
        layout = np.full(angle.shape, bins['REMAINDER'], dtype=np.int64)

        for low, high, bucket in bins['BANDS']:
            layout[(angle > low) & (angle <= high)] = bucket

        cutoff = bins['HORIZONTAL']
        layout[(angle <= cutoff) | (angle > 180.0 - cutoff)] = self.horizontal_bucket

        return layout

    def bucket_for(self, angle: float, gy: float) -> int:
        """Direction bucket of a single strong pixel."""
        bins = self.bins_positive if gy > 0 else self.bins_non_positive
        return int(self._bucket_layout(np.array([angle], dtype=np.float64), bins)[0])

    def classify_directions(self, field: GradientField) -> np.ndarray:
        """
        Assign a direction bucket to each pixel above the gradient threshold.

        The bin layout depends on the sign of gy: positive gy uses narrow
        diagonal bands (15-75, 105-165), zero or negative gy uses 45 degree
        wide bands with the diagonal buckets swapped.

        Returns:
            int array (H, W) of bucket indices, NO_EDGE where the pixel is weak
        """
        buckets = np.full(field.angle.shape, NO_EDGE, dtype=np.int64)
        strong = field.magnitude > self.threshold
        positive = field.gy > 0

        for branch, bins in ((positive, self.bins_positive),
                             (~positive, self.bins_non_positive)):
            selected = strong & branch
            if np.any(selected):
                layout = self._bucket_layout(field.angle, bins)
                buckets[selected] = layout[selected]

        return buckets

    def block_votes(self, buckets: np.ndarray) -> np.ndarray:
        """
        Count votes per block for every bucket.

        Out-of-bounds pixels of partial blocks are padded with NO_EDGE so
        they never vote.

        Returns:
            int array (rows, cols, 4)
        """
        h, w = buckets.shape
        rows, cols = grid_shape(h, w, self.block_size)
        step = self.block_size

        padded = np.full((rows * step, cols * step), NO_EDGE, dtype=buckets.dtype)
        padded[:h, :w] = buckets
        tiles = padded.reshape(rows, step, cols, step)

        counts = [(tiles == bucket).sum(axis=(1, 3)) for bucket in range(len(EDGE_CHARS))]
        return np.stack(counts, axis=-1)

    def vote_block(self, buckets: np.ndarray, x: int, y: int) -> EdgeVote:
        """Fold the in-bounds pixels of the block at top-left (x, y) into a tally."""
        h, w = buckets.shape
        if not (0 <= x < w and 0 <= y < h):
            raise IndexError(f"Block origin ({x}, {y}) outside {w}x{h} frame")

        tile = buckets[y:y + self.block_size, x:x + self.block_size]
        votes = tile[tile != NO_EDGE]
        counts = np.bincount(votes, minlength=len(EDGE_CHARS))
        return EdgeVote(*(int(c) for c in counts))

    def pick_winner(self, vote: EdgeVote) -> Optional[int]:
        """
        Winning bucket of a tally, or None when it is too weak.

        Ties go to the lowest bucket index.
        """
        best = max(vote)
        if best <= self.vote_threshold:
            return None
        return vote.index(best)

    def decide(self, votes: np.ndarray) -> np.ndarray:
        """
        Per-block edge decision from vote counts.

        np.argmax returns the first maximum, which gives the same tie break
        as pick_winner.

        Returns:
            int array (rows, cols) of bucket indices or NO_EDGE
        """
        winners = np.argmax(votes, axis=-1)
        best = np.max(votes, axis=-1)
        return np.where(best > self.vote_threshold, winners, NO_EDGE)

    def analyze(self, gray: np.ndarray) -> Tuple[GradientField, np.ndarray]:
        """
        Run the full gradient analysis on a grayscale frame.

        Args:
            gray: Grayscale frame (H, W)

        Returns:
            Tuple of (gradient field, edge grid of shape (ceil(H/B), ceil(W/B)))
        """
        field = self.compute_gradients(gray)
        buckets = self.classify_directions(field)
        edge_grid = self.decide(self.block_votes(buckets))
        return field, edge_grid

    def magnitude_image(self, field: GradientField) -> np.ndarray:
        """Displayable uint8 gradient image: weighted sum of |gx| and |gy|."""
        abs_gx = cv2.convertScaleAbs(field.gx)
        abs_gy = cv2.convertScaleAbs(field.gy)
        return cv2.addWeighted(abs_gx, self.display_weight,
                               abs_gy, self.display_weight, 0.0)

    @staticmethod
    def edge_text(edge_grid: np.ndarray) -> str:
        """Edge layer alone as text: glyph or space per block, newline per row."""
        lines = []
        for row in edge_grid:
            lines.append("".join(EDGE_CHARS[b] if b != NO_EDGE else ' ' for b in row))
        return "".join(line + "\n" for line in lines)
