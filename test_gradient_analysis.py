"""
Tests for gradient computation, direction bucketing and block voting.

Uses synthetic step-edge frames; no image files required.
"""

import numpy as np
import pytest

from config import EDGE_CHARS, NO_EDGE
from modules import GradientAnalyzer, EdgeVote


def _step_x(h=8, w=8, low=0, high=200):
    """Dark left half, bright right half: strong horizontal gradient."""
    gray = np.full((h, w), low, dtype=np.uint8)
    gray[:, w // 2:] = high
    return gray


def _step_y(h=8, w=8, low=0, high=200):
    """Dark top half, bright bottom half: strong vertical gradient."""
    gray = np.full((h, w), low, dtype=np.uint8)
    gray[h // 2:, :] = high
    return gray


@pytest.fixture
def analyzer():
    return GradientAnalyzer()


def test_flat_frame_has_zero_gradient(analyzer):
    field = analyzer.compute_gradients(np.full((6, 9), 77, dtype=np.uint8))
    assert np.all(field.gx == 0)
    assert np.all(field.gy == 0)
    assert np.all(field.magnitude == 0)
    assert np.all(field.angle == 0)


def test_step_gradients(analyzer):
    field = analyzer.compute_gradients(_step_x())
    assert field.gx[0, 3] == pytest.approx(200.0)
    assert field.gx[0, 4] == pytest.approx(200.0)
    assert field.gx[0, 0] == 0
    assert field.gx[0, 7] == 0
    assert np.all(field.gy == 0)
    assert field.magnitude[2, 3] == pytest.approx(200.0)


def test_horizontal_gradient_gives_vertical_bar(analyzer):
    field, edge_grid = analyzer.analyze(_step_x())
    assert edge_grid.shape == (2, 2)
    assert np.all(edge_grid == 3)
    assert EDGE_CHARS[edge_grid[0, 0]] == '|'


def test_falling_horizontal_gradient_gives_vertical_bar(analyzer):
    _, edge_grid = analyzer.analyze(_step_x(low=200, high=0))
    assert np.all(edge_grid == 3)


@pytest.mark.parametrize("low,high", [(0, 200), (200, 0)])
def test_vertical_gradient_gives_underscore(analyzer, low, high):
    _, edge_grid = analyzer.analyze(_step_y(low=low, high=high))
    assert np.all(edge_grid == 0)
    assert EDGE_CHARS[edge_grid[1, 1]] == '_'


@pytest.mark.parametrize("angle,expected", [(0.0, 3), (90.0, 0), (180.0, 3)])
def test_bin_layouts_agree_at_cardinal_angles(analyzer, angle, expected):
    assert analyzer.bucket_for(angle, gy=10.0) == expected
    assert analyzer.bucket_for(angle, gy=-10.0) == expected
    assert analyzer.bucket_for(angle, gy=0.0) == expected


@pytest.mark.parametrize("angle,gy,expected", [
    # gy > 0 layout
    (15.0, 1.0, 3),
    (15.5, 1.0, 1),
    (75.0, 1.0, 1),
    (75.5, 1.0, 0),
    (105.0, 1.0, 0),
    (105.5, 1.0, 2),
    (165.0, 1.0, 2),
    (165.5, 1.0, 3),
    # gy <= 0 layout
    (22.5, -1.0, 3),
    (23.0, -1.0, 2),
    (67.5, -1.0, 2),
    (68.0, -1.0, 0),
    (112.5, -1.0, 0),
    (113.0, -1.0, 1),
    (157.5, -1.0, 1),
    (158.0, -1.0, 3),
])
def test_bucket_boundaries(analyzer, angle, gy, expected):
    assert analyzer.bucket_for(angle, gy) == expected


def test_diagonals_match_slash_direction(analyzer):
    # Brighter towards the bottom right: the edge runs bottom-left to top-right
    yy, xx = np.mgrid[0:8, 0:8]
    gray = np.where(xx + yy >= 8, 220, 0).astype(np.uint8)
    _, edge_grid = analyzer.analyze(gray)
    assert EDGE_CHARS[edge_grid[0, 1]] == '/'

    # Brighter towards the top right: the edge runs top-left to bottom-right
    gray = np.where(xx - yy >= 0, 220, 0).astype(np.uint8)
    _, edge_grid = analyzer.analyze(gray)
    assert EDGE_CHARS[edge_grid[0, 0]] == '\\'


def test_weak_pixels_do_not_vote(analyzer):
    # 5 levels per pixel gives a central difference of 10, below the threshold
    gray = np.tile(np.arange(0, 60, 5, dtype=np.uint8), (8, 1))
    field, edge_grid = analyzer.analyze(gray)
    assert field.magnitude.max() < analyzer.threshold
    assert np.all(analyzer.classify_directions(field) == NO_EDGE)
    assert np.all(edge_grid == NO_EDGE)


def test_tie_break_picks_lowest_bucket(analyzer):
    assert analyzer.pick_winner(EdgeVote(2, 2, 0, 0)) == 0
    assert analyzer.pick_winner(EdgeVote(0, 3, 3, 0)) == 1
    assert analyzer.pick_winner(EdgeVote(0, 0, 4, 4)) == 2

    votes = np.array([[[0, 2, 2, 0], [3, 0, 0, 3]]])
    assert analyzer.decide(votes).tolist() == [[1, 0]]


def test_vote_threshold(analyzer):
    assert analyzer.vote_threshold == 1
    assert analyzer.pick_winner(EdgeVote(1, 1, 1, 1)) is None
    assert analyzer.pick_winner(EdgeVote()) is None
    assert analyzer.pick_winner(EdgeVote(0, 0, 0, 2)) == 3

    votes = np.array([[[1, 0, 0, 0], [0, 2, 0, 0]]])
    assert analyzer.decide(votes).tolist() == [[NO_EDGE, 1]]


def test_partial_blocks_only_count_in_bounds_pixels(analyzer):
    buckets = np.full((5, 6), 1, dtype=np.int64)
    votes = analyzer.block_votes(buckets)

    assert votes.shape == (2, 2, 4)
    assert votes[0, 0].tolist() == [0, 16, 0, 0]
    assert votes[0, 1].tolist() == [0, 8, 0, 0]
    assert votes[1, 0].tolist() == [0, 4, 0, 0]
    assert votes[1, 1].tolist() == [0, 2, 0, 0]

    assert analyzer.vote_block(buckets, 4, 4) == EdgeVote(0, 2, 0, 0)
    assert analyzer.vote_block(buckets, 0, 0) == EdgeVote(rising_edge=16)


def test_vote_block_matches_block_votes(analyzer):
    rng = np.random.default_rng(7)
    buckets = rng.integers(-1, 4, size=(11, 9))
    votes = analyzer.block_votes(buckets)

    for row in range(votes.shape[0]):
        for col in range(votes.shape[1]):
            tally = analyzer.vote_block(buckets, col * 4, row * 4)
            assert list(tally) == votes[row, col].tolist()


def test_vote_block_outside_frame(analyzer):
    with pytest.raises(IndexError):
        analyzer.vote_block(np.zeros((4, 4), dtype=np.int64), 4, 0)


@pytest.mark.parametrize("shape", [(2, 3), (5, 7), (17, 13), (30, 41), (480, 640)])
def test_edge_grid_shape(analyzer, shape):
    _, edge_grid = analyzer.analyze(np.zeros(shape, dtype=np.uint8))
    assert edge_grid.shape == (-(-shape[0] // 4), -(-shape[1] // 4))


def test_magnitude_image(analyzer):
    field = analyzer.compute_gradients(_step_x())
    image = analyzer.magnitude_image(field)
    assert image.dtype == np.uint8
    assert image.shape == (8, 8)
    assert image[0, 3] == 160
    assert image[0, 0] == 0


def test_edge_text(analyzer):
    edge_grid = np.array([[3, NO_EDGE], [0, 2]])
    assert analyzer.edge_text(edge_grid) == "| \n_\\\n"


def test_rejects_color_input(analyzer):
    with pytest.raises(ValueError):
        analyzer.compute_gradients(np.zeros((4, 4, 3), dtype=np.uint8))
