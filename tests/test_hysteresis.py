import numpy as np
import pytest

from edgekit.canny import hysteresis, max_min_suppression
from edgekit.errors import UnsupportedParameterError


def _seed_with_weak_ring() -> np.ndarray:
    grid = np.zeros((5, 5))
    grid[2, 2] = 0.9
    grid[1:4, 1:4][grid[1:4, 1:4] == 0.0] = 0.5
    return grid


def test_weak_pixels_connected_up_and_left_are_kept():
    grid = _seed_with_weak_ring()
    max_min_suppression(grid, 0.3, 0.8)
    assert grid[2, 2] == 0.9
    assert grid[1, 1] == 0.5
    assert grid[1, 2] == 0.5
    assert grid[2, 1] == 0.5


def test_up_left_neighbourhood_misses_right_and_down_neighbours():
    # The default flood only steps to dx, dy in {-1, 0}. With full
    # 8-connectivity the whole ring around the seed is kept instead.
    up_left = _seed_with_weak_ring()
    full = _seed_with_weak_ring()
    max_min_suppression(up_left, 0.3, 0.8)
    max_min_suppression(full, 0.3, 0.8, full_connectivity=True)

    for i, j in [(1, 3), (2, 3), (3, 1), (3, 2), (3, 3)]:
        assert up_left[i, j] == 0.0
        assert full[i, j] == 0.5
    assert np.count_nonzero(up_left) == 4
    assert np.count_nonzero(full) == 9


def test_flood_follows_chains_up_and_left():
    grid = np.zeros((4, 4))
    grid[3, 3] = 0.9
    grid[2, 2] = grid[1, 1] = grid[0, 0] = 0.4
    grid[0, 3] = 0.4  # weak but disconnected
    max_min_suppression(grid, 0.3, 0.8)
    assert np.count_nonzero(grid) == 4
    assert grid[0, 0] == 0.4
    assert grid[0, 3] == 0.0


def test_full_connectivity_follows_chains_in_any_direction():
    grid = np.zeros((1, 6))
    grid[0, 0] = 0.9
    grid[0, 1:] = 0.4
    max_min_suppression(grid, 0.3, 0.8, full_connectivity=True)
    assert np.count_nonzero(grid) == 6


def test_values_below_low_are_dropped_even_next_to_seeds():
    grid = np.array([[0.2, 0.9], [0.2, 0.2]])
    max_min_suppression(grid, 0.3, 0.8, full_connectivity=True)
    assert np.array_equal(grid, np.array([[0.0, 0.9], [0.0, 0.0]]))


def test_no_seed_clears_everything():
    grid = np.full((4, 4), 0.5)
    max_min_suppression(grid, 0.3, 0.8)
    assert np.all(grid == 0.0)


def test_works_in_place_and_keeps_values():
    grid = _seed_with_weak_ring()
    result = max_min_suppression(grid, 0.3, 0.8)
    assert result is grid
    assert set(np.unique(grid)) <= {0.0, 0.5, 0.9}


def test_high_below_low_is_rejected():
    with pytest.raises(UnsupportedParameterError):
        max_min_suppression(np.zeros((3, 3)), 0.8, 0.3)


def test_hysteresis_alias():
    assert hysteresis is max_min_suppression


@pytest.mark.parametrize("full_connectivity", [False, True])
def test_lowering_low_never_drops_pixels(rng, full_connectivity):
    base = rng.random((25, 25))
    counts = []
    for low in (0.7, 0.5, 0.3, 0.1, 0.0):
        grid = base.copy()
        max_min_suppression(grid, low, 0.8, full_connectivity)
        counts.append(np.count_nonzero(grid))
    assert counts == sorted(counts)


def test_full_connectivity_keeps_a_superset(rng):
    base = rng.random((20, 20))
    up_left = max_min_suppression(base.copy(), 0.4, 0.85)
    full = max_min_suppression(base.copy(), 0.4, 0.85, full_connectivity=True)
    assert np.all(full[up_left != 0.0] == up_left[up_left != 0.0])
    assert np.count_nonzero(full) >= np.count_nonzero(up_left)
