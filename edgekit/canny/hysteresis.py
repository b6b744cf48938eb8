"""
Dual-threshold hysteresis via breadth-first flood fill.

Pixels at or above the high threshold seed a flood over pixels at or above
the low threshold; everything the flood never reaches is zeroed.

By default the flood only steps to the offsets (dx, dy) with
dx, dy in {-1, 0}: the pixel itself, the one above, the one to the left and
the one up-left. Pass ``full_connectivity=True`` for the usual
8-neighbourhood.
"""

from collections import deque
from typing import Tuple

import numpy as np

from ..errors import UnsupportedParameterError

UP_LEFT_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0) for dy in (-1, 0)
)
EIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def max_min_suppression(
    magnitude: np.ndarray,
    low: float,
    high: float,
    full_connectivity: bool = False
) -> np.ndarray:
    """
    Keep values >= low that are connected to a value >= high, in place.

    Args:
        magnitude: Grid (H, W), overwritten with the result
        low: Weak-edge threshold
        high: Strong-edge threshold, must be >= low
        full_connectivity: Flood over all 8 neighbours instead of the
            up-left neighbourhood

    Returns:
        magnitude: The same array with unconnected pixels set to 0

    Raises:
        UnsupportedParameterError: If high < low
    """
    if high < low:
        raise UnsupportedParameterError(
            f"high threshold ({high}) must be >= low threshold ({low})"
        )

    h, w = magnitude.shape
    offsets = EIGHT_OFFSETS if full_connectivity else UP_LEFT_OFFSETS
    visited = np.zeros((h, w), dtype=bool)
    weak = magnitude >= low
    queue = deque()

    for i, j in np.argwhere(magnitude >= high):
        if visited[i, j]:
            continue
        visited[i, j] = True
        queue.append((i, j))
        while queue:
            x, y = queue.popleft()
            for dx, dy in offsets:
                nx, ny = x + dx, y + dy
                if nx < 0 or nx >= h or ny < 0 or ny >= w:
                    continue
                if weak[nx, ny] and not visited[nx, ny]:
                    visited[nx, ny] = True
                    queue.append((nx, ny))

    magnitude[~visited] = 0.0
    return magnitude


hysteresis = max_min_suppression
