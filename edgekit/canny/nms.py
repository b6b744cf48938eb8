"""Non-maximum suppression along the quantized gradient direction."""

import numpy as np

from ..errors import UnsupportedParameterError, check_same_shape
from .direction import VERTICAL, BOTTOM, HORIZONTAL, TOP

# (row, col) offsets of the two neighbours compared for each direction code
NEIGHBOUR_OFFSETS = {
    VERTICAL: ((-1, 0), (1, 0)),
    BOTTOM: ((-1, -1), (1, 1)),
    HORIZONTAL: ((0, -1), (0, 1)),
    TOP: ((-1, 1), (1, -1)),
}


def edge_nms(direction: np.ndarray, magnitude: np.ndarray) -> np.ndarray:
    """
    Thin gradient ridges in place.

    Pixels are visited in row-major order and each result is written back
    immediately, so the neighbours above and to the left are compared with
    their already suppressed (and clamped) values, the ones below and to the
    right with their input values.

    A pixel keeps its magnitude (clamped to [0, 1]) only if it is strictly
    greater than both neighbours along its direction code, otherwise it is
    set to 0. Pixels on the grid border whose neighbour would fall outside
    are zeroed for codes 0, 2 and 3, but keep their (clamped) value for
    code 1.

    Args:
        direction: Direction codes (H, W) from obtain_direction()
        magnitude: Gradient magnitude (H, W), overwritten with the result

    Returns:
        magnitude: The same array, suppressed

    Raises:
        ShapeMismatchError: If the grids differ in shape
        UnsupportedParameterError: If a direction code is not in 0..3
    """
    check_same_shape(direction.shape, magnitude.shape, "magnitude")
    if not np.isin(direction, list(NEIGHBOUR_OFFSETS)).all():
        raise UnsupportedParameterError("Unexpected direction code in non-maximum suppression")

    h, w = magnitude.shape
    codes = direction.tolist()
    vals = magnitude.tolist()

    for i in range(h):
        row_edge = i == 0 or i == h - 1
        for j in range(w):
            code = codes[i][j]
            v = vals[i][j]
            on_border = row_edge or j == 0 or j == w - 1
            if code == HORIZONTAL:
                on_border = j == 0 or j == w - 1
            elif code == VERTICAL:
                on_border = row_edge

            if on_border:
                keep = code == BOTTOM
            else:
                (di1, dj1), (di2, dj2) = NEIGHBOUR_OFFSETS[code]
                keep = v > vals[i + di1][j + dj1] and v > vals[i + di2][j + dj2]
            vals[i][j] = min(max(v, 0.0), 1.0) if keep else 0.0

    magnitude[...] = vals
    return magnitude
