"""
Border-aware 2D convolution.

This is the single computational primitive shared by every filter in the
package. The kernel is applied as a correlation (it is not flipped) and no
normalization is done here: callers pass pre-normalized kernels.
"""

from typing import Optional

import numpy as np

from ..errors import UnsupportedParameterError, check_same_shape
from .border import BorderType, REFLECT, pad


def _as_grid(array: np.ndarray, name: str) -> np.ndarray:
    grid = np.asarray(array, dtype=np.float64)
    if grid.ndim != 2:
        raise UnsupportedParameterError(
            f"{name} must be a 2D array (H, W), got shape {grid.shape}"
        )
    return grid


def convolve(
    src: np.ndarray,
    kernel: np.ndarray,
    border: BorderType = REFLECT,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Apply a linear filter to a 2D grid.

    For every output cell (i, j) this accumulates
    ``src_at(i + ki - cx, j + kj - cy) * kernel[ki, kj]`` over all kernel
    cells, where (cx, cy) is the kernel center and ``src_at`` goes through
    the border policy for coordinates outside the grid. Cost is
    O(H * W * Kh * Kw); there is no separable shortcut.

    Args:
        src: Source grid (H, W). Multi-channel images must be filtered per
             channel by the caller.
        kernel: Odd-sized 2D kernel (Kh, Kw)
        border: How to read outside the grid. REFLECT by default.
        out: Optional output buffer of shape (H, W). When given, results are
             written into it and it is returned.

    Returns:
        out: Filtered grid (H, W), float64 unless `out` has another dtype

    Raises:
        UnsupportedParameterError: If src/kernel are not 2D or the kernel
            has an even dimension
        ShapeMismatchError: If `out` does not have the shape of `src`

    Example:
        >>> a = np.zeros((5, 5)); a[1:4, 1:4] = 1.0
        >>> k = np.array([[1., 2., 1.], [2., 4., 2.], [1., 2., 1.]])
        >>> convolve(a, k, BorderType.constant(0.0))[2, 2]
        16.0
    """
    src = _as_grid(src, "src")
    kernel = _as_grid(kernel, "kernel")

    kh, kw = kernel.shape
    if kh % 2 == 0 or kw % 2 == 0:
        raise UnsupportedParameterError(
            f"Kernel dimensions must be odd, got {kernel.shape}"
        )
    if out is not None:
        check_same_shape(src.shape, out.shape)
    else:
        out = np.zeros(src.shape, dtype=np.float64)

    h, w = src.shape
    if h == 0 or w == 0:
        return out

    cx, cy = kh // 2, kw // 2
    padded = pad(src, (cx, kh - 1 - cx), (cy, kw - 1 - cy), border)

    acc = np.zeros((h, w), dtype=np.float64)
    for ki in range(kh):
        for kj in range(kw):
            weight = kernel[ki, kj]
            if weight != 0.0:
                acc += weight * padded[ki:ki + h, kj:kj + w]

    out[...] = acc
    return out
