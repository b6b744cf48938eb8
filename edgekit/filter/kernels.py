"""
Kernel generators and the filters built on them.

Every filter here is a thin wrapper that builds a kernel and hands it to
convolve(). Each accepts an optional `out` buffer the same way convolve()
does.
"""

from typing import Optional

import numpy as np

from ..errors import UnsupportedParameterError
from .border import BorderType, REFLECT
from .convolution import convolve


# ============================================================================
# Kernels
# ============================================================================

SOBEL_X = np.array([
    [-1.0, 0.0, 1.0],
    [-2.0, 0.0, 2.0],
    [-1.0, 0.0, 1.0],
])

# Classical 5x5 discrete Gaussian approximation used to pre-smooth Canny input
CANNY_SMOOTHING_KERNEL = np.array([
    [2.0, 4.0, 5.0, 4.0, 2.0],
    [4.0, 9.0, 12.0, 9.0, 4.0],
    [5.0, 12.0, 15.0, 12.0, 5.0],
    [4.0, 9.0, 12.0, 9.0, 4.0],
    [2.0, 4.0, 5.0, 4.0, 2.0],
]) / 159.0

SUPPORTED_NORMS = (2, 1, -1)


def _check_ksize(ksize: int) -> None:
    if ksize < 1 or ksize % 2 == 0:
        raise UnsupportedParameterError(
            f"Kernel size must be a positive odd integer, got {ksize}"
        )


def gaussian_kernel(ksize: int) -> np.ndarray:
    """
    Generate a normalized Gaussian kernel with sigma fixed at 1.

    Cell values are ``exp(-((x - cx)^2 + (y - cy)^2) / 2)`` divided by their
    sum. The sigma does not grow with `ksize`: larger kernels only extend
    the support with ever smaller tail weights.

    Args:
        ksize: Odd kernel size

    Returns:
        kernel: (ksize, ksize) array summing to 1
    """
    _check_ksize(ksize)
    c = ksize // 2
    offsets = np.arange(ksize) - c
    sqr_dist = offsets[:, None] ** 2 + offsets[None, :] ** 2
    kernel = np.exp(-sqr_dist / 2.0)
    return kernel / kernel.sum()


def mean_kernel(ksize: int) -> np.ndarray:
    """Box kernel with every cell equal to 1 / ksize^2."""
    _check_ksize(ksize)
    return np.full((ksize, ksize), 1.0 / (ksize * ksize))


def sobel_kernel(ksize: int, dx: int, dy: int) -> np.ndarray:
    """
    Sobel derivative kernel.

    Only the classical 3x3 operator and first-order derivatives along a
    single axis (dx=1, dy=0 or dx=0, dy=1) are supported. x runs along
    columns, so the dy kernel is the transpose of the dx one.

    Raises:
        UnsupportedParameterError: For any other size or derivative orders
    """
    if ksize != 3:
        raise UnsupportedParameterError(f"Only ksize=3 is supported for Sobel, got {ksize}")
    if sorted((dx, dy)) != [0, 1]:
        raise UnsupportedParameterError(
            f"Only first order gradient along one axis is supported, got dx={dx}, dy={dy}"
        )
    return SOBEL_X.copy() if dx == 1 else SOBEL_X.T.copy()


# ============================================================================
# Filters
# ============================================================================

def gaussian_smooth(
    src: np.ndarray,
    ksize: int,
    border: BorderType = REFLECT,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """Smooth a grid with gaussian_kernel(ksize)."""
    return convolve(src, gaussian_kernel(ksize), border, out)


def mean_smooth(
    src: np.ndarray,
    ksize: int,
    border: BorderType = REFLECT,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    Smooth a grid with a box kernel.

    Example:
        >>> a = np.zeros((3, 3)); a[1, 1] = 1.0
        >>> mean_smooth(a, 3, BorderType.constant(0.0))  # every cell 1/9
    """
    return convolve(src, mean_kernel(ksize), border, out)


def sobel(
    src: np.ndarray,
    ksize: int,
    dx: int,
    dy: int,
    border: BorderType = REFLECT,
    out: Optional[np.ndarray] = None
) -> np.ndarray:
    """
    First-order Sobel derivative of a grid.

    Args:
        src: Source grid (H, W)
        ksize: Kernel size, must be 3
        dx: Order of the derivative along columns
        dy: Order of the derivative along rows
        border: Border policy
        out: Optional output buffer (H, W)
    """
    return convolve(src, sobel_kernel(ksize, dx, dy), border, out)


def sobel_norm(
    src: np.ndarray,
    ksize: int,
    norm: int = 2,
    border: BorderType = REFLECT
) -> np.ndarray:
    """
    Combine both Sobel derivatives into a gradient strength map.

    Args:
        src: Source grid (H, W)
        ksize: Sobel kernel size (3)
        norm: 2 for sqrt(gx^2 + gy^2), 1 for |gx| + |gy|,
              -1 for the infinity norm max(|gx|, |gy|)
        border: Border policy

    Returns:
        gnorm: Gradient norm (H, W)

    Raises:
        UnsupportedParameterError: If `norm` is not 2, 1 or -1
    """
    if norm not in SUPPORTED_NORMS:
        raise UnsupportedParameterError(
            f"Norm = {norm} is not supported, expected one of {SUPPORTED_NORMS}"
        )
    gx = sobel(src, ksize, 1, 0, border)
    gy = sobel(src, ksize, 0, 1, border)

    if norm == 2:
        return np.sqrt(gx * gx + gy * gy)
    if norm == 1:
        return np.abs(gx) + np.abs(gy)
    return np.maximum(np.abs(gx), np.abs(gy))
