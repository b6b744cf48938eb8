"""
Color transformation and enhancement.

Thin helpers that turn decoded RGB images into the grayscale grids the
filters work on.
"""

from typing import Optional

import numpy as np

from .errors import UnsupportedParameterError, check_same_shape
from .utils import f2u

RGB_WEIGHTS = np.array([0.299, 0.587, 0.114])


def rgb2gray(img: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Convert an RGB image to grayscale.

    The weights are 0.299, 0.587 and 0.114 for red, green and blue.

    Args:
        img: RGB image (H, W, 3)
        out: Optional output buffer (H, W)

    Returns:
        gray: Grayscale grid (H, W)

    Raises:
        UnsupportedParameterError: If img is not (H, W, 3)
        ShapeMismatchError: If `out` is not (H, W)
    """
    img = np.asarray(img, dtype=np.float64)
    if img.ndim != 3 or img.shape[2] != 3:
        raise UnsupportedParameterError(f"Expected an (H, W, 3) image, got shape {img.shape}")
    gray = img @ RGB_WEIGHTS
    if out is None:
        return gray
    check_same_shape(img.shape[:2], out.shape)
    out[...] = gray
    return out


def histeq(img: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Histogram equalization of a grayscale grid with values in [0, 1].

    Values are binned to 8 bits and replaced by the cumulative distribution
    of their bin.
    """
    img = np.asarray(img, dtype=np.float64)
    if img.ndim != 2:
        raise UnsupportedParameterError(f"Expected a 2D grid, got shape {img.shape}")
    if out is not None:
        check_same_shape(img.shape, out.shape)
    else:
        out = np.zeros(img.shape, dtype=np.float64)
    if img.size == 0:
        return out

    levels = f2u(img)
    cdf = np.cumsum(np.bincount(levels.ravel(), minlength=256)).astype(np.float64)
    cdf /= cdf[-1]
    out[...] = cdf[levels]
    return out
