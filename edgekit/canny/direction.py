"""
Gradient magnitude and orientation quantization.

Orientations are classified by comparing tan(theta) = gy / gx against the
tangents of 22.5 and 67.5 degrees, which avoids an arctan per pixel:

* 0: |theta| > 67.5 (vertical gradient)
* 1: -67.5 <= theta < -22.5 (bottom band)
* 2: |theta| <= 22.5 (horizontal gradient)
* 3: 22.5 < theta <= 67.5 (top band)
"""

import numpy as np

from ..errors import check_same_shape

TAN_22_5 = 0.414213562373095
TAN_67_5 = 2.414213562373095
EPS = 1e-7

VERTICAL = 0
BOTTOM = 1
HORIZONTAL = 2
TOP = 3


def gradient_magnitude(gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    """Euclidean gradient magnitude sqrt(gx^2 + gy^2)."""
    check_same_shape(gx.shape, gy.shape, "gy")
    return np.sqrt(gx * gx + gy * gy)


def obtain_direction(gx: np.ndarray, gy: np.ndarray) -> np.ndarray:
    """
    Quantize the gradient angle of every pixel into 4 direction codes.

    Args:
        gx: Derivative along columns (H, W)
        gy: Derivative along rows (H, W)

    Returns:
        direction: int32 grid (H, W) with codes 0..3

    Raises:
        ShapeMismatchError: If gx and gy differ in shape
    """
    gx = np.asarray(gx, dtype=np.float64)
    gy = np.asarray(gy, dtype=np.float64)
    check_same_shape(gx.shape, gy.shape, "gy")

    direction = np.full(gx.shape, HORIZONTAL, dtype=np.int32)
    # gx == -EPS still divides by zero; inf lands in VERTICAL, nan in TOP
    with np.errstate(divide='ignore', invalid='ignore'):
        tan_theta = gy / (gx + EPS)
        abs_tan = np.abs(tan_theta)
        direction[(tan_theta >= 0) & (abs_tan > TAN_22_5)] = TOP
        direction[(tan_theta < 0) & (abs_tan > TAN_22_5)] = BOTTOM
        direction[abs_tan > TAN_67_5] = VERTICAL
        direction[np.isnan(tan_theta)] = TOP
    return direction
