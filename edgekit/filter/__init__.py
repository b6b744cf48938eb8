"""
2D filtering module.

This module provides:
1. Border policies for reading outside a grid (Constant, Reflect, Replicate)
2. A border-aware convolution primitive
3. Gaussian, mean and Sobel kernels and the filters built on them
"""

from .border import (
    BorderKind,
    BorderType,
    REFLECT,
    REPLICATE,
    border_interpolate,
    border_indices,
    pad
)

from .convolution import convolve

from .kernels import (
    CANNY_SMOOTHING_KERNEL,
    gaussian_kernel,
    mean_kernel,
    sobel_kernel,
    gaussian_smooth,
    mean_smooth,
    sobel,
    sobel_norm
)

__all__ = [
    # Borders
    'BorderKind',
    'BorderType',
    'REFLECT',
    'REPLICATE',
    'border_interpolate',
    'border_indices',
    'pad',
    # Convolution
    'convolve',
    # Kernels and filters
    'CANNY_SMOOTHING_KERNEL',
    'gaussian_kernel',
    'mean_kernel',
    'sobel_kernel',
    'gaussian_smooth',
    'mean_smooth',
    'sobel',
    'sobel_norm'
]
