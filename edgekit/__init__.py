"""
edgekit - 2D image filtering and Canny edge detection on numpy grids.

Contains a border-aware convolution primitive with Gaussian, mean and Sobel
filters, and a Canny edge detector with histogram-based hysteresis
thresholds.

Example:
    >>> from edgekit import imread, rgb2gray, canny_edge, REFLECT
    >>> gray = rgb2gray(imread("lenna.png"))
    >>> edges = canny_edge(gray, 0.5, 0.05, REFLECT)
"""

from .errors import EdgeKitError, ShapeMismatchError, UnsupportedParameterError
from .filter import (
    BorderKind,
    BorderType,
    REFLECT,
    REPLICATE,
    border_interpolate,
    convolve,
    gaussian_kernel,
    mean_kernel,
    sobel_kernel,
    gaussian_smooth,
    mean_smooth,
    sobel,
    sobel_norm
)
from .canny import (
    canny_edge,
    CannyEdgeDetector,
    CannyConfig,
    CannyResult
)
from .color import rgb2gray, histeq
from .io import imread, imsave, imsave_gray
from .utils import max_diff, f2u

__version__ = "0.1.0"

__all__ = [
    'EdgeKitError',
    'ShapeMismatchError',
    'UnsupportedParameterError',
    'BorderKind',
    'BorderType',
    'REFLECT',
    'REPLICATE',
    'border_interpolate',
    'convolve',
    'gaussian_kernel',
    'mean_kernel',
    'sobel_kernel',
    'gaussian_smooth',
    'mean_smooth',
    'sobel',
    'sobel_norm',
    'canny_edge',
    'CannyEdgeDetector',
    'CannyConfig',
    'CannyResult',
    'rgb2gray',
    'histeq',
    'imread',
    'imsave',
    'imsave_gray',
    'max_diff',
    'f2u'
]
