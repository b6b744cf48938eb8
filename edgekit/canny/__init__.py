"""
Canny Edge Detection Module.

This module provides:
1. Gradient direction quantization (4 orientation classes)
2. Non-maximum suppression along the gradient direction
3. Histogram-based estimation of the hysteresis thresholds
4. Hysteresis thresholding by breadth-first flood fill
5. The full pipeline, as a function and as a configured detector
"""

from .direction import (
    TAN_22_5,
    TAN_67_5,
    gradient_magnitude,
    obtain_direction
)

from .nms import edge_nms

from .thresholds import (
    histogram,
    estimate_thresholds
)

from .hysteresis import (
    max_min_suppression,
    hysteresis
)

from .edge_detector import (
    canny_edge,
    CannyEdgeDetector,
    CannyConfig,
    CannyResult
)

__all__ = [
    # Gradient direction
    'TAN_22_5',
    'TAN_67_5',
    'gradient_magnitude',
    'obtain_direction',
    # Suppression
    'edge_nms',
    'histogram',
    'estimate_thresholds',
    'max_min_suppression',
    'hysteresis',
    # Edge detection
    'canny_edge',
    'CannyEdgeDetector',
    'CannyConfig',
    'CannyResult'
]
