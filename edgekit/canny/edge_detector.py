"""
Canny Edge Detection on grayscale grids.

Pipeline:
1. Smooth with the classical 5x5 discrete Gaussian
2. Sobel gradients and their magnitude
3. Quantize the gradient direction and apply non-maximum suppression
4. Estimate low/high thresholds from the histogram of the thinned magnitude
5. Hysteresis, then binarize to {0, 1}

canny_edge() is the plain functional entry point; CannyEdgeDetector wraps
it behind a validated configuration and returns a CannyResult.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np

from ..errors import check_same_shape
from ..filter import BorderType, REFLECT, CANNY_SMOOTHING_KERNEL, convolve, sobel
from ..utils import setup_logger
from .direction import obtain_direction
from .hysteresis import max_min_suppression
from .nms import edge_nms
from .thresholds import estimate_thresholds, histogram

logger = setup_logger(__name__)

DEFAULT_HISTOGRAM_BINS = 100


# ============================================================================
# Pipeline
# ============================================================================

def _canny(
    src: np.ndarray,
    max_val_percent: float,
    min_val_percent: float,
    border: BorderType,
    out: np.ndarray,
    bins: int,
    full_connectivity: bool
) -> Tuple[float, float]:
    """Run the pipeline into `out` and return the (low, high) thresholds used."""
    # smooth the image, `out` doubles as the working buffer
    convolve(src, CANNY_SMOOTHING_KERNEL, border, out)

    gx = sobel(out, 3, 1, 0, border)
    gy = sobel(out, 3, 0, 1, border)
    out[...] = np.sqrt(gx * gx + gy * gy)

    direction = obtain_direction(gx, gy)
    edge_nms(direction, out)

    low, high = estimate_thresholds(
        histogram(out, bins), max_val_percent, min_val_percent
    )
    logger.debug("Estimated thresholds low=%.3f high=%.3f", low, high)

    max_min_suppression(out, low, high, full_connectivity)
    out[out != 0.0] = 1.0
    return low, high


def canny_edge(
    src: np.ndarray,
    max_val_percent: float,
    min_val_percent: float,
    border: BorderType = REFLECT,
    out: Optional[np.ndarray] = None,
    full_connectivity: bool = False
) -> np.ndarray:
    """
    Canny edge detector with percentile-based thresholds.

    The caller must keep ``max_val_percent + min_val_percent <= 1.0``; this
    is not checked here (CannyConfig does check it).

    Args:
        src: Grayscale grid (H, W) with values in [0, 1]
        max_val_percent: Fraction of the thinned gradient values treated as
            strong edges
        min_val_percent: Fraction treated as noise
        border: Border policy for smoothing and gradients
        out: Optional output buffer (H, W), reused for every stage
        full_connectivity: Use 8-connected hysteresis

    Returns:
        edges: Grid (H, W) with 1.0 on edges and 0.0 elsewhere

    Raises:
        ShapeMismatchError: If `out` does not have the shape of `src`

    Example:
        >>> gray = rgb2gray(imread("lenna.png"))
        >>> edges = canny_edge(gray, 0.5, 0.05, REFLECT)
    """
    if out is not None:
        check_same_shape(np.shape(src), out.shape)
    else:
        out = np.zeros(np.shape(src), dtype=np.float64)

    _canny(
        src, max_val_percent, min_val_percent, border, out,
        DEFAULT_HISTOGRAM_BINS, full_connectivity
    )
    return out


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class CannyConfig:
    """
    Configuration for Canny edge detection.

    Attributes:
        max_val_percent: Fraction of values treated as strong edges (default: 0.5)
        min_val_percent: Fraction of values treated as noise (default: 0.05)
        border: Border policy, a BorderType or its name (default: reflect)
        histogram_bins: Buckets used for threshold estimation (default: 100)
        full_connectivity: 8-connected hysteresis instead of the up-left
            neighbourhood (default: False)
    """
    max_val_percent: float = 0.5
    min_val_percent: float = 0.05
    border: Union[BorderType, str] = field(default_factory=BorderType.reflect)
    histogram_bins: int = DEFAULT_HISTOGRAM_BINS
    full_connectivity: bool = False

    def __post_init__(self):
        """Validate configuration parameters."""
        if isinstance(self.border, str):
            self.border = BorderType.from_name(self.border)
        if not 0.0 < self.max_val_percent <= 1.0:
            raise ValueError(
                f"max_val_percent must be in (0, 1], got {self.max_val_percent}"
            )
        if not 0.0 <= self.min_val_percent < 1.0:
            raise ValueError(
                f"min_val_percent must be in [0, 1), got {self.min_val_percent}"
            )
        if self.max_val_percent + self.min_val_percent > 1.0:
            raise ValueError(
                f"max_val_percent + min_val_percent must be <= 1.0, got "
                f"{self.max_val_percent} + {self.min_val_percent}"
            )
        if self.histogram_bins < 2:
            raise ValueError(f"histogram_bins must be >= 2, got {self.histogram_bins}")

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form, suitable for JSON."""
        return {
            'max_val_percent': self.max_val_percent,
            'min_val_percent': self.min_val_percent,
            'border': self.border.kind.value,
            'border_value': self.border.value,
            'histogram_bins': self.histogram_bins,
            'full_connectivity': self.full_connectivity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CannyConfig':
        """Build a config from to_dict() output; missing keys take defaults."""
        params = dict(data)
        border = params.pop('border', None)
        border_value = params.pop('border_value', 0.0)
        if isinstance(border, str):
            params['border'] = BorderType.from_name(border, border_value)
        elif border is not None:
            params['border'] = border
        return cls(**params)


# ============================================================================
# Results
# ============================================================================

@dataclass
class CannyResult:
    """
    Results from Canny edge detection.

    Attributes:
        edges: Binary edge grid (H, W) with float values {0.0, 1.0}
        low_threshold: Weak-edge threshold used by hysteresis
        high_threshold: Strong-edge threshold used by hysteresis
        config: Configuration used for detection
    """
    edges: np.ndarray
    low_threshold: float
    high_threshold: float
    config: Optional[CannyConfig] = None

    def get_edge_pixel_count(self) -> int:
        """Get number of edge pixels."""
        return int((self.edges > 0).sum())

    def get_edge_ratio(self) -> float:
        """Get ratio of edge pixels to total pixels."""
        total = self.edges.size
        return self.get_edge_pixel_count() / total if total > 0 else 0.0

    def __str__(self) -> str:
        edge_pct = self.get_edge_ratio() * 100
        return (
            f"CannyResult(edges={self.get_edge_pixel_count()} pixels, "
            f"{edge_pct:.2f}% of image, "
            f"thresholds=[{self.low_threshold:.2f}, {self.high_threshold:.2f}])"
        )


# ============================================================================
# Edge Detector
# ============================================================================

class CannyEdgeDetector:
    """
    Configured Canny edge detector.

    Example:
        >>> config = CannyConfig(max_val_percent=0.5, min_val_percent=0.05)
        >>> detector = CannyEdgeDetector(config)
        >>> result = detector.detect_edges(gray)
        >>> edge_map = result.edges  # Binary edge map
    """

    def __init__(self, config: Optional[CannyConfig] = None):
        """
        Initialize Canny edge detector.

        Args:
            config: Configuration for edge detection. If None, uses defaults.
        """
        self.config = config or CannyConfig()

    def detect_edges(self, gray: np.ndarray, out: Optional[np.ndarray] = None) -> CannyResult:
        """
        Detect edges in a grayscale grid.

        Args:
            gray: Grayscale grid (H, W) with values in [0, 1]
            out: Optional output buffer (H, W)

        Returns:
            result: CannyResult with the binary edge grid and thresholds

        Raises:
            ValueError: If gray is not 2D
            ShapeMismatchError: If `out` does not have the shape of `gray`
        """
        gray = np.asarray(gray, dtype=np.float64)
        if gray.ndim != 2:
            raise ValueError(f"Input must be a 2D array (H, W), got shape {gray.shape}")
        if out is not None:
            check_same_shape(gray.shape, out.shape)
        else:
            out = np.zeros(gray.shape, dtype=np.float64)

        cfg = self.config
        low, high = _canny(
            gray, cfg.max_val_percent, cfg.min_val_percent, cfg.border, out,
            cfg.histogram_bins, cfg.full_connectivity
        )
        result = CannyResult(edges=out, low_threshold=low, high_threshold=high, config=cfg)
        logger.debug("%s", result)
        return result
