"""
Percentile-style threshold estimation.

Instead of absolute cutoffs the caller says "the top X% of values are strong
edges" and "the bottom Y% are noise". Both thresholds are read off a
normalized histogram of the values, in steps of one bucket width.
"""

from typing import Tuple

import numpy as np


def histogram(src: np.ndarray, bins: int = 100) -> np.ndarray:
    """
    Normalized histogram of a grid with values in [0, 1].

    Buckets have width 1 / bins; a value v falls into bucket floor(v * bins),
    except v == 1.0 which is counted in the top bucket.

    Args:
        src: Grid with values in [0, 1]
        bins: Number of buckets

    Returns:
        hist: (bins,) array of probabilities summing to 1 (all zeros for an
              empty grid)

    Raises:
        ValueError: If bins < 1 or any value lies outside [0, 1]
    """
    if bins < 1:
        raise ValueError(f"bins must be >= 1, got {bins}")
    values = np.asarray(src, dtype=np.float64).ravel()
    if values.size == 0:
        return np.zeros(bins, dtype=np.float64)
    if np.any((values < 0.0) | (values > 1.0)) or np.isnan(values).any():
        raise ValueError("histogram() requires all values to be in [0, 1]")

    idx = np.minimum((values * bins).astype(np.intp), bins - 1)
    counts = np.bincount(idx, minlength=bins).astype(np.float64)
    return counts / values.size


def estimate_thresholds(
    hist: np.ndarray,
    max_val_percent: float,
    min_val_percent: float
) -> Tuple[float, float]:
    """
    Derive (low, high) thresholds from a normalized histogram.

    The high threshold starts at 1.0 and walks down one bucket at a time,
    spending the mass of each bucket from `max_val_percent` until nothing is
    left. The low threshold does the same upwards from 0.0 with
    `min_val_percent`. Each walk takes at most ``bins - 1`` steps. If the
    walks cross, the thresholds are swapped.

    Args:
        hist: Normalized histogram from histogram()
        max_val_percent: Fraction of values treated as strong edges
        min_val_percent: Fraction of values treated as noise

    Returns:
        (low, high)
    """
    bins = len(hist)
    step = 1.0 / bins

    high = 1.0
    remaining = max_val_percent
    for i in range(bins - 1):
        remaining -= hist[bins - 1 - i]
        high -= step
        if remaining <= 0.0:
            break

    low = 0.0
    remaining = min_val_percent
    for i in range(bins - 1):
        remaining -= hist[i]
        low += step
        if remaining <= 0.0:
            break

    if low > high:
        low, high = high, low
    return float(low), float(high)
