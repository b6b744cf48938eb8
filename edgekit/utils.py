"""Shared utilities: array comparison, float/byte conversion, logging."""

import logging
from typing import Optional, Union

import numpy as np


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return a logger with a single stream handler.

    Library modules leave `level` unset so the logger follows its parents;
    applications pass one (or raise the "edgekit" logger) to see output.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    return logger


# ---------------------------------------------------------------------------
# Array helpers
# ---------------------------------------------------------------------------


def max_diff(a: np.ndarray, b: np.ndarray) -> float:
    """
    Maximum absolute elementwise difference between two arrays.

    Mostly used by tests to compare filter output against expected values.

    Example:
        >>> max_diff(np.array([0.12, 0.24, 0.35]), np.array([0.125, 0.22, 0.34]))
        0.02...
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != b.shape:
        raise ValueError(f"Cannot compare shapes {a.shape} and {b.shape}")
    if a.size == 0:
        return 0.0
    return float(np.max(np.abs(a - b)))


def f2u(v: Union[float, np.ndarray]) -> Union[int, np.ndarray]:
    """
    Map a [0, 1] float (or array of floats) to an 8-bit value.

    Rounds half up: ``f2u(0.9) == 230``.
    """
    if np.isscalar(v):
        return int(min(max(v * 255.0 + 0.5, 0.0), 255.0))
    scaled = np.asarray(v, dtype=np.float64) * 255.0 + 0.5
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8)
