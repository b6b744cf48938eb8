"""
Border handling for 2D filters.

A filter reading outside the grid asks the border policy where to read
from instead. Three policies are supported:

* Constant(v): a constant, i.e. ``vvvv|abcdefgh|vvvv``
* Reflect: periodic absolute-value reflection, i.e. ``edcb|abcdefgh|abcd``
  (index ``abs(p) % length``; identical to a mirror reflection only while
  ``|p| < length``)
* Replicate: copy the edge value, i.e. ``aaaa|abcdefgh|hhhh``
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ..errors import UnsupportedParameterError


# ============================================================================
# Border types
# ============================================================================

class BorderKind(Enum):
    """Available border policies."""
    CONSTANT = "constant"
    REFLECT = "reflect"
    REPLICATE = "replicate"


@dataclass(frozen=True)
class BorderType:
    """
    Border policy used when a filter reads outside the grid.

    Attributes:
        kind: Which policy to apply
        value: Substitute sample for CONSTANT borders (ignored otherwise)
    """
    kind: BorderKind = BorderKind.REFLECT
    value: float = 0.0

    @classmethod
    def constant(cls, value: float = 0.0) -> 'BorderType':
        return cls(BorderKind.CONSTANT, float(value))

    @classmethod
    def reflect(cls) -> 'BorderType':
        return cls(BorderKind.REFLECT)

    @classmethod
    def replicate(cls) -> 'BorderType':
        return cls(BorderKind.REPLICATE)

    @classmethod
    def from_name(cls, name: str, value: float = 0.0) -> 'BorderType':
        """
        Build a border type from its name.

        Args:
            name: 'constant', 'reflect' or 'replicate' (case-insensitive)
            value: Constant value, only used for 'constant'

        Raises:
            UnsupportedParameterError: If the name is unknown
        """
        try:
            kind = BorderKind(name.strip().lower())
        except ValueError:
            valid = ", ".join(k.value for k in BorderKind)
            raise UnsupportedParameterError(
                f"Unknown border type '{name}', expected one of: {valid}"
            ) from None
        if kind is BorderKind.CONSTANT:
            return cls.constant(value)
        return cls(kind)

    @property
    def is_constant(self) -> bool:
        return self.kind is BorderKind.CONSTANT

    def __str__(self) -> str:
        if self.is_constant:
            return f"Constant({self.value:g})"
        return self.kind.value.capitalize()


REFLECT = BorderType.reflect()
REPLICATE = BorderType.replicate()


# ============================================================================
# Coordinate resolution
# ============================================================================

def border_interpolate(p: int, length: int, border: BorderType) -> Optional[int]:
    """
    Compute the source index of an out-of-range coordinate along one axis.

    Returns None for constant borders, meaning the caller should use
    ``border.value`` instead of reading the grid.

    Example:
        >>> border_interpolate(-2, 10, REFLECT)
        2
    """
    if border.kind is BorderKind.CONSTANT:
        return None
    if border.kind is BorderKind.REFLECT:
        # abs of the truncated remainder, not Python's floored one
        return abs(p) % length
    return 0 if p < 0 else length - 1


def border_indices(length: int, before: int, after: int, border: BorderType) -> np.ndarray:
    """
    Source indices for the coordinates ``-before .. length + after - 1``.

    In-range coordinates map to themselves, the rest go through
    border_interpolate. Not defined for constant borders.
    """
    if border.is_constant:
        raise UnsupportedParameterError("Constant borders have no source indices")
    coords = range(-before, length + after)
    return np.array(
        [c if 0 <= c < length else border_interpolate(c, length, border) for c in coords],
        dtype=np.intp,
    )


def pad(
    src: np.ndarray,
    pad_rows: Tuple[int, int],
    pad_cols: Tuple[int, int],
    border: BorderType
) -> np.ndarray:
    """
    Extend a 2D grid by the given number of rows/columns on each side.

    Each axis is resolved independently, so a corner cell takes its row
    from the row policy and its column from the column policy.

    Args:
        src: Grid (H, W)
        pad_rows: (top, bottom) rows to add
        pad_cols: (left, right) columns to add
        border: Border policy

    Returns:
        padded: Grid (H + top + bottom, W + left + right)
    """
    if border.is_constant:
        return np.pad(
            src, (pad_rows, pad_cols), mode='constant', constant_values=border.value
        )

    h, w = src.shape
    rows = border_indices(h, pad_rows[0], pad_rows[1], border)
    cols = border_indices(w, pad_cols[0], pad_cols[1], border)
    return src[np.ix_(rows, cols)]
