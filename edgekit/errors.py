"""
Exceptions raised by the filtering and edge-detection core.

Both concrete errors also derive from ValueError, so callers that only
guard against bad arguments keep working.
"""


class EdgeKitError(Exception):
    """Base class for all edgekit errors."""


class ShapeMismatchError(EdgeKitError, ValueError):
    """An output (or companion) grid does not have the shape of the input."""


class UnsupportedParameterError(EdgeKitError, ValueError):
    """A kernel size, derivative order, norm or similar selector is not supported."""


def check_same_shape(expected, actual, what: str = "out") -> None:
    """Raise ShapeMismatchError unless both shapes are identical."""
    if tuple(expected) != tuple(actual):
        raise ShapeMismatchError(
            f"{what} shape {tuple(actual)} doesn't match input shape {tuple(expected)}"
        )
