"""
Image file I/O.

Decoding and encoding go through Pillow. Images are exchanged as float64
arrays with values in [0, 1]: (H, W, 3) for color, (H, W) for grayscale.
"""

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .errors import UnsupportedParameterError
from .utils import f2u

PathLike = Union[str, Path]


def imread(path: PathLike) -> np.ndarray:
    """
    Read an image file as an RGB float array.

    Args:
        path: Image path (any format Pillow decodes)

    Returns:
        img: (H, W, 3) float64 array in [0, 1]

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Could not load image: {path}")
    with Image.open(path) as img:
        rgb = np.asarray(img.convert('RGB'), dtype=np.float64)
    return rgb / 255.0


def imsave(img: np.ndarray, path: PathLike) -> None:
    """Save an (H, W, 3) float image in [0, 1] as 8-bit RGB."""
    img = np.asarray(img)
    if img.ndim != 3 or img.shape[2] != 3:
        raise UnsupportedParameterError(f"imsave expects an (H, W, 3) image, got shape {img.shape}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(f2u(img)).save(path)


def imsave_gray(img: np.ndarray, path: PathLike) -> None:
    """Save an (H, W) float grid in [0, 1] as an 8-bit grayscale image."""
    img = np.asarray(img)
    if img.ndim != 2:
        raise UnsupportedParameterError(f"imsave_gray expects an (H, W) grid, got shape {img.shape}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(f2u(img)).save(path)
