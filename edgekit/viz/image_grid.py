"""
Visualization helpers for filter and edge-detection results.

Shows several grids side by side so intermediate stages can be compared.
"""

from typing import List, Optional, Tuple

import numpy as np
import matplotlib.pyplot as plt

from ..canny import CannyResult
from ..filter import REFLECT, CANNY_SMOOTHING_KERNEL, convolve, sobel_norm


def plot_image_grid(
    images: List[np.ndarray],
    titles: List[str],
    figsize: Tuple[int, int] = (18, 6)
) -> plt.Figure:
    """
    Create a single-row grid of images.

    Args:
        images: Arrays of shape (H, W) or (H, W, 3) with values in [0, 1].
                2D grids are drawn with a gray colormap.
        titles: One title per image
        figsize: Figure size (width, height) in inches

    Returns:
        fig: Matplotlib figure with axes hidden

    Raises:
        ValueError: If images and titles differ in length, or no image is given
    """
    if len(images) != len(titles):
        raise ValueError(
            f"Number of images ({len(images)}) must match "
            f"number of titles ({len(titles)})"
        )
    if not images:
        raise ValueError("At least one image is required")

    n_images = len(images)
    fig, axes = plt.subplots(1, n_images, figsize=figsize)

    # A single subplot is not returned as an array
    if n_images == 1:
        axes = [axes]

    for ax, img, title in zip(axes, images, titles):
        if img.ndim == 2:
            ax.imshow(img, cmap='gray', vmin=0.0, vmax=1.0)
        else:
            ax.imshow(np.clip(img, 0.0, 1.0))
        ax.axis('off')
        ax.set_title(title, fontsize=14, pad=10)

    plt.tight_layout()
    return fig


def plot_canny_stages(
    gray: np.ndarray,
    result: CannyResult,
    figsize: Optional[Tuple[int, int]] = None
) -> plt.Figure:
    """
    Plot input, smoothed input, gradient norm and final edges.

    The smoothing and gradient panels are recomputed with the border policy
    stored in the result's config (reflect if it has none).
    """
    border = result.config.border if result.config is not None else REFLECT
    smoothed = convolve(gray, CANNY_SMOOTHING_KERNEL, border)
    gnorm = sobel_norm(smoothed, 3, 2, border)
    peak = gnorm.max() if gnorm.size else 0.0
    if peak > 0:
        gnorm = gnorm / peak

    return plot_image_grid(
        [gray, smoothed, gnorm, result.edges],
        [
            'Input',
            'Smoothed',
            'Gradient norm',
            f'Edges [{result.low_threshold:.2f}, {result.high_threshold:.2f}]',
        ],
        figsize=figsize or (24, 6),
    )
