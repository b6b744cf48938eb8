"""
Visualization module.

Draws grids and Canny intermediate stages with matplotlib.
"""

from .image_grid import plot_image_grid, plot_canny_stages

__all__ = ['plot_image_grid', 'plot_canny_stages']
