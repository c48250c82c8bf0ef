"""
Visualization module for abstract-shapes.
"""

from .plotting import SHAPE_COLORS, plot_shapes, save_shapes_plot

__all__ = [
    "plot_shapes",
    "save_shapes_plot",
    "SHAPE_COLORS",
]
