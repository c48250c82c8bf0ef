"""
Plotting utilities for abstract-shapes package.

Renders produced shapes side by side from their outlines, one colour per
variant, using a colorblind-friendly palette.
"""

from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..shapes.base import Shape

# Okabe-Ito colorblind-safe palette
SHAPE_COLORS = {
    'Circle': '#0072B2',     # Blue
    'Square': '#E69F00',     # Dark Orange
    'Ellipse': '#009E73',    # Bluish Green
    'Rectangle': '#CC79A7',  # Pink/Magenta
}
DEFAULT_COLOR = '#7f7f7f'

# Horizontal gap between neighbouring shapes
SHAPE_SPACING = 2.5


def plot_shapes(shapes: Sequence[Shape],
                ax: Optional[plt.Axes] = None,
                title: str = "Shapes",
                n_points: int = 128) -> plt.Figure:
    """
    Draw each shape's outline in creation order, left to right.

    Args:
        shapes: Shapes to render
        ax: Optional matplotlib axis
        title: Plot title
        n_points: Outline resolution per shape

    Returns:
        Matplotlib figure containing the plot
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(3 * max(len(shapes), 1), 3))
    else:
        fig = ax.figure

    for position, shape in enumerate(shapes):
        points = shape.outline(n_points)
        # Close the outline so the last edge is drawn
        closed = np.vstack([points, points[:1]])
        offset = position * SHAPE_SPACING
        color = SHAPE_COLORS.get(shape.variant_name, DEFAULT_COLOR)

        ax.fill(closed[:, 0] + offset, closed[:, 1], color=color, alpha=0.3)
        ax.plot(closed[:, 0] + offset, closed[:, 1], color=color, linewidth=1.5,
                label=f"{shape.variant_name} {shape.id}")
        ax.annotate(f"{shape.variant_name} {shape.id}", xy=(offset, -0.8),
                    ha='center', va='top', fontsize=9)

    ax.set_aspect('equal')
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.axis('off')
    if shapes:
        ax.set_xlim(-1.5, (len(shapes) - 1) * SHAPE_SPACING + 1.5)
        ax.set_ylim(-1.2, 1.0)

    return fig


def save_shapes_plot(shapes: Sequence[Shape], path: str, **kwargs) -> str:
    """
    Render shapes and write the figure to ``path``.

    Args:
        shapes: Shapes to render
        path: Output file; the extension picks the format
        **kwargs: Passed on to plot_shapes

    Returns:
        The path written
    """
    fig = plot_shapes(shapes, **kwargs)
    try:
        fig.savefig(path, dpi=150, bbox_inches='tight', facecolor='white')
    finally:
        plt.close(fig)
    return path
