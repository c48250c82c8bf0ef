"""
Concrete shape variants.

Curved variants sample their outline from a parametric ellipse; straight
variants sample it along the perimeter of an axis-aligned rectangle.
"""

import numpy as np

from .base import CURVED, STRAIGHT, Shape


def _ellipse_outline(width: float, height: float, n_points: int) -> np.ndarray:
    theta = np.linspace(0.0, 2.0 * np.pi, n_points, endpoint=False)
    return np.column_stack([0.5 * width * np.cos(theta), 0.5 * height * np.sin(theta)])


def _rectangle_outline(width: float, height: float, n_points: int) -> np.ndarray:
    # Walk the perimeter counter-clockwise from the lower-left corner
    half_w, half_h = 0.5 * width, 0.5 * height
    corners = np.array(
        [
            [-half_w, -half_h],
            [half_w, -half_h],
            [half_w, half_h],
            [-half_w, half_h],
            [-half_w, -half_h],
        ]
    )
    edge_lengths = np.linalg.norm(np.diff(corners, axis=0), axis=1)
    cumulative = np.concatenate([[0.0], np.cumsum(edge_lengths)])
    distances = np.linspace(0.0, cumulative[-1], n_points, endpoint=False)

    x = np.interp(distances, cumulative, corners[:, 0])
    y = np.interp(distances, cumulative, corners[:, 1])
    return np.column_stack([x, y])


class Circle(Shape):
    """Curved product of the simple family."""

    role = CURVED

    def outline(self, n_points: int = 64) -> np.ndarray:
        return _ellipse_outline(1.0, 1.0, n_points)


class Square(Shape):
    """Straight product of the simple family."""

    role = STRAIGHT

    def outline(self, n_points: int = 64) -> np.ndarray:
        return _rectangle_outline(1.0, 1.0, n_points)


class Ellipse(Shape):
    """Curved product of the robust family."""

    role = CURVED

    def outline(self, n_points: int = 64) -> np.ndarray:
        return _ellipse_outline(2.0, 1.0, n_points)


class Rectangle(Shape):
    """Straight product of the robust family."""

    role = STRAIGHT

    def outline(self, n_points: int = 64) -> np.ndarray:
        return _rectangle_outline(2.0, 1.0, n_points)
