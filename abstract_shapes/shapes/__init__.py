"""
Shape products for the abstract factory families.
"""

from .base import CURVED, ROLES, STRAIGHT, Shape
from .counter import IdCounter, get_default_counter
from .implementations import Circle, Ellipse, Rectangle, Square

__all__ = [
    "Shape",
    "Circle",
    "Square",
    "Ellipse",
    "Rectangle",
    "IdCounter",
    "get_default_counter",
    "CURVED",
    "STRAIGHT",
    "ROLES",
]
