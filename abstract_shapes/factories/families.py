"""
Concrete factory families.
"""

from ..config.settings import ShapeFamily
from ..shapes.base import Shape
from ..shapes.implementations import Circle, Ellipse, Rectangle, Square
from .base import Factory


class SimpleShapeFactory(Factory):
    """Builds Circles (curved) and Squares (straight)."""

    family = ShapeFamily.SIMPLE

    def create_curved_instance(self) -> Shape:
        return Circle(counter=self.counter)

    def create_straight_instance(self) -> Shape:
        return Square(counter=self.counter)


class RobustShapedFactory(Factory):
    """Builds Ellipses (curved) and Rectangles (straight)."""

    family = ShapeFamily.ROBUST

    def create_curved_instance(self) -> Shape:
        return Ellipse(counter=self.counter)

    def create_straight_instance(self) -> Shape:
        return Rectangle(counter=self.counter)
