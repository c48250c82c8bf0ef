"""
Abstract Shapes - the Abstract Factory pattern with two shape families

Client code asks an abstract Factory for a "curved" or a "straight" shape and
never names a concrete class. The concrete family is picked once:

- SIMPLE: Circle (curved), Square (straight)
- ROBUST: Ellipse (curved), Rectangle (straight)

Every shape gets a sequential id from a counter shared across all variants,
and ``draw()`` prints ``"<VariantName> <id>: draw"``.
"""

from ._version import __version__

# Package metadata
__title__ = "abstract-shapes"
__author__ = "aoaustin"
__email__ = "contact@hiddenregime.com"
__description__ = "Abstract Factory pattern illustrated with curved and straight shape families"
__license__ = "MIT"
__copyright__ = "Copyright 2025 Hidden Regime"

from .config import DemoConfig, ShapeFamily
from .demo import build_shapes, run_demo
from .factories import (
    Factory,
    RobustShapedFactory,
    SimpleShapeFactory,
    create_factory,
)
from .shapes import Circle, Ellipse, IdCounter, Rectangle, Shape, Square
from .utils.exceptions import ConfigurationError, ShapeFactoryError

# Main API exports
__all__ = [
    # Products
    "Shape",
    "Circle",
    "Square",
    "Ellipse",
    "Rectangle",
    "IdCounter",
    # Factories
    "Factory",
    "SimpleShapeFactory",
    "RobustShapedFactory",
    "create_factory",
    # Configuration
    "ShapeFamily",
    "DemoConfig",
    # Composition root
    "build_shapes",
    "run_demo",
    # Exceptions
    "ShapeFactoryError",
    "ConfigurationError",
    "__version__",
]
