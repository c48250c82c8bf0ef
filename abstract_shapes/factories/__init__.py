"""
Factory patterns for abstract-shapes.

Provides the abstract Factory interface, the two concrete shape families,
and the function that selects a family once at startup.
"""

from .base import Factory
from .families import RobustShapedFactory, SimpleShapeFactory
from .selection import FAMILY_FACTORIES, create_factory

__all__ = [
    "Factory",
    "SimpleShapeFactory",
    "RobustShapedFactory",
    "FAMILY_FACTORIES",
    "create_factory",
]
