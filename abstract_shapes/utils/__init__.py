"""
Utility classes for abstract-shapes package.

Provides the custom exceptions used across the package.
"""

from .exceptions import ConfigurationError, ShapeFactoryError

__all__ = [
    "ShapeFactoryError",
    "ConfigurationError",
]
