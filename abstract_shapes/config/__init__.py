"""
Configuration system for abstract-shapes.

Provides the family selection and demo configuration consumed by the
composition root.
"""

from .settings import DEFAULT_ROLES, DemoConfig, ShapeFamily

__all__ = [
    "ShapeFamily",
    "DemoConfig",
    "DEFAULT_ROLES",
]
