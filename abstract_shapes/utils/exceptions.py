"""
Exception hierarchy for abstract-shapes package.

Allocation failures are not wrapped: a MemoryError raised while building a
shape propagates unchanged.
"""


class ShapeFactoryError(Exception):
    """Base exception for all abstract-shapes errors."""

    pass


class ConfigurationError(ShapeFactoryError):
    """Raised for unknown shape families, unknown product roles, or invalid demo settings."""

    pass
