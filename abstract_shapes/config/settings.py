"""
Configuration classes for abstract-shapes package.

Provides the shape family selection and the dataclass-based configuration
for the demo composition root.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from ..shapes.base import CURVED, ROLES, STRAIGHT
from ..utils.exceptions import ConfigurationError


class ShapeFamily(Enum):
    """Product families a factory can build."""

    SIMPLE = "simple"  # Circle + Square
    ROBUST = "robust"  # Ellipse + Rectangle

    @classmethod
    def resolve(cls, value: Union["ShapeFamily", str, None]) -> "ShapeFamily":
        """
        Resolve a family selection, defaulting to SIMPLE when unset.

        Args:
            value: Enum member, case-insensitive family name, or None

        Returns:
            The selected ShapeFamily

        Raises:
            ConfigurationError: If the value names no known family
        """
        if value is None:
            return cls.SIMPLE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip()
            if not name:
                return cls.SIMPLE
            for family in cls:
                if name.lower() == family.value:
                    return family

        valid = [family.name for family in cls]
        raise ConfigurationError(f"family must be one of {valid} or unset, got {value!r}")


DEFAULT_ROLES: Tuple[str, ...] = (CURVED, STRAIGHT, CURVED)


@dataclass
class DemoConfig:
    """Configuration for the abstract factory demo.

    Attributes:
        family: Shape family the composition root builds from
            - SIMPLE: Circle (curved) and Square (straight)
            - ROBUST: Ellipse (curved) and Rectangle (straight)
        roles: Product roles requested from the factory, in order
    """

    family: Optional[ShapeFamily] = ShapeFamily.SIMPLE
    roles: Tuple[str, ...] = DEFAULT_ROLES

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.family = ShapeFamily.resolve(self.family)
        self.roles = tuple(self.roles)

        if not self.roles:
            raise ConfigurationError("roles must contain at least one role")

        invalid = [role for role in self.roles if role not in ROLES]
        if invalid:
            raise ConfigurationError(
                f"roles must each be one of {list(ROLES)}, got {invalid}"
            )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary for serialization.

        Returns:
            Dictionary representation of configuration
        """
        return {
            "family": self.family.value,
            "roles": list(self.roles),
        }

    @classmethod
    def from_dict(cls, config_dict: dict) -> "DemoConfig":
        """Create configuration from dictionary.

        Args:
            config_dict: Dictionary with configuration parameters

        Returns:
            New DemoConfig instance
        """
        return cls(**config_dict)
