"""
Base factory class.

A Factory builds the two products of one shape family: a curved one and a
straight one. Client code holds a Factory reference and never names a
concrete shape class, so switching families only touches the place where the
factory is chosen.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from ..shapes.base import CURVED, STRAIGHT, Shape
from ..shapes.counter import IdCounter
from ..utils.exceptions import ConfigurationError


class Factory(ABC):
    """
    Abstract base class for shape factories.

    Concrete factories implement ``create_curved_instance`` and
    ``create_straight_instance``. A factory always maps each role to the same
    variant for its whole lifetime.
    """

    family = None

    def __init__(self, counter: Optional[IdCounter] = None):
        """Initialize factory.

        Args:
            counter: Id source handed to every shape built here. None uses
                the process-wide counter.
        """
        self.counter = counter
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def create_curved_instance(self) -> Shape:
        """Build a new instance of this family's curved product."""
        pass

    @abstractmethod
    def create_straight_instance(self) -> Shape:
        """Build a new instance of this family's straight product."""
        pass

    def create_instance(self, role: str) -> Shape:
        """
        Build a new product for the given role.

        Args:
            role: ``"curved"`` or ``"straight"``

        Returns:
            Newly created shape, owned by the caller

        Raises:
            ConfigurationError: If role is not a known product role
        """
        if role == CURVED:
            shape = self.create_curved_instance()
        elif role == STRAIGHT:
            shape = self.create_straight_instance()
        else:
            raise ConfigurationError(
                f"role must be one of {[CURVED, STRAIGHT]}, got {role!r}"
            )

        self.logger.debug(f"Created {role} shape: {shape!r}")
        return shape

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(counter={self.counter!r})"
