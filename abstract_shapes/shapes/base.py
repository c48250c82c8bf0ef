"""
Base shape class.

This module defines the Shape abstraction produced by every factory family.
Each concrete variant is either a "curved" or a "straight" product:
- Curved: Circle, Ellipse
- Straight: Square, Rectangle

Every instance receives a unique sequential id when it is built. Ids come
from a single counter shared by all variants, so a Circle followed by a
Square gets ids 0 and 1, not 0 and 0.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

import numpy as np

from .counter import IdCounter, get_default_counter

CURVED = "curved"
STRAIGHT = "straight"
ROLES = (CURVED, STRAIGHT)


class Shape(ABC):
    """
    Abstract base class for shape products.

    Shapes are immutable after creation: the id is assigned once by the
    constructor and exposed read-only.

    Example usage:
        shape = factory.create_curved_instance()
        shape.draw()  # prints "Circle 0: draw"
    """

    role: str = ""

    def __init__(self, counter: Optional[IdCounter] = None):
        """Assign the next id from ``counter`` (the process-wide one by default).

        Args:
            counter: Id source to draw from
        """
        self._id = (counter or get_default_counter()).next_id()

    @property
    def id(self) -> int:
        """Sequential id assigned at creation."""
        return self._id

    @property
    def variant_name(self) -> str:
        """Name of the concrete variant, e.g. ``"Circle"``."""
        return type(self).__name__

    def draw(self, stream: Optional[TextIO] = None) -> None:
        """
        Emit ``"<VariantName> <id>: draw"`` as one line.

        Args:
            stream: Text stream to write to, standard output by default
        """
        out = stream if stream is not None else sys.stdout
        out.write(f"{self.variant_name} {self._id}: draw\n")
        out.flush()

    @abstractmethod
    def outline(self, n_points: int = 64) -> np.ndarray:
        """
        Boundary points of the canonical geometric form of this variant.

        Args:
            n_points: Number of points sampled along the boundary

        Returns:
            Array of shape (n_points, 2) with x, y coordinates
        """
        pass

    def __repr__(self) -> str:
        return f"{self.variant_name}(id={self._id})"
