"""
Composition root for the abstract factory demo.

The family is chosen exactly once, when the factory is created. Everything
after that talks only to the Factory and Shape interfaces.
"""

import logging
from typing import Optional, TextIO, Tuple

from .config.settings import DemoConfig
from .factories.selection import create_factory
from .shapes.base import Shape
from .shapes.counter import IdCounter

logger = logging.getLogger(__name__)


def build_shapes(
    config: Optional[DemoConfig] = None, counter: Optional[IdCounter] = None
) -> Tuple[Shape, ...]:
    """
    Request one shape per configured role from the selected family.

    Args:
        config: Demo configuration, defaults to DemoConfig()
        counter: Id source for the created shapes (process-wide by default)

    Returns:
        Shapes in request order
    """
    config = config or DemoConfig()
    factory = create_factory(config.family, counter=counter)
    return tuple(factory.create_instance(role) for role in config.roles)


def run_demo(
    config: Optional[DemoConfig] = None,
    stream: Optional[TextIO] = None,
    counter: Optional[IdCounter] = None,
) -> Tuple[Shape, ...]:
    """
    Build the configured shapes and draw each one in creation order.

    With the default configuration and a fresh counter, the SIMPLE family
    prints::

        Circle 0: draw
        Square 1: draw
        Circle 2: draw

    Args:
        config: Demo configuration, defaults to DemoConfig()
        stream: Where draw lines go, standard output by default
        counter: Id source for the created shapes (process-wide by default)

    Returns:
        The drawn shapes, in order
    """
    shapes = build_shapes(config, counter=counter)
    logger.info(f"Drawing {len(shapes)} shapes")

    for shape in shapes:
        shape.draw(stream=stream)

    return shapes
