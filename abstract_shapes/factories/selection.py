"""
Family selection for the composition root.

Maps a ShapeFamily to the concrete factory that builds it. This is the only
place in the package that names a concrete factory class.
"""

import logging
from typing import Dict, Optional, Type, Union

from ..config.settings import ShapeFamily
from ..shapes.counter import IdCounter
from .base import Factory
from .families import RobustShapedFactory, SimpleShapeFactory

logger = logging.getLogger(__name__)

FAMILY_FACTORIES: Dict[ShapeFamily, Type[Factory]] = {
    ShapeFamily.SIMPLE: SimpleShapeFactory,
    ShapeFamily.ROBUST: RobustShapedFactory,
}


def create_factory(
    family: Union[ShapeFamily, str, None] = None,
    counter: Optional[IdCounter] = None,
) -> Factory:
    """
    Create the concrete factory for a shape family.

    Args:
        family: Family to build, by member or name. None selects SIMPLE.
        counter: Id source passed to the factory (process-wide by default)

    Returns:
        Factory for the selected family

    Raises:
        ConfigurationError: If family names no known family
    """
    selected = ShapeFamily.resolve(family)
    factory = FAMILY_FACTORIES[selected](counter=counter)
    logger.debug(f"Selected {type(factory).__name__} for {selected.name} family")
    return factory
