"""Application service: Draw Shape use case."""

from __future__ import annotations

import logging

from lld.domain.exceptions import UnknownShapeError
from lld.domain.service.shape_factory import ShapeFactory

logger = logging.getLogger(__name__)


class DrawShapeHandler:

    def __init__(self, shape_factory: ShapeFactory) -> None:
        self._shape_factory = shape_factory

    def handle(self, key: str) -> None:
        """Draw the shape registered under *key*.

        The factory signals an unknown key with None; that outcome is
        turned into an error here instead of being drawn.
        """
        shape = self._shape_factory.get_shape(key)
        if shape is None:
            raise UnknownShapeError(
                f"Unknown shape '{key}'. "
                f"Choose from: {', '.join(self._shape_factory.supported_keys())}"
            )
        logger.debug("Drawing %s for key %r", type(shape).__name__, key)
        shape.draw()
