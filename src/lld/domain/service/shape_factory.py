"""String-keyed shape construction.

Keys are matched exactly and case-sensitively.  The recognized keys
keep their historical spelling: ``"CIRCLE"`` is upper case while
``"Rectangle"`` is title case.  Normalizing them would change which
inputs are accepted, so ``"RECTANGLE"`` and ``"circle"`` are *not*
recognized.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from lld.domain.model.shape import Circle, Rectangle, Shape

logger = logging.getLogger(__name__)


class ShapeKind(Enum):
    CIRCLE = "CIRCLE"
    RECTANGLE = "Rectangle"


_CONSTRUCTORS: dict[ShapeKind, Callable[[], Shape]] = {
    ShapeKind.CIRCLE: Circle,
    ShapeKind.RECTANGLE: Rectangle,
}


class ShapeFactory:

    def get_shape(self, key: str) -> Shape | None:
        """Return a new shape for *key*, or None if the key is not recognized.

        Never raises; callers must check for None before drawing.
        """
        try:
            kind = ShapeKind(key)
        except ValueError:
            logger.debug("No shape registered for key %r", key)
            return None
        return _CONSTRUCTORS[kind]()

    @staticmethod
    def supported_keys() -> list[str]:
        return [kind.value for kind in ShapeKind]
