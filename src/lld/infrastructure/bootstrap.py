"""Composition root — wires concrete implementations to the handlers.

CLI commands obtain their collaborators only from here.
"""

from __future__ import annotations

import logging

from lld.application.draw_shape import DrawShapeHandler
from lld.application.price_pizza import PricePizzaHandler
from lld.application.show_menu import ShowMenuHandler
from lld.domain.model.pizza import BasePizza, ExtraCheese, Margherita, Mushroom
from lld.domain.service.shape_factory import ShapeFactory

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_log_handler: logging.Handler | None = None


def configure_logging(verbose: bool = False) -> None:
    """Send log records to the current stderr, DEBUG when *verbose*.

    Safe to call repeatedly in one process: the handler installed by the
    previous call is replaced, so it never writes to a stale stream.
    """
    global _log_handler

    root = logging.getLogger()
    if _log_handler is not None:
        root.removeHandler(_log_handler)

    _log_handler = logging.StreamHandler()
    _log_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_log_handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def sample_pizzas() -> list[BasePizza]:
    return [
        # Margherita + ExtraCheese
        ExtraCheese(Margherita()),
        # Margherita + ExtraCheese + Mushroom
        Mushroom(ExtraCheese(Margherita())),
    ]


def shape_factory() -> ShapeFactory:
    return ShapeFactory()


def draw_shape_handler() -> DrawShapeHandler:
    return DrawShapeHandler(shape_factory=shape_factory())


def price_pizza_handler() -> PricePizzaHandler:
    return PricePizzaHandler()


def show_menu_handler() -> ShowMenuHandler:
    return ShowMenuHandler()
