"""Menu registry: maps CLI-friendly names to pizza classes."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lld.domain.exceptions import UnknownMenuItemError
from lld.domain.model.pizza import (
    BasePizza,
    ExtraCheese,
    Margherita,
    Mushroom,
    ToppingDecorator,
)

logger = logging.getLogger(__name__)

BASE_PIZZAS: dict[str, type[BasePizza]] = {
    "margherita": Margherita,
}

TOPPINGS: dict[str, type[ToppingDecorator]] = {
    "extra-cheese": ExtraCheese,
    "mushroom": Mushroom,
}


def build_pizza(base: str, toppings: Sequence[str] = ()) -> BasePizza:
    """Build a decorator chain from menu names.

    The first topping listed is applied first and therefore ends up as
    the innermost wrapper; the last one is the entry point for ``cost()``.
    """
    try:
        pizza = BASE_PIZZAS[base]()
    except KeyError:
        raise UnknownMenuItemError(
            f"Unknown base pizza '{base}'. Choose from: {', '.join(BASE_PIZZAS)}"
        ) from None

    for name in toppings:
        topping_cls = TOPPINGS.get(name)
        if topping_cls is None:
            raise UnknownMenuItemError(
                f"Unknown topping '{name}'. Choose from: {', '.join(TOPPINGS)}"
            )
        pizza = topping_cls(pizza)

    logger.debug("Built %r", pizza)
    return pizza
