"""Application service: Price Pizza use case."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lld.application.dto import PizzaDTO
from lld.domain.model.menu import build_pizza

logger = logging.getLogger(__name__)


class PricePizzaHandler:

    def handle(self, base: str, toppings: Sequence[str] = ()) -> PizzaDTO:
        """Compose the requested pizza and compute its price."""
        pizza = build_pizza(base, toppings)
        cost = pizza.cost()
        logger.debug("Priced %s at %d", pizza.description(), cost)
        return PizzaDTO(description=pizza.description(), cost=cost)
