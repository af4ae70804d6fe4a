"""Application service: Show Menu use case (query)."""

from __future__ import annotations

from lld.application.dto import MenuEntryDTO
from lld.domain.model.menu import BASE_PIZZAS, TOPPINGS


class ShowMenuHandler:

    def handle(self) -> list[MenuEntryDTO]:
        entries = [
            MenuEntryDTO(name=name, kind="base", price=pizza_cls().cost())
            for name, pizza_cls in BASE_PIZZAS.items()
        ]
        # Topping prices are the surcharge, not a full pizza price.
        entries.extend(
            MenuEntryDTO(name=name, kind="topping", price=topping_cls.SURCHARGE)
            for name, topping_cls in TOPPINGS.items()
        )
        return entries
