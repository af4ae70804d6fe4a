"""Data Transfer Objects — plain containers that cross layer boundaries."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PizzaDTO:
    """Output: a priced pizza as displayed to the user."""

    description: str
    cost: int


@dataclass(frozen=True)
class MenuEntryDTO:
    """Output: one line of the menu (a base or a topping)."""

    name: str
    kind: str  # "base" or "topping"
    price: int
