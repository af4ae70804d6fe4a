"""Pizza pricing built from decorators.

A chain is a single base pizza wrapped by any number of toppings.
Each topping owns exactly one pizza and adds its surcharge on top of
whatever the wrapped pizza costs, so the price of the whole chain is
computed by delegating inward until the base is reached.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lld.domain.exceptions import NullDelegateError


class BasePizza(ABC):

    @abstractmethod
    def cost(self) -> int:
        """Return the total price of this pizza."""

    @abstractmethod
    def description(self) -> str:
        """Return a readable name, e.g. 'Margherita, Mushroom'."""


class Margherita(BasePizza):
    PRICE = 110

    def cost(self) -> int:
        return self.PRICE

    def description(self) -> str:
        return "Margherita"

    def __repr__(self) -> str:
        return "Margherita()"


class ToppingDecorator(BasePizza):
    """A pizza that wraps another pizza and adds a fixed surcharge.

    Subclasses only declare ``NAME`` and ``SURCHARGE`` as class
    attributes; a subclass missing either stays abstract.  The wrapped
    pizza is set once in ``__init__`` and exposed read-only.
    """

    @property
    @abstractmethod
    def NAME(self) -> str:
        """Label appended to the wrapped pizza's description."""

    @property
    @abstractmethod
    def SURCHARGE(self) -> int:
        """Price added on top of the wrapped pizza."""

    def __init__(self, pizza: BasePizza) -> None:
        if not isinstance(pizza, BasePizza):
            raise NullDelegateError(
                f"{type(self).__name__} must wrap a pizza, got {pizza!r}"
            )
        self._pizza = pizza

    @property
    def pizza(self) -> BasePizza:
        return self._pizza

    def cost(self) -> int:
        return self._pizza.cost() + self.SURCHARGE

    def description(self) -> str:
        return f"{self._pizza.description()}, {self.NAME}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pizza!r})"


class ExtraCheese(ToppingDecorator):
    NAME = "Extra Cheese"
    SURCHARGE = 10


class Mushroom(ToppingDecorator):
    NAME = "Mushroom"
    SURCHARGE = 10
