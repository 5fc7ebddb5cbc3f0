"""
Decorator Pattern

Toppings wrap a pizza component. Each one asks the inner component first and
then augments the description and the cost.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from pattern_catalog.core.exceptions import InvalidArgument

CENTS = Decimal("0.01")


def to_money(value: Union[str, int, float, Decimal]) -> Decimal:
    """Convert a price to a Decimal rounded to cents."""
    # str() first so binary floats like 6.99 keep their printed value
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


class PizzaComponent(ABC):
    """Capability shared by the base pizza and all toppings."""

    @abstractmethod
    def description(self) -> str:
        ...

    @abstractmethod
    def cost(self) -> Decimal:
        ...


class PlainPizza(PizzaComponent):
    def __init__(self, price: Union[str, int, float, Decimal] = "6.99", name: str = "Plain pizza") -> None:
        self._price = to_money(price)
        self._name = name

    def description(self) -> str:
        return self._name

    def cost(self) -> Decimal:
        return self._price


class ToppingDecorator(PizzaComponent):
    """Owns exactly one inner component and never mutates it."""

    name: str = "topping"
    surcharge: Decimal = Decimal("0.00")

    def __init__(self, inner: PizzaComponent) -> None:
        if inner is None:
            raise InvalidArgument(f"{self.__class__.__name__} needs a component to wrap")
        self._inner = inner

    @property
    def inner(self) -> PizzaComponent:
        return self._inner

    def description(self) -> str:
        return f"{self._inner.description()}, {self.name}"

    def cost(self) -> Decimal:
        return to_money(self._inner.cost() + self.surcharge)


class ExtraCheese(ToppingDecorator):
    name = "extra cheese"
    surcharge = Decimal("1.50")


class Mushrooms(ToppingDecorator):
    name = "mushrooms"
    surcharge = Decimal("1.25")


class Olives(ToppingDecorator):
    name = "olives"
    surcharge = Decimal("0.75")


class Pepperoni(ToppingDecorator):
    name = "pepperoni"
    surcharge = Decimal("2.00")
