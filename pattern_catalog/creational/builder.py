"""
Builder Pattern

PizzaBuilder collects fields step by step through chained setters and
produces an immutable Pizza snapshot on every build() call.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple
import logging

from pydantic import BaseModel, ConfigDict

from pattern_catalog.core.exceptions import InvalidArgument

logger = logging.getLogger(__name__)


class Pizza(BaseModel):
    """Finished product. Frozen once built."""

    model_config = ConfigDict(frozen=True)

    size: str = "medium"
    crust: str = "regular"
    sauce: str = "tomato"
    cheese: str = "mozzarella"
    toppings: Tuple[str, ...] = ()


class PizzaBuilder:
    """Mutable builder; every setter returns the same builder."""

    def __init__(self) -> None:
        self._fields: Dict[str, object] = {}
        self.reset()

    def reset(self) -> "PizzaBuilder":
        self._fields = {
            "size": "medium",
            "crust": "regular",
            "sauce": "tomato",
            "cheese": "mozzarella",
            "toppings": [],
        }
        return self

    def set_size(self, size: str) -> "PizzaBuilder":
        self._fields["size"] = size
        return self

    def set_crust(self, crust: str) -> "PizzaBuilder":
        self._fields["crust"] = crust
        return self

    def set_sauce(self, sauce: str) -> "PizzaBuilder":
        self._fields["sauce"] = sauce
        return self

    def set_cheese(self, cheese: str) -> "PizzaBuilder":
        self._fields["cheese"] = cheese
        return self

    def set_toppings(self, *toppings: str) -> "PizzaBuilder":
        self._fields["toppings"] = list(toppings)
        return self

    def add_topping(self, topping: str) -> "PizzaBuilder":
        self._fields["toppings"].append(topping)
        return self

    def build(self) -> Pizza:
        """Return a snapshot of the fields set so far. The builder stays usable."""
        pizza = Pizza(
            size=self._fields["size"],
            crust=self._fields["crust"],
            sauce=self._fields["sauce"],
            cheese=self._fields["cheese"],
            toppings=tuple(self._fields["toppings"]),
        )
        logger.debug(f"Built pizza: {pizza!r}")
        return pizza


class PizzaDirector:
    """Wraps common setter sequences into named recipes."""

    def __init__(self, builder: Optional[PizzaBuilder] = None) -> None:
        self._builder = builder or PizzaBuilder()
        self._recipes: Dict[str, Callable[[], Pizza]] = {
            "margherita": self.make_margherita,
            "vegetarian": self.make_vegetarian,
            "pepperoni": self.make_pepperoni,
        }

    @property
    def builder(self) -> PizzaBuilder:
        return self._builder

    def recipes(self) -> List[str]:
        return list(self._recipes.keys())

    def make_margherita(self) -> Pizza:
        return (
            self._builder.reset()
            .set_sauce("tomato")
            .set_cheese("mozzarella")
            .set_toppings("basil")
            .build()
        )

    def make_vegetarian(self) -> Pizza:
        return (
            self._builder.reset()
            .set_crust("thin")
            .set_toppings("mushrooms", "peppers", "olives", "onions")
            .build()
        )

    def make_pepperoni(self) -> Pizza:
        return (
            self._builder.reset()
            .set_size("large")
            .set_toppings("pepperoni")
            .add_topping("extra cheese")
            .build()
        )

    def construct(self, recipe: str) -> Pizza:
        """
        Build a pizza from a named recipe.

        Raises:
            InvalidArgument: If the recipe is unknown
        """
        make = self._recipes.get(recipe.strip().lower()) if isinstance(recipe, str) else None
        if make is None:
            raise InvalidArgument(
                f"Unknown recipe: {recipe!r}",
                {"recipe": recipe, "supported": self.recipes()},
            )
        return make()
