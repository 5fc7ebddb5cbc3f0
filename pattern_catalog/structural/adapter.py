"""
Adapter Pattern

RectangleAdapter lets a corner-based legacy rectangle stand in for the
origin-and-size Shape capability. ObjectAdapter renames methods on any
object without touching it.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Tuple
import logging

logger = logging.getLogger(__name__)


class Shape(ABC):
    """Target capability expected by drawing code."""

    @abstractmethod
    def draw(self, x: int, y: int, width: int, height: int) -> str:
        """Draw at origin (x, y) with the given size."""


class LegacyRectangle:
    """Existing component with an incompatible, corner-based interface."""

    def __init__(self) -> None:
        self.calls: List[Tuple[int, int, int, int]] = []

    def draw_legacy(self, x1: int, y1: int, x2: int, y2: int) -> str:
        self.calls.append((x1, y1, x2, y2))
        return f"Rectangle from ({x1}, {y1}) to ({x2}, {y2})"


class RectangleAdapter(Shape):
    """Forwards each draw() to exactly one LegacyRectangle.draw_legacy() call."""

    def __init__(self, legacy: LegacyRectangle) -> None:
        self._legacy = legacy

    @property
    def adaptee(self) -> LegacyRectangle:
        return self._legacy

    def draw(self, x: int, y: int, width: int, height: int) -> str:
        return self._legacy.draw_legacy(x, y, x + width, y + height)


class ObjectAdapter:
    """
    Expose callables of a wrapped object under new names.

    Usage:
        dog = Dog()
        adapter = ObjectAdapter(dog, make_noise=dog.bark)
        adapter.make_noise()

    Attributes that are not adapted fall through to the wrapped object.
    """

    def __init__(self, obj: Any, **adapted_methods: Callable[..., Any]) -> None:
        self._obj = obj
        self._adapted = dict(adapted_methods)
        logger.debug(f"Adapting {type(obj).__name__} with methods {sorted(self._adapted)}")

    @property
    def adaptee(self) -> Any:
        return self._obj

    def __getattr__(self, name: str) -> Any:
        if "_obj" not in self.__dict__:
            raise AttributeError(name)
        adapted = self.__dict__.get("_adapted", {})
        if name in adapted:
            return adapted[name]
        return getattr(self.__dict__["_obj"], name)

    def __repr__(self) -> str:
        return f"ObjectAdapter({self._obj!r})"
