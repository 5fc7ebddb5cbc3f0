"""Structural patterns: Adapter, Bridge, Decorator."""

from .adapter import LegacyRectangle, ObjectAdapter, RectangleAdapter
from .bridge import Circle, RasterRenderer, Renderer, Square, VectorRenderer
from .decorator import ExtraCheese, Mushrooms, Olives, Pepperoni, PizzaComponent, PlainPizza, ToppingDecorator

__all__ = [
    "Circle",
    "ExtraCheese",
    "LegacyRectangle",
    "Mushrooms",
    "ObjectAdapter",
    "Olives",
    "Pepperoni",
    "PizzaComponent",
    "PlainPizza",
    "RasterRenderer",
    "RectangleAdapter",
    "Renderer",
    "Square",
    "ToppingDecorator",
    "VectorRenderer",
]
