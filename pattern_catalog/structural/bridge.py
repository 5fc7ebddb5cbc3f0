"""
Bridge Pattern

Shapes (the abstraction) hold one Renderer (the implementation). Any shape
can be paired with any renderer.
"""

from abc import ABC, abstractmethod
from typing import Union

from pattern_catalog.core.exceptions import InvalidArgument

Number = Union[int, float]


class Renderer(ABC):
    """Implementation capability: low-level drawing primitives."""

    @abstractmethod
    def render_circle(self, x: Number, y: Number, radius: Number) -> str:
        ...

    @abstractmethod
    def render_square(self, x: Number, y: Number, side: Number) -> str:
        ...


class VectorRenderer(Renderer):
    def render_circle(self, x: Number, y: Number, radius: Number) -> str:
        return f"vector circle at ({x}, {y}) radius {radius}"

    def render_square(self, x: Number, y: Number, side: Number) -> str:
        return f"vector square at ({x}, {y}) side {side}"


class RasterRenderer(Renderer):
    def render_circle(self, x: Number, y: Number, radius: Number) -> str:
        return f"raster circle of pixels at ({x}, {y}) radius {radius}"

    def render_square(self, x: Number, y: Number, side: Number) -> str:
        return f"raster square of pixels at ({x}, {y}) side {side}"


class Shape(ABC):
    """Abstraction: higher-level operations delegated to a renderer."""

    def __init__(self, renderer: Renderer) -> None:
        if renderer is None:
            raise InvalidArgument("Shape requires a renderer")
        self._renderer = renderer

    @property
    def renderer(self) -> Renderer:
        return self._renderer

    @abstractmethod
    def draw(self) -> str:
        ...

    @abstractmethod
    def _scale(self, factor: float) -> None:
        ...

    def resize(self, percent: Number) -> None:
        """Scale the shape by a percentage, e.g. 200 doubles it."""
        if percent <= 0:
            raise InvalidArgument("Resize percentage must be positive", {"percent": percent})
        self._scale(percent / 100)


class Circle(Shape):
    def __init__(self, x: Number, y: Number, radius: Number, renderer: Renderer) -> None:
        super().__init__(renderer)
        self.x = x
        self.y = y
        self.radius = radius

    def draw(self) -> str:
        return self._renderer.render_circle(self.x, self.y, self.radius)

    def _scale(self, factor: float) -> None:
        self.radius *= factor


class Square(Shape):
    def __init__(self, x: Number, y: Number, side: Number, renderer: Renderer) -> None:
        super().__init__(renderer)
        self.x = x
        self.y = y
        self.side = side

    def draw(self) -> str:
        return self._renderer.render_square(self.x, self.y, self.side)

    def _scale(self, factor: float) -> None:
        self.side *= factor
