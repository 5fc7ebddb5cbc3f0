"""
Tests for the structural patterns: Adapter, Bridge and Decorator.
"""

from decimal import Decimal

import pytest

from pattern_catalog.core.exceptions import InvalidArgument
from pattern_catalog.structural.adapter import LegacyRectangle, ObjectAdapter, RectangleAdapter, Shape
from pattern_catalog.structural.bridge import Circle, RasterRenderer, Square, VectorRenderer
from pattern_catalog.structural.decorator import (
    ExtraCheese,
    Mushrooms,
    Olives,
    Pepperoni,
    PizzaComponent,
    PlainPizza,
)


# ----------------------------------------------------------------------
# Adapter
# ----------------------------------------------------------------------
def test_rectangle_adapter_forwards_one_call_with_converted_arguments():
    legacy = LegacyRectangle()
    adapter = RectangleAdapter(legacy)

    result = adapter.draw(1, 2, 10, 20)

    assert isinstance(adapter, Shape)
    assert legacy.calls == [(1, 2, 11, 22)]
    assert result == "Rectangle from (1, 2) to (11, 22)"
    assert adapter.adaptee is legacy


def test_rectangle_adapter_preserves_side_effects_per_call():
    legacy = LegacyRectangle()
    adapter = RectangleAdapter(legacy)

    adapter.draw(0, 0, 1, 1)
    adapter.draw(5, 5, 2, 3)

    assert legacy.calls == [(0, 0, 1, 1), (5, 5, 7, 8)]


class Dog:
    name = "Rex"

    def bark(self):
        return "woof!"


def test_object_adapter_renames_methods_and_falls_through():
    dog = Dog()
    adapter = ObjectAdapter(dog, make_noise=dog.bark)

    assert adapter.make_noise() == "woof!"
    assert adapter.name == "Rex"
    assert adapter.bark() == "woof!"
    assert adapter.adaptee is dog


def test_object_adapter_missing_attribute_raises():
    adapter = ObjectAdapter(Dog())

    with pytest.raises(AttributeError):
        adapter.fly()


# ----------------------------------------------------------------------
# Bridge
# ----------------------------------------------------------------------
@pytest.mark.parametrize("renderer_cls", [VectorRenderer, RasterRenderer])
def test_every_shape_works_with_every_renderer(renderer_cls):
    renderer = renderer_cls()

    circle = Circle(1, 2, 3, renderer)
    square = Square(4, 5, 6, renderer)

    assert circle.draw() == renderer.render_circle(1, 2, 3)
    assert square.draw() == renderer.render_square(4, 5, 6)
    assert circle.renderer is renderer


def test_renderer_choice_changes_output_not_shape_code():
    vector = Circle(0, 0, 5, VectorRenderer()).draw()
    raster = Circle(0, 0, 5, RasterRenderer()).draw()

    assert vector.startswith("vector circle")
    assert raster.startswith("raster circle")
    assert vector != raster


def test_resize_scales_by_percentage():
    circle = Circle(0, 0, 10, VectorRenderer())
    square = Square(0, 0, 4, RasterRenderer())

    circle.resize(250)
    square.resize(50)

    assert circle.radius == 25
    assert square.side == 2
    assert circle.draw() == "vector circle at (0, 0) radius 25.0"


@pytest.mark.parametrize("percent", [0, -10])
def test_resize_rejects_non_positive_percentage(percent):
    with pytest.raises(InvalidArgument):
        Circle(0, 0, 1, VectorRenderer()).resize(percent)


def test_shape_requires_renderer():
    with pytest.raises(InvalidArgument):
        Square(0, 0, 1, None)


# ----------------------------------------------------------------------
# Decorator
# ----------------------------------------------------------------------
def test_plain_pizza():
    pizza = PlainPizza()

    assert pizza.description() == "Plain pizza"
    assert pizza.cost() == Decimal("6.99")


def test_extra_cheese_adds_surcharge():
    pizza = ExtraCheese(PlainPizza(6.99))

    assert isinstance(pizza, PizzaComponent)
    assert pizza.cost() == Decimal("8.49")
    assert pizza.description() == "Plain pizza, extra cheese"


def test_nesting_order_drives_augmentation_order():
    inner_first = Olives(Mushrooms(PlainPizza()))
    outer_first = Mushrooms(Olives(PlainPizza()))

    assert inner_first.description() == "Plain pizza, mushrooms, olives"
    assert outer_first.description() == "Plain pizza, olives, mushrooms"
    assert inner_first.cost() == outer_first.cost() == Decimal("8.99")


def test_same_decorator_can_wrap_twice():
    pizza = Pepperoni(Pepperoni(PlainPizza("10")))

    assert pizza.cost() == Decimal("14.00")
    assert pizza.description() == "Plain pizza, pepperoni, pepperoni"


def test_decorator_does_not_mutate_wrapped_component():
    base = PlainPizza()
    decorated = ExtraCheese(base)

    decorated.cost()
    decorated.description()

    assert base.cost() == Decimal("6.99")
    assert base.description() == "Plain pizza"
    assert decorated.inner is base


def test_decorator_requires_component():
    with pytest.raises(InvalidArgument):
        ExtraCheese(None)
