"""Creational patterns: Factory, Builder, Singleton."""

from .builder import Pizza, PizzaBuilder, PizzaDirector
from .factory import Bicycle, Car, Truck, Vehicle, VehicleFactory, create_vehicle
from .singleton import ConfigurationStore, SingletonHolder

__all__ = [
    "Bicycle",
    "Car",
    "ConfigurationStore",
    "Pizza",
    "PizzaBuilder",
    "PizzaDirector",
    "SingletonHolder",
    "Truck",
    "Vehicle",
    "VehicleFactory",
    "create_vehicle",
]
