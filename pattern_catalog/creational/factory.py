"""
Factory Pattern

Callers ask the factory for a vehicle by tag and only ever talk to the
Vehicle capability, never to the concrete class behind it.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional
import logging

from pattern_catalog.core.exceptions import InvalidArgument

logger = logging.getLogger(__name__)


class Vehicle(ABC):
    """Capability shared by every vehicle variant."""

    kind: str = ""

    @abstractmethod
    def drive(self) -> str:
        """Describe how the vehicle moves."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind!r})"


class Car(Vehicle):
    kind = "car"

    def drive(self) -> str:
        return "Driving a car on four wheels"


class Bicycle(Vehicle):
    kind = "bicycle"

    def drive(self) -> str:
        return "Pedaling a bicycle on two wheels"


class Truck(Vehicle):
    kind = "truck"

    def drive(self) -> str:
        return "Hauling cargo with a truck"


DEFAULT_VARIANTS: Dict[str, Callable[[], Vehicle]] = {
    Car.kind: Car,
    Bicycle.kind: Bicycle,
    Truck.kind: Truck,
}


class VehicleFactory:
    """Maps a kind tag to a freshly constructed vehicle."""

    def __init__(self, variants: Optional[Dict[str, Callable[[], Vehicle]]] = None) -> None:
        source = DEFAULT_VARIANTS if variants is None else variants
        self._variants = {self._normalize(kind): constructor for kind, constructor in source.items()}

    @staticmethod
    def _normalize(kind: str) -> str:
        return kind.strip().lower()

    def supported_kinds(self) -> List[str]:
        return list(self._variants.keys())

    def create(self, kind: str) -> Vehicle:
        """
        Create a vehicle for the given kind.

        Args:
            kind: Tag of the variant to build, matched case-insensitively

        Returns:
            A new Vehicle instance

        Raises:
            InvalidArgument: If the kind is empty or not supported
        """
        if not isinstance(kind, str) or not kind.strip():
            raise InvalidArgument("Vehicle kind must be a non-empty string", {"kind": kind})

        constructor = self._variants.get(self._normalize(kind))
        if constructor is None:
            raise InvalidArgument(
                f"Unknown vehicle kind: {kind!r}",
                {"kind": kind, "supported": self.supported_kinds()},
            )

        logger.debug(f"Creating vehicle of kind '{kind}'")
        return constructor()


_default_factory = VehicleFactory()


def create_vehicle(kind: str) -> Vehicle:
    """Create a vehicle with the default factory."""
    return _default_factory.create(kind)
