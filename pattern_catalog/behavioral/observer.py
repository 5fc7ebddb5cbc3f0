"""
Observer Pattern

A Subject keeps an ordered list of observers it does not own and pushes
events to them synchronously. One failing observer never stops delivery to
the rest: the failure is logged and collected, and optionally raised once
every observer has been called.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional
import logging

from pydantic import BaseModel, ConfigDict

from pattern_catalog.core.config_manager import config_manager
from pattern_catalog.core.exceptions import InvalidArgument, ObserverNotificationError

logger = logging.getLogger(__name__)


class Observer(ABC):
    """Capability every subscriber implements."""

    @abstractmethod
    def update(self, event: Any) -> None:
        """Called by the subject for each notification."""


class CallbackObserver(Observer):
    """Adapts a plain callable to the Observer capability."""

    def __init__(self, callback: Callable[[Any], None]) -> None:
        if not callable(callback):
            raise InvalidArgument("CallbackObserver requires a callable")
        self._callback = callback

    def update(self, event: Any) -> None:
        self._callback(event)

    def __repr__(self) -> str:
        return f"CallbackObserver({getattr(self._callback, '__qualname__', self._callback)!r})"


class DeliveryFailure(BaseModel):
    """One observer that raised while handling an event."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    observer: Observer
    error: Exception


class Subject:
    """Holds observer references and notifies them in subscription order."""

    def __init__(self, raise_on_failure: Optional[bool] = None) -> None:
        self._observers: List[Observer] = []
        if raise_on_failure is None:
            raise_on_failure = config_manager.get_observer_settings()["raise_on_failure"]
        self._raise_on_failure = raise_on_failure

    def subscribe(self, observer: Observer) -> None:
        if observer is None:
            raise InvalidArgument("Cannot subscribe None as an observer")
        self._observers.append(observer)
        logger.debug(f"Observer {observer!r} subscribed")

    def unsubscribe(self, observer: Observer) -> bool:
        """
        Remove the first subscription of this exact observer.

        Returns:
            True if the observer was removed, False if it wasn't subscribed
        """
        for index, current in enumerate(self._observers):
            if current is observer:
                del self._observers[index]
                logger.debug(f"Observer {observer!r} unsubscribed")
                return True
        return False

    def observers(self) -> List[Observer]:
        return list(self._observers)

    def notify_all(self, event: Any) -> List[DeliveryFailure]:
        """
        Deliver an event to every observer.

        Args:
            event: Payload handed to each observer's update()

        Returns:
            Failures collected during delivery, empty when all succeeded

        Raises:
            ObserverNotificationError: When raise_on_failure is set and at
                least one observer failed; raised after all observers ran
        """
        failures: List[DeliveryFailure] = []
        for observer in list(self._observers):
            try:
                observer.update(event)
            except Exception as e:
                logger.exception(f"Observer {observer!r} failed to handle event: {e}")
                failures.append(DeliveryFailure(observer=observer, error=e))

        if failures and self._raise_on_failure:
            raise ObserverNotificationError(failures)
        return failures
