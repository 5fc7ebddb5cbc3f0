"""
Singleton Pattern

Two flavours of a process-wide single value:
- SingletonHolder: wraps any factory callable and constructs its value once
- ConfigurationStore: a class built on the shared Singleton base

Both guard the first construction with a lock, so concurrent first access
still constructs exactly once.
"""

from typing import Any, Callable, Dict, Generic, Optional, TypeVar
import logging
import threading

from pattern_catalog.core.patterns.singleton import Singleton

T = TypeVar("T")

logger = logging.getLogger(__name__)


class SingletonHolder(Generic[T]):
    """Lazily constructs and then returns one shared value."""

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._instance: Optional[T] = None
        self._initialized = False
        self._lock = threading.Lock()

    def instance(self) -> T:
        """Return the shared value, constructing it on first access."""
        if self._initialized:
            return self._instance
        with self._lock:
            if not self._initialized:
                self._instance = self._factory()
                self._initialized = True
                logger.debug(f"Singleton value created by {self._factory!r}")
        return self._instance

    def is_initialized(self) -> bool:
        return self._initialized


class ConfigurationStore(Singleton):
    """
    Process-wide key/value store.

    Use ConfigurationStore.instance(); calling the class directly returns
    the same object.
    """

    def _setup(self):
        self._values: Dict[str, Any] = {}
        self._lock = threading.Lock()

    @classmethod
    def instance(cls) -> "ConfigurationStore":
        return cls.get_instance()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def as_dict(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._values)
