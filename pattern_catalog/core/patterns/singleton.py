from abc import ABC, ABCMeta
from typing import Any, Dict, Type
import threading


class SingletonMeta(type):
    """
    Thread-safe Singleton metaclass.
    This metaclass ensures that only one instance of a class exists
    and provides thread-safe initialization.

    The lock is re-entrant and shared by every singleton class, so a
    singleton whose _setup creates another singleton (the pattern catalog
    reading the config manager, for instance) does not deadlock.
    """

    _instances: Dict[Type, Any] = {}
    _lock: threading.RLock = threading.RLock()

    def __call__(cls, *args, **kwargs):
        """
        Possible changes to the value of the `__init__` argument do not affect
        the returned instance.
        """
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]

    def has_instance(cls) -> bool:
        """Check whether the singleton instance has been created."""
        return cls in SingletonMeta._instances

    def clear_instance(cls) -> None:
        """
        Forget the singleton instance so the next call constructs a new one.
        Mainly for tests.
        """
        with cls._lock:
            SingletonMeta._instances.pop(cls, None)


class SingletonABCMeta(SingletonMeta, ABCMeta):
    """
    Metaclass that combines Singleton and ABC metaclasses to avoid conflicts.
    """
    pass


class Singleton(ABC, metaclass=SingletonABCMeta):
    """
    Abstract base class for implementing Singleton pattern.

    Any class that inherits from this will automatically become a singleton
    with thread-safe initialization.
    """

    def __init__(self):
        """Initialize the singleton instance."""
        if hasattr(self, '_initialized'):
            return
        self._initialized = True
        self._setup()

    def _setup(self):
        """
        Override this method to perform actual initialization.
        This method will only be called once during the lifetime of the singleton.
        """
        pass

    @classmethod
    def get_instance(cls):
        """
        Get the singleton instance.

        Returns:
            The singleton instance of the class.
        """
        return cls()

    def reset(self):
        """
        Reset the singleton instance.
        This method should be used carefully, mainly for testing purposes.
        """
        if hasattr(self, '_initialized'):
            delattr(self, '_initialized')
        self._setup()
