"""
Exception hierarchy shared by every pattern module.

All errors raised by the catalog derive from PatternCatalogError so callers
can catch the whole family in one place.
"""

from typing import Any, Dict, List, Optional


class PatternCatalogError(Exception):
    """Base class for all pattern catalog errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        """Render the error as a plain dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgument(PatternCatalogError, ValueError):
    """Raised when an operation receives an argument it cannot accept."""


class UndoNotSupported(PatternCatalogError):
    """Raised when undo is requested from a command that cannot reverse itself."""


class NothingToUndo(PatternCatalogError):
    """Raised when the command history is empty."""


class NothingToRedo(PatternCatalogError):
    """Raised when there is no undone command to re-apply."""


class ObserverNotificationError(PatternCatalogError):
    """Raised after delivery when one or more observers failed."""

    def __init__(self, failures: List[Any]):
        super().__init__(
            f"{len(failures)} observer(s) failed during notification",
            {"failed_observers": [repr(failure.observer) for failure in failures]},
        )
        self.failures = failures
