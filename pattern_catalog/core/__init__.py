"""Shared configuration, logging setup, errors and the pattern registry."""

from .exceptions import (
    InvalidArgument,
    NothingToRedo,
    NothingToUndo,
    ObserverNotificationError,
    PatternCatalogError,
    UndoNotSupported,
)

__all__ = [
    "InvalidArgument",
    "NothingToRedo",
    "NothingToUndo",
    "ObserverNotificationError",
    "PatternCatalogError",
    "UndoNotSupported",
]
