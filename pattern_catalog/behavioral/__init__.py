"""Behavioral patterns: Observer, Command, Strategy."""

from .command import (
    AppendTextCommand,
    Command,
    CommandInvoker,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    PrintCommand,
    TextDocument,
)
from .observer import CallbackObserver, DeliveryFailure, Observer, Subject
from .strategy import AscendingSort, DescendingSort, FunctionStrategy, LengthSort, SortContext, SortStrategy

__all__ = [
    "AppendTextCommand",
    "AscendingSort",
    "CallbackObserver",
    "Command",
    "CommandInvoker",
    "DeliveryFailure",
    "DescendingSort",
    "FunctionStrategy",
    "LengthSort",
    "Light",
    "LightOffCommand",
    "LightOnCommand",
    "MacroCommand",
    "Observer",
    "PrintCommand",
    "SortContext",
    "SortStrategy",
    "Subject",
    "TextDocument",
]
