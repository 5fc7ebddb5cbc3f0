"""
Strategy Pattern

SortContext delegates to whichever sorting strategy it currently holds.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List
import logging

from pattern_catalog.core.exceptions import InvalidArgument

logger = logging.getLogger(__name__)


class SortStrategy(ABC):
    @abstractmethod
    def sort(self, items: Iterable[Any]) -> List[Any]:
        """Return a new sorted list; the input is left untouched."""


class AscendingSort(SortStrategy):
    def sort(self, items: Iterable[Any]) -> List[Any]:
        return sorted(items)


class DescendingSort(SortStrategy):
    def sort(self, items: Iterable[Any]) -> List[Any]:
        return sorted(items, reverse=True)


class LengthSort(SortStrategy):
    def sort(self, items: Iterable[Any]) -> List[Any]:
        return sorted(items, key=len)


class FunctionStrategy(SortStrategy):
    """Sort by an arbitrary key function."""

    def __init__(self, key: Callable[[Any], Any], reverse: bool = False) -> None:
        self._key = key
        self._reverse = reverse

    def sort(self, items: Iterable[Any]) -> List[Any]:
        return sorted(items, key=self._key, reverse=self._reverse)


class SortContext:
    def __init__(self, strategy: SortStrategy) -> None:
        self._strategy = self._validate(strategy)

    @staticmethod
    def _validate(strategy: SortStrategy) -> SortStrategy:
        if strategy is None:
            raise InvalidArgument("SortContext requires a strategy")
        return strategy

    @property
    def strategy(self) -> SortStrategy:
        return self._strategy

    def set_strategy(self, strategy: SortStrategy) -> None:
        """Swap the algorithm; only later run() calls are affected."""
        self._strategy = self._validate(strategy)
        logger.debug(f"Strategy switched to {strategy.__class__.__name__}")

    def run(self, items: Iterable[Any]) -> List[Any]:
        return self._strategy.sort(list(items))
