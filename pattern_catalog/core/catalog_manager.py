from enum import Enum
from types import ModuleType
from typing import Dict, List, Optional
import importlib
import logging

from pydantic import BaseModel, ConfigDict

from pattern_catalog.core.exceptions import InvalidArgument
from pattern_catalog.core.patterns.singleton import Singleton


class PatternCategory(str, Enum):
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class PatternEntry(BaseModel):
    """Catalog record describing one pattern module."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: PatternCategory
    module: str
    summary: str = ""


BUILTIN_PATTERNS: List[PatternEntry] = [
    PatternEntry(
        name="factory",
        category=PatternCategory.CREATIONAL,
        module="pattern_catalog.creational.factory",
        summary="Build a variant from a kind tag",
    ),
    PatternEntry(
        name="builder",
        category=PatternCategory.CREATIONAL,
        module="pattern_catalog.creational.builder",
        summary="Assemble an immutable product through chained setters",
    ),
    PatternEntry(
        name="singleton",
        category=PatternCategory.CREATIONAL,
        module="pattern_catalog.creational.singleton",
        summary="One lazily created, process-wide instance",
    ),
    PatternEntry(
        name="adapter",
        category=PatternCategory.STRUCTURAL,
        module="pattern_catalog.structural.adapter",
        summary="Put an incompatible object behind the expected interface",
    ),
    PatternEntry(
        name="bridge",
        category=PatternCategory.STRUCTURAL,
        module="pattern_catalog.structural.bridge",
        summary="Combine abstractions and implementations freely",
    ),
    PatternEntry(
        name="decorator",
        category=PatternCategory.STRUCTURAL,
        module="pattern_catalog.structural.decorator",
        summary="Wrap a component to augment its results",
    ),
    PatternEntry(
        name="observer",
        category=PatternCategory.BEHAVIORAL,
        module="pattern_catalog.behavioral.observer",
        summary="Push events to subscribers in order",
    ),
    PatternEntry(
        name="command",
        category=PatternCategory.BEHAVIORAL,
        module="pattern_catalog.behavioral.command",
        summary="Encapsulate an action with undo and replay",
    ),
    PatternEntry(
        name="strategy",
        category=PatternCategory.BEHAVIORAL,
        module="pattern_catalog.behavioral.strategy",
        summary="Swap the algorithm a context delegates to",
    ),
]


class PatternCatalog(Singleton):
    """
    Singleton Pattern Catalog.

    This class keeps the registry of every pattern module in the library,
    grouped by category. It acts as the single lookup point for finding
    and loading a pattern by name.
    """

    def _setup(self):
        """Initialize the pattern catalog."""
        self._patterns: Dict[str, PatternEntry] = {}
        self._logger = logging.getLogger(__name__)
        self._register_builtin_patterns()

    def _register_builtin_patterns(self):
        """Register the nine built-in patterns."""
        for entry in BUILTIN_PATTERNS:
            self.register_pattern(entry)
        self._logger.debug("Built-in patterns registered successfully")

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()

    def register_pattern(self, entry: PatternEntry):
        """
        Register a pattern with the catalog.

        Args:
            entry: The pattern record; replaces any entry with the same name
        """
        self._patterns[self._key(entry.name)] = entry
        self._logger.debug(f"Pattern '{entry.name}' registered")

    def get_pattern(self, name: str) -> Optional[PatternEntry]:
        """
        Get a registered pattern by name.

        Args:
            name: The name of the pattern to retrieve

        Returns:
            The pattern entry, or None if not found
        """
        return self._patterns.get(self._key(name))

    def has_pattern(self, name: str) -> bool:
        """
        Check if a pattern is registered.

        Args:
            name: The name of the pattern to check

        Returns:
            True if the pattern is registered, False otherwise
        """
        return self._key(name) in self._patterns

    def unregister_pattern(self, name: str) -> bool:
        """
        Unregister a pattern.

        Args:
            name: The name of the pattern to unregister

        Returns:
            True if the pattern was unregistered, False if it wasn't found
        """
        key = self._key(name)
        if key in self._patterns:
            del self._patterns[key]
            self._logger.debug(f"Pattern '{name}' unregistered")
            return True
        return False

    def list_patterns(self) -> List[str]:
        """
        Get a list of all registered pattern names.

        Returns:
            List of pattern names in registration order
        """
        return [entry.name for entry in self._patterns.values()]

    def list_by_category(self, category: PatternCategory) -> List[PatternEntry]:
        """
        Get the entries belonging to one category.

        Raises:
            InvalidArgument: If the category is not one of PatternCategory
        """
        try:
            category = PatternCategory(category)
        except ValueError:
            raise InvalidArgument(
                f"Unknown pattern category: {category!r}",
                {"category": category, "supported": [member.value for member in PatternCategory]},
            ) from None
        return [entry for entry in self._patterns.values() if entry.category == category]

    def load_pattern(self, name: str) -> ModuleType:
        """
        Import the module implementing a pattern.

        Raises:
            InvalidArgument: If no pattern with that name is registered
        """
        entry = self.get_pattern(name)
        if entry is None:
            raise InvalidArgument(
                f"Unknown pattern: {name!r}",
                {"name": name, "registered": self.list_patterns()},
            )
        return importlib.import_module(entry.module)

    def get_catalog_status(self) -> dict:
        """
        Get an overview of the catalog.

        Returns:
            Dictionary containing counts per category and registered names
        """
        return {
            "patterns_registered": len(self._patterns),
            "pattern_names": self.list_patterns(),
            "categories": {
                category.value: len(self.list_by_category(category))
                for category in PatternCategory
            },
        }


# Create the global pattern catalog instance
pattern_catalog = PatternCatalog.get_instance()
