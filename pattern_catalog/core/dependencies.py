"""
Provider functions for the shared catalog singletons.

Code that needs configuration or the catalog takes it as an argument and
obtains the shared instance from these providers at the edge, instead of
reaching for module globals deep inside.
"""

from pattern_catalog.core.catalog_manager import PatternCatalog, pattern_catalog
from pattern_catalog.core.config_manager import ConfigManager, Settings, config_manager


def get_config_manager() -> ConfigManager:
    """
    Get the configuration manager.

    Returns:
        The singleton configuration manager instance
    """
    return config_manager


def get_settings() -> Settings:
    """
    Get catalog settings.

    Returns:
        The current settings object
    """
    return config_manager.settings


def get_pattern_catalog() -> PatternCatalog:
    """
    Get the pattern catalog.

    Returns:
        The singleton pattern catalog instance
    """
    return pattern_catalog
