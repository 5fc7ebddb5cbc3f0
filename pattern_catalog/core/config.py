# Shortcut module for code that only needs the settings object
# Configuration management is handled by the ConfigManager singleton

from pattern_catalog.core.config_manager import config_manager, settings

__all__ = ["settings", "config_manager"]
