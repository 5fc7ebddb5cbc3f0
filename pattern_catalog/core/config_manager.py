from typing import Optional
import logging
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pattern_catalog.core.patterns.singleton import Singleton


class Settings(BaseSettings):
    """Catalog settings using Pydantic BaseSettings."""

    # Logging Configuration
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Observer Configuration
    observer_raise_on_failure: bool = False

    # Command Configuration
    command_history_limit: int = Field(default=100, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_CATALOG_",
        env_file=".env",
        extra="ignore",
    )


class ConfigManager(Singleton):
    """
    Singleton Configuration Manager.

    This class manages all catalog configuration settings and provides
    a centralized way to access them from every pattern module.
    """

    def _setup(self):
        """Initialize the configuration manager."""
        self._settings: Optional[Settings] = None
        self._logger = logging.getLogger(__name__)
        self._load_settings()

    def _load_settings(self):
        """Load settings from environment variables and .env file."""
        try:
            self._settings = Settings()
            self._logger.info(f"Configuration loaded successfully. Debug mode: {self._settings.debug}")
        except Exception as e:
            self._logger.error(f"Failed to load configuration: {e}")
            raise

    @property
    def settings(self) -> Settings:
        """Get the catalog settings."""
        if self._settings is None:
            self._load_settings()
        return self._settings

    def reload_settings(self):
        """Reload settings from environment variables and .env file."""
        self._logger.info("Reloading configuration settings...")
        self._load_settings()

    def is_debug_mode(self) -> bool:
        """Check if the catalog is in debug mode."""
        return self.settings.debug

    def get_logging_settings(self) -> dict:
        """Get logging configuration settings."""
        level = "DEBUG" if self.settings.debug else self.settings.log_level.upper()
        return {
            "level": level,
            "format": self.settings.log_format,
        }

    def get_observer_settings(self) -> dict:
        """Get observer delivery settings."""
        return {
            "raise_on_failure": self.settings.observer_raise_on_failure,
        }

    def get_command_settings(self) -> dict:
        """Get command invoker settings."""
        return {
            "history_limit": self.settings.command_history_limit,
        }


# Create the global config manager instance
config_manager = ConfigManager.get_instance()

# For backward compatibility, expose settings directly
settings = config_manager.settings
