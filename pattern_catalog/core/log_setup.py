import logging
from typing import Optional

from pattern_catalog.core.config_manager import config_manager
from pattern_catalog.core.exceptions import InvalidArgument


def resolve_level(name: str) -> int:
    """
    Turn a level name such as "debug" or "WARNING" into its numeric value.

    Raises:
        InvalidArgument: If the name is not a registered logging level
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise InvalidArgument(f"Unknown log level: {name!r}", {"level": name})
    return level


def configure_logging(level: Optional[str] = None, force: bool = False) -> None:
    """
    Configure root logging from the catalog settings.

    The library never calls this on import; applications embedding the
    catalog call it once at startup.

    Args:
        level: Overrides the configured level when given
        force: Replace handlers already attached to the root logger
    """
    logging_settings = config_manager.get_logging_settings()
    resolved = resolve_level(level or logging_settings["level"])

    logging.basicConfig(
        level=resolved,
        format=logging_settings["format"],
        force=force,
    )
    logging.getLogger(__name__).debug(f"Logging configured at level {logging.getLevelName(resolved)}")
