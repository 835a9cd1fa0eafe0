"""Logging setup for applications embedding DishCraft. Never run on import."""

import logging
from typing import Optional

from app.config import Settings, settings as default_settings


def configure_logging(config: Optional[Settings] = None) -> None:
    """Configure the root logger with the configured level and format."""
    config = config or default_settings
    logging.basicConfig(
        level=getattr(logging, config.log_level), format=config.log_format, force=True
    )
    logging.getLogger("dishcraft").debug(
        "Logging configured for %s %s (%s)",
        config.app_name,
        config.app_version,
        config.environment.value,
    )
