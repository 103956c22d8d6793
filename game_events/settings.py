from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from game_events.errors import ConfigurationError

DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class RegistrySettings:
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    @property
    def level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {self.log_level!r}")
        return level


def settings_from_env() -> RegistrySettings:
    return RegistrySettings(
        log_level=os.environ.get("GAME_EVENTS_LOG_LEVEL", "INFO"),
        log_format=os.environ.get("GAME_EVENTS_LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )


def configure_logging(settings: RegistrySettings | None = None) -> None:
    """Install a root handler for hosts that don't configure logging themselves.

    The library never calls this on import.
    """

    s = settings or settings_from_env()
    logging.basicConfig(level=s.level, format=s.log_format)
