"""Environment-driven settings and logging setup.

TTT_LOG_LEVEL wins when set. Otherwise ``verbose`` (the argument, or
TTT_VERBOSE when the argument is omitted) selects DEBUG over INFO.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "[%(levelname)s] %(message)s"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    verbose: bool = False
    log_level: str | None = None

    @property
    def level(self) -> int:
        if self.log_level:
            lvl = logging.getLevelName(self.log_level.upper())
            if isinstance(lvl, int):
                return lvl
            raise ValueError(f"Unknown log level: {self.log_level!r}")
        return logging.DEBUG if self.verbose else logging.INFO


def load_settings(verbose: bool | None = None) -> Settings:
    if verbose is None:
        verbose = os.getenv("TTT_VERBOSE", "").strip().lower() in _TRUTHY
    level = os.getenv("TTT_LOG_LEVEL") or None
    return Settings(verbose=verbose, log_level=level)


def configure_logging(verbose: bool | None = None) -> Settings:
    """Configure root logging for a host process and return the settings used."""
    settings = load_settings(verbose)
    logging.basicConfig(level=settings.level, format=LOG_FORMAT)
    return settings
