"""Runtime settings.

Settings come from the environment and can be overridden by the CLI:
- CHEM_BALANCE_LOCALE: language of error descriptions ("en" or "ru")
- CHEM_BALANCE_LOG_LEVEL: logging level name for the CLI
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

SUPPORTED_LOCALES = ("en", "ru")
DEFAULT_LOCALE = "en"

ENV_LOCALE = "CHEM_BALANCE_LOCALE"
ENV_LOG_LEVEL = "CHEM_BALANCE_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    locale: str = DEFAULT_LOCALE
    log_level: str = "WARNING"

    def __post_init__(self):
        locale = self.locale.strip().lower()
        if locale not in SUPPORTED_LOCALES:
            raise ValueError(
                f"Unknown locale '{self.locale}', expected one of {', '.join(SUPPORTED_LOCALES)}"
            )
        object.__setattr__(self, "locale", locale)

        level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{self.log_level}'")
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_number(self) -> int:
        return int(logging.getLevelName(self.log_level))


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    locale: str | None = None,
    log_level: str | None = None,
) -> Settings:
    """Build Settings from *environ* (default: os.environ); keyword overrides win."""
    env = os.environ if environ is None else environ
    return Settings(
        locale=locale or env.get(ENV_LOCALE, DEFAULT_LOCALE),
        log_level=log_level or env.get(ENV_LOG_LEVEL, "WARNING"),
    )
