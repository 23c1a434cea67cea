"""Config settings – Settings base class and FlagQuerySettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from flagquery.config.validation import InvalidSettingValueError
from flagquery.observability.logging import JsonLoggerFactory

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class FlagQuerySettings(Settings):
    """Library settings, read from ``FLAGQUERY_*`` environment variables.

    * ``FLAGQUERY_LOG_LEVEL``: root log level (default ``INFO``).
    * ``FLAGQUERY_JSON_LOGS``: JSON lines when true, console output otherwise.
    * ``FLAGQUERY_REJECT_DUPLICATE_KEYS``: whether JSON queries repeating a
      clause key are rejected (default) or resolved last-write-wins.
    """

    _prefix: ClassVar[str] = "FLAGQUERY"

    log_level: str = "INFO"
    json_logs: bool = True
    reject_duplicate_keys: bool = True

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )
        self.log_level = level

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    def configure_logging(self) -> None:
        JsonLoggerFactory.configure(self.log_level_number, json=self.json_logs)


__all__ = ["FlagQuerySettings", "Settings"]
