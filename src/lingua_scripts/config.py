"""Runtime configuration for text inspection and the CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

_LOG_LEVELS: tuple[str, ...] = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(slots=True)
class InspectionSettings:
    """Text inspection settings."""

    max_text_chars: int = 12_000
    preserve_case: bool = False


@dataclass(slots=True)
class LoggingSettings:
    """Logging settings applied by the CLI."""

    level: str = "WARNING"


@dataclass(slots=True)
class Settings:
    """Application settings grouped by concern."""

    inspection: InspectionSettings = field(default_factory=InspectionSettings)
    log: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment with defaults suitable for local use."""

        return cls(
            inspection=InspectionSettings(
                max_text_chars=_env_int("LINGUA_SCRIPTS_MAX_TEXT_CHARS", default=12_000),
                preserve_case=_env_bool("LINGUA_SCRIPTS_PRESERVE_CASE", default=False),
            ),
            log=LoggingSettings(
                level=os.getenv("LINGUA_SCRIPTS_LOG_LEVEL", "WARNING").strip().upper(),
            ),
        )

    def validate(self) -> None:
        """Raise configuration error for out-of-range values."""

        if self.inspection.max_text_chars <= 0:
            raise ValueError("LINGUA_SCRIPTS_MAX_TEXT_CHARS must be > 0.")
        if self.log.level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid LINGUA_SCRIPTS_LOG_LEVEL: {self.log.level!r}. "
                f"Expected one of {', '.join(_LOG_LEVELS)}.",
            )

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=self.log.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as error:
        raise ValueError(f"Invalid integer value for {name}: {value!r}") from error


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid boolean value for {name}: {value!r}")
