"""Runtime configuration for the llvm-config-py command line."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class Settings:
    """CLI settings. The library functions never read these."""

    log_level: str = "WARNING"
    show_stderr: bool = True

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment with defaults suitable for build scripts."""

        return cls(
            log_level=os.getenv("LLVM_CONFIG_PY_LOG_LEVEL", "WARNING").strip().upper(),
            show_stderr=_env_bool("LLVM_CONFIG_PY_SHOW_STDERR", default=True),
        )

    def validate(self) -> None:
        """Raise configuration error if the log level is unknown."""

        if self.log_level not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid LLVM_CONFIG_PY_LOG_LEVEL: {self.log_level!r}. "
                f"Expected one of: {', '.join(_LOG_LEVELS)}.",
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


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
