from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_ERROR_RESET_MS = 1500


@dataclass(frozen=True, slots=True)
class Settings:
    # How long an error stays on the display before the calculator resets itself.
    error_reset_ms: int = DEFAULT_ERROR_RESET_MS
    log_level: str = "INFO"

    @property
    def error_reset_s(self) -> float:
        return self.error_reset_ms / 1000


def settings_from_env() -> Settings:
    raw_delay = os.environ.get("CALCPAD_ERROR_RESET_MS", str(DEFAULT_ERROR_RESET_MS))
    try:
        error_reset_ms = int(raw_delay)
    except ValueError as e:
        raise ValueError(f"CALCPAD_ERROR_RESET_MS must be an integer, got {raw_delay!r}") from e
    if error_reset_ms < 0:
        raise ValueError("CALCPAD_ERROR_RESET_MS must be >= 0")

    log_level = os.environ.get("CALCPAD_LOG_LEVEL", "INFO").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown CALCPAD_LOG_LEVEL: {log_level}")

    return Settings(error_reset_ms=error_reset_ms, log_level=log_level)
