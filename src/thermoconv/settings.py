"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from thermoconv.numerics.root_finding import DEFAULT_TOLERANCE


_LOG_LEVEL_ENV = "THERMOCONV_LOG_LEVEL"
_TOLERANCE_ENV = "THERMOCONV_BISECTION_TOLERANCE"

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str
    bisection_tolerance: float

    def __post_init__(self) -> None:
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(f"unsupported log level: {self.log_level}")
        if self.bisection_tolerance <= 0:
            raise ValueError("bisection_tolerance must be > 0")


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip().upper()
    if candidate not in _VALID_LOG_LEVELS:
        return default
    return candidate


def _read_tolerance(default: float) -> float:
    value = os.getenv(_TOLERANCE_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=_read_log_level("WARNING"),
        bisection_tolerance=_read_tolerance(DEFAULT_TOLERANCE),
    )
