"""Configuration loading for date parsing."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date

from date_parsing.calendar_values import Precision


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_ALLOWED_PRECISIONS = ("day", "month", "year", "decade", "century")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class DateParsingConfig:
    current_year: int
    log_level: str
    log_dir: str | None
    allowed_precisions: tuple[Precision, ...]


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _parse_precisions(value: str | None) -> tuple[Precision, ...]:
    if not value or not value.strip():
        return tuple(Precision(p) for p in _DEFAULT_ALLOWED_PRECISIONS)
    names = [name.strip().lower() for name in value.split(",") if name.strip()]
    try:
        return tuple(Precision(name) for name in names)
    except ValueError as exc:
        raise ValueError(f"DATE_PARSING_ALLOWED_PRECISIONS is invalid: {value!r}") from exc


def load_date_parsing_config() -> DateParsingConfig:
    """Load date parsing configuration from environment variables."""
    # Pivot for two-digit year inference; tests pin it for stable results.
    current_year = _parse_int(os.getenv("DATE_PARSING_CURRENT_YEAR"), date.today().year)

    log_level = os.getenv("DATE_PARSING_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        log_level = _DEFAULT_LOG_LEVEL

    return DateParsingConfig(
        current_year=current_year,
        log_level=log_level,
        log_dir=os.getenv("DATE_PARSING_LOG_DIR", "").strip() or None,
        allowed_precisions=_parse_precisions(os.getenv("DATE_PARSING_ALLOWED_PRECISIONS")),
    )
