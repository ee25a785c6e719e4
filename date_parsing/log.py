"""Logging helpers and the data-quality notifier.

Library code logs through the ``date_parsing`` logger and never prints.
``configure_logging`` applies the configured level and, when
``DATE_PARSING_LOG_DIR`` is set, adds a per-run log file.

Bad upstream data is reported through ``notify``: it is logged as a warning
and handed to the hook installed with ``set_notifier`` (for example an
error-tracking client).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from date_parsing.config import DateParsingConfig, load_date_parsing_config

LOGGER_NAME = "date_parsing"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_notifier: Callable[[str], None] | None = None
_file_handler: logging.FileHandler | None = None


def configure_logging(config: DateParsingConfig | None = None) -> logging.Logger:
    """Apply level and optional file output from configuration."""
    global _file_handler
    config = config or load_date_parsing_config()
    logger.setLevel(config.log_level)

    if config.log_dir and _file_handler is None:
        logs_dir = Path(config.log_dir)
        logs_dir.mkdir(parents=True, exist_ok=True)
        run_id = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
        log_path = logs_dir / f"date_parsing_{run_id}.log"

        _file_handler = logging.FileHandler(log_path, encoding="utf-8")
        _file_handler.setFormatter(logging.Formatter("%(asctime)sZ\t%(levelname)s\t%(message)s"))
        logger.addHandler(_file_handler)
        log_info(f"Date parsing log: {log_path}")

    return logger


def log_debug(msg: str) -> None:
    logger.debug(msg)


def log_info(msg: str) -> None:
    logger.info(msg)


def log_error(msg: str) -> None:
    logger.error(msg)


def set_notifier(notifier: Callable[[str], None] | None) -> None:
    """Install (or clear, with None) the data-quality hook."""
    global _notifier
    _notifier = notifier


def notify(msg: str) -> None:
    """Report a data-quality problem without raising."""
    logger.warning(msg)
    if _notifier is not None:
        _notifier(msg)
