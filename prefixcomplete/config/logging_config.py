"""
Logging configuration for prefixcomplete.

Sets up console + rotating file logging. All modules should use:
    import logging
    logger = logging.getLogger(__name__)
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

from prefixcomplete.config.settings import LoggingSettings


def setup_logging(
    log_dir: Path | None = None,
    log_settings: Optional[LoggingSettings] = None,
) -> None:
    """
    Configure the ``prefixcomplete`` logger.

    Level, file name and rotation come from *log_settings*.  Log lines
    go to stderr so CLI output on stdout stays clean.  Only the first
    call attaches handlers.

    Args:
        log_dir: Directory for the log file. If None, only console logging is set up.
        log_settings: Defaults to ``LoggingSettings()``.
    """
    log_settings = log_settings or LoggingSettings()
    level = logging.getLevelName(log_settings.level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {log_settings.level!r}")

    root_logger = logging.getLogger("prefixcomplete")
    root_logger.setLevel(level)
    if root_logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_dir is None:
        return
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / log_settings.log_file,
            maxBytes=log_settings.max_bytes,
            backupCount=log_settings.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        root_logger.warning("Could not set up file logging: %s", e)
        return
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
