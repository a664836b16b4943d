# ============================================================================
# src/ancora_matching/utils/logging.py
# ============================================================================
"""
Logging configuration and utilities for the Ancora matching engine.

Library modules only create loggers (logging.getLogger(__name__)); handlers
are installed by the application through setup_logging().
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional
from datetime import datetime, timezone
import json

from .exceptions import ConfigurationError


TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
TEXT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(level: str) -> int:
    """
    Convert a level name to its numeric value.

    Raises:
        ConfigurationError: Unknown level name
    """
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level: {level}")
    return resolved


def build_formatter(format_json: bool = False) -> logging.Formatter:
    if format_json:
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    format_json: bool = False
) -> None:
    """
    Setup logging configuration.

    Replaces any handlers already installed on the root logger.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging
        format_json: Whether to use JSON format
    """
    log_level = resolve_level(level)
    formatter = build_formatter(format_json)

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)


def setup_logging_from_settings(settings=None) -> None:
    """Configure logging from LoggingSettings (environment driven)."""
    if settings is None:
        from ancora_matching.config import logging_settings
        settings = logging_settings

    setup_logging(
        level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
        format_json=settings.LOG_FORMAT_JSON
    )


class JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)

        # Structured context passed as extra={'extra': {...}}
        extra = getattr(record, 'extra', None)
        if extra is not None:
            entry['extra'] = extra

        return json.dumps(entry, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)
