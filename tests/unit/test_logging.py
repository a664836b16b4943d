# ============================================================================
# FILE: tests/unit/test_logging.py
# ============================================================================
"""
Unit tests for logging setup
"""

import json
import logging
import sys

import pytest

from ancora_matching.config import LoggingSettings
from ancora_matching.utils import (
    ConfigurationError,
    JsonFormatter,
    build_formatter,
    get_logger,
    resolve_level,
    setup_logging,
    setup_logging_from_settings,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_level():
    """Test the root logger level is applied"""
    setup_logging(level="warning")
    assert logging.getLogger().level == logging.WARNING


def test_setup_logging_unknown_level():
    """Test an unknown level is a configuration error"""
    with pytest.raises(ConfigurationError):
        setup_logging(level="CHATTY")


def test_setup_logging_file(tmp_path):
    """Test logs are also written to the configured file"""
    log_file = tmp_path / "logs" / "ancora.log"
    setup_logging(level="INFO", log_file=log_file, format_json=True)

    get_logger("ancora_matching.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text().strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "hello"
    assert record["level"] == "INFO"
    assert record["logger"] == "ancora_matching.test"


def test_setup_logging_from_settings(tmp_path):
    """Test logging configured from LoggingSettings"""
    settings = LoggingSettings(LOG_LEVEL="DEBUG", LOG_FILE=tmp_path / "debug.log")
    setup_logging_from_settings(settings)

    assert logging.getLogger().level == logging.DEBUG
    assert (tmp_path / "debug.log").exists()


def test_json_formatter():
    """Test JSON formatter output fields"""
    record = logging.LogRecord(
        name="ancora_matching.extraction",
        level=logging.WARNING,
        pathname=__file__,
        lineno=10,
        msg="Skipping %s",
        args=("Encounter",),
        exc_info=None
    )
    record.extra = {"resource_type": "Encounter"}

    data = json.loads(JsonFormatter().format(record))

    assert data["message"] == "Skipping Encounter"
    assert data["level"] == "WARNING"
    assert data["logger"] == "ancora_matching.extraction"
    assert data["extra"] == {"resource_type": "Encounter"}
    assert data["timestamp"].endswith("+00:00")


def test_json_formatter_exception():
    """Test exceptions are included"""
    try:
        raise ValueError("bad code table")
    except ValueError:
        exc_info = sys.exc_info()

    record = logging.LogRecord(
        name="ancora_matching", level=logging.ERROR, pathname=__file__,
        lineno=1, msg="failed", args=(), exc_info=exc_info
    )
    data = json.loads(JsonFormatter().format(record))
    assert "ValueError: bad code table" in data["exception"]


def test_resolve_level():
    """Test level names resolve case-insensitively"""
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("ERROR") == logging.ERROR
    with pytest.raises(ConfigurationError):
        resolve_level("verbose")


def test_build_formatter():
    """Test formatter selection"""
    assert isinstance(build_formatter(format_json=True), JsonFormatter)
    assert not isinstance(build_formatter(), JsonFormatter)
