# ============================================================================
# src/ancora_matching/utils/__init__.py
# ============================================================================
"""
Utility modules for the Ancora matching engine.
"""

from .exceptions import (
    AncoraMatchingError,
    ValidationError,
    QueryValidationError,
    ConfigurationError,
)

from .logging import (
    setup_logging,
    setup_logging_from_settings,
    get_logger,
    JsonFormatter,
    resolve_level,
    build_formatter,
)

__all__ = [
    # Exceptions
    'AncoraMatchingError',
    'ValidationError',
    'QueryValidationError',
    'ConfigurationError',
    # Logging
    'setup_logging',
    'setup_logging_from_settings',
    'get_logger',
    'JsonFormatter',
    'resolve_level',
    'build_formatter',
]
