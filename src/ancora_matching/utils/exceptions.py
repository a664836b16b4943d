# ============================================================================
# src/ancora_matching/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the Ancora matching engine.

Malformed clinical resources never raise: they are skipped during extraction.
Only query assembly surfaces an error to the caller.
"""


class AncoraMatchingError(Exception):
    """Base exception for all Ancora matching errors."""
    pass


class ValidationError(AncoraMatchingError):
    """Error during data validation."""
    pass


class QueryValidationError(ValidationError):
    """The accumulated criteria cannot produce a valid query."""
    def __init__(self, message: str, criterions: dict = None):
        super().__init__(message)
        self.criterions = criterions or {}


class ConfigurationError(AncoraMatchingError):
    """Invalid configuration."""
    pass
