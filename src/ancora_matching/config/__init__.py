# ============================================================================
# src/ancora_matching/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .query_config import QuerySettings, query_settings
from .logging_config import LoggingSettings, logging_settings
