# ============================================================================
# src/ancora_matching/query/__init__.py
# ============================================================================
"""
Ancora.ai query assembly.
"""

from .builder import AncoraQuery, build_query, NO_DISEASE_MESSAGE
from .api_query import AncoraAPIQuery

__all__ = [
    'AncoraQuery',
    'AncoraAPIQuery',
    'build_query',
    'NO_DISEASE_MESSAGE',
]
