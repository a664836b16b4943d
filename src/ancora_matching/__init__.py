# ============================================================================
# src/ancora_matching/__init__.py
# ============================================================================
"""
Ancora.ai matching engine

Maps a FHIR patient bundle onto an Ancora.ai clinical trial matching query.
"""

__version__ = "0.1.0"

from .extraction import CriteriaAccumulator, CriteriaExtractor, extract_criteria
from .mappings import ReverseIndex, build_reverse_index, get_default_index
from .query import AncoraAPIQuery, AncoraQuery, build_query
from .utils.exceptions import AncoraMatchingError, QueryValidationError
