# ============================================================================
# src/ancora_matching/extraction/__init__.py
# ============================================================================
"""
Criteria extraction from patient bundle resources.
"""

from .accumulator import CriteriaAccumulator
from .extractor import (
    CriteriaExtractor,
    extract_criteria,
    compute_age,
    parse_birth_date,
)

__all__ = [
    'CriteriaAccumulator',
    'CriteriaExtractor',
    'extract_criteria',
    'compute_age',
    'parse_birth_date',
]
