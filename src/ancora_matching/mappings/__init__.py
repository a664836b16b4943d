# ============================================================================
# src/ancora_matching/mappings/__init__.py
# ============================================================================
"""
Code -> outcome lookups built from the static code tables.
"""

from .reverse_index import (
    ReverseIndex,
    build_reverse_index,
    get_default_index,
    normalize_stage_code,
    criterion_coverage,
    unmapped_flags,
)

__all__ = [
    'ReverseIndex',
    'build_reverse_index',
    'get_default_index',
    'normalize_stage_code',
    'criterion_coverage',
    'unmapped_flags',
]
