# ============================================================================
# src/ancora_matching/mappings/reverse_index.py
# ============================================================================
"""
Reverse Index

The code tables are authored outcome-first (flag -> system -> codes), but
every lookup during extraction goes the other way: (system, code) -> outcome.
This module inverts the tables once into three lookups:

1. system -> code -> set of CriterionFlag   (additive, one code may set many flags)
2. system -> code -> DiseaseType            (first registration wins)
3. system -> code -> tumor stage            (first registration wins)

Conflicting registrations in 2 and 3 are logged and the original kept.
The built index is read-only and can be shared between extraction passes.
"""

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional
import logging

from ancora_matching.constants import (
    ANCORA_CRITERION_CODES,
    ANCORA_DISEASE_CODES,
    ANCORA_STAGE_CODES,
    CASE_INSENSITIVE_STAGE_SYSTEMS,
    CriterionFlag,
    DiseaseType,
)


logger = logging.getLogger(__name__)

CodeTable = Mapping[Any, Mapping[str, List[str]]]


def normalize_stage_code(system: str, code: str) -> str:
    """
    Normalize a staging code before insertion or lookup.

    cancerstaging.org codes show up as both "3A" and "3a" in source data,
    so they are lower-cased. Every other system is matched verbatim.
    """
    if system in CASE_INSENSITIVE_STAGE_SYSTEMS:
        return code.lower()
    return code


@dataclass(frozen=True)
class ReverseIndex:
    """Immutable (system, code) -> outcome lookups built from the code tables."""
    flags: Mapping[str, Mapping[str, FrozenSet[CriterionFlag]]]
    diseases: Mapping[str, Mapping[str, DiseaseType]]
    stages: Mapping[str, Mapping[str, int]]

    def find_flags(self, system: Optional[str], code: Optional[str]) -> Optional[FrozenSet[CriterionFlag]]:
        """
        Look up all flags for a code.

        Returns:
            Set of flags, or None if the system or code is unknown
        """
        if not isinstance(system, str) or not isinstance(code, str):
            return None
        mapping = self.flags.get(system)
        if mapping is None:
            return None
        return mapping.get(code)

    def find_disease_type(self, system: Optional[str], code: Optional[str]) -> Optional[DiseaseType]:
        if not isinstance(system, str) or not isinstance(code, str):
            return None
        mapping = self.diseases.get(system)
        if mapping is None:
            return None
        return mapping.get(code)

    def tumor_stage_for_code(self, system: Optional[str], code: Optional[str]) -> Optional[int]:
        """
        Look up the tumor stage for a staging code.

        Returns:
            Stage 0-4, or None if unknown. Callers must test against None,
            stage 0 is falsy.
        """
        if not isinstance(system, str) or not isinstance(code, str):
            return None
        mapping = self.stages.get(system)
        if mapping is None:
            return None
        return mapping.get(normalize_stage_code(system, code))


def _register_first_wins(
    mappings: Dict[str, Dict[str, Any]],
    system: str,
    code: str,
    outcome: Any,
    kind: str
) -> None:
    system_mappings = mappings.setdefault(system, {})
    if code in system_mappings:
        existing = system_mappings[code]
        if existing == outcome:
            logger.debug(f"{kind.capitalize()} code {system}|{code} registered twice for {_describe(outcome)}")
            return
        logger.warning(
            f"Trying to map {kind} code {system}|{code} to {_describe(outcome)} when it is "
            f"already mapped to {_describe(existing)}, keeping original mapping to {_describe(existing)}"
        )
        return
    system_mappings[code] = outcome


def _describe(outcome: Any) -> str:
    return str(getattr(outcome, "value", outcome))


def _freeze(mappings: Dict[str, Dict[str, Any]]) -> Mapping[str, Mapping[str, Any]]:
    return MappingProxyType({
        system: MappingProxyType(dict(codes))
        for system, codes in mappings.items()
    })


def build_reverse_index(
    criterion_codes: Optional[CodeTable] = None,
    disease_codes: Optional[CodeTable] = None,
    stage_codes: Optional[CodeTable] = None
) -> ReverseIndex:
    """
    Invert the static code tables into a ReverseIndex.

    Args:
        criterion_codes: flag -> system -> codes (defaults to the shipped table)
        disease_codes: disease -> system -> codes (defaults to the shipped table)
        stage_codes: stage -> system -> codes (defaults to the shipped table)

    Returns:
        Read-only ReverseIndex
    """
    if criterion_codes is None:
        criterion_codes = ANCORA_CRITERION_CODES
    if disease_codes is None:
        disease_codes = ANCORA_DISEASE_CODES
    if stage_codes is None:
        stage_codes = ANCORA_STAGE_CODES

    flag_mappings: Dict[str, Dict[str, set]] = {}
    for flag, systems in criterion_codes.items():
        for system, codes in systems.items():
            system_mappings = flag_mappings.setdefault(system, {})
            for code in codes:
                system_mappings.setdefault(code, set()).add(flag)

    disease_mappings: Dict[str, Dict[str, DiseaseType]] = {}
    for disease, systems in disease_codes.items():
        for system, codes in systems.items():
            for code in codes:
                _register_first_wins(disease_mappings, system, code, disease, "disease")

    stage_mappings: Dict[str, Dict[str, int]] = {}
    for stage, systems in stage_codes.items():
        for system, codes in systems.items():
            for code in codes:
                _register_first_wins(
                    stage_mappings, system, normalize_stage_code(system, code), stage, "tumor stage"
                )

    frozen_flags = {
        system: {code: frozenset(flags) for code, flags in codes.items()}
        for system, codes in flag_mappings.items()
    }

    index = ReverseIndex(
        flags=_freeze(frozen_flags),
        diseases=_freeze(disease_mappings),
        stages=_freeze(stage_mappings)
    )
    logger.debug(
        f"Built reverse index: {sum(len(c) for c in frozen_flags.values())} flag codes, "
        f"{sum(len(c) for c in disease_mappings.values())} disease codes, "
        f"{sum(len(c) for c in stage_mappings.values())} stage codes"
    )
    return index


@lru_cache(maxsize=1)
def get_default_index() -> ReverseIndex:
    """Process-wide index built from the shipped code tables."""
    return build_reverse_index()


def criterion_coverage(criterion_codes: Optional[CodeTable] = None) -> Dict[CriterionFlag, int]:
    """
    Count how many codes map to each criterion flag.

    Flags with no mapped codes are included with a count of 0. Ordered by
    count (descending), then flag name.

    Args:
        criterion_codes: flag -> system -> codes (defaults to the shipped table)

    Returns:
        Ordered dict of flag -> number of mapped codes
    """
    if criterion_codes is None:
        criterion_codes = ANCORA_CRITERION_CODES

    counts = {flag: 0 for flag in CriterionFlag}
    for flag, systems in criterion_codes.items():
        counts[flag] = sum(len(codes) for codes in systems.values())

    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0].value))
    return dict(ordered)


def unmapped_flags(criterion_codes: Optional[CodeTable] = None) -> List[CriterionFlag]:
    """Flags that no code in the table can set."""
    return [
        flag for flag, count in criterion_coverage(criterion_codes).items()
        if count == 0
    ]
