# ============================================================================
# FILE: tests/unit/test_constants.py
# ============================================================================
"""
Unit tests for the static code tables
"""

from ancora_matching.constants import (
    ANCORA_CRITERION_CODES,
    ANCORA_DISEASE_CODES,
    ANCORA_STAGE_CODES,
    PERFORMANCE_STATUS_CODES,
    RESULT_QUALIFIERS,
    STAGE_LOINC_CODES,
    CriterionFlag,
    DiseaseType,
    NumericCriterion,
)


def _all_codes(table):
    for systems in table.values():
        for system, codes in systems.items():
            for code in codes:
                yield system, code


def test_codes_are_strings():
    """Test every table entry is a (system URI, code string) pair"""
    for table in (ANCORA_CRITERION_CODES, ANCORA_DISEASE_CODES, ANCORA_STAGE_CODES):
        for system, code in _all_codes(table):
            assert system.startswith("http")
            assert isinstance(code, str) and code


def test_criterion_table_keys():
    """Test criterion table is keyed by CriterionFlag"""
    assert all(isinstance(flag, CriterionFlag) for flag in ANCORA_CRITERION_CODES)


def test_every_disease_type_has_codes():
    """Test each disease category can be reached from some code"""
    assert set(ANCORA_DISEASE_CODES) == set(DiseaseType)


def test_stage_table_covers_0_to_4():
    """Test stages 0 through 4 are mapped"""
    assert sorted(ANCORA_STAGE_CODES) == [0, 1, 2, 3, 4]


def test_no_duplicate_codes_within_a_flag():
    """Test no flag lists the same code twice for one system"""
    for flag, systems in ANCORA_CRITERION_CODES.items():
        for system, codes in systems.items():
            assert len(codes) == len(set(codes)), f"{flag.value} repeats a {system} code"


def test_observation_constants():
    """Test staging, qualifier and performance status codes"""
    assert STAGE_LOINC_CODES == {"21908-9", "21902-2", "21914-7"}
    assert RESULT_QUALIFIERS == {"10828004": True, "260385009": False}
    assert PERFORMANCE_STATUS_CODES["89247-1"] == NumericCriterion.ECOG
    assert PERFORMANCE_STATUS_CODES["89243-0"] == NumericCriterion.KARNOFSKY


def test_flag_values_are_unique():
    """Test every flag serializes to a distinct criterion name"""
    values = [flag.value for flag in CriterionFlag]
    assert len(values) == len(set(values))
    assert CriterionFlag.ALLOGENEIC_HSCT.value == "allogeneic_hematopoietic_stem_cell_transplantation"
