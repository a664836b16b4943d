# ============================================================================
# FILE: tests/unit/test_reverse_index.py
# ============================================================================
"""
Unit tests for the reverse code index
"""

import logging

import pytest

from ancora_matching.constants import (
    ANCORA_CRITERION_CODES,
    CANCERSTAGING_SYSTEM,
    ICD_10_SYSTEM,
    LOINC_SYSTEM,
    RX_NORM_SYSTEM,
    SNOMED_CT_SYSTEM,
    CriterionFlag,
    DiseaseType,
)
from ancora_matching.mappings import (
    build_reverse_index,
    criterion_coverage,
    get_default_index,
    normalize_stage_code,
    unmapped_flags,
)


@pytest.fixture
def index():
    return get_default_index()


def test_find_flags_single_flag(index):
    """Test a LOINC code that maps to exactly one flag"""
    assert index.find_flags(LOINC_SYSTEM, "85337-4") == frozenset({CriterionFlag.ER})
    assert index.find_flags(LOINC_SYSTEM, "98489-8") == frozenset({CriterionFlag.FLT3_ITD})


def test_find_flags_rxnorm(index):
    """Test medication codes map to therapy flags"""
    assert index.find_flags(RX_NORM_SYSTEM, "2049112") == frozenset({CriterionFlag.BRAF_THERAPY})


def test_find_flags_multiple_flags(index):
    """Test one code may set several flags"""
    flags = index.find_flags(SNOMED_CT_SYSTEM, "254626006")
    assert CriterionFlag.NSCLC in flags
    assert CriterionFlag.LUNG_ADENOCARCINOMA in flags


def test_find_flags_icd10(index):
    """Test ICD-10 remission code"""
    assert CriterionFlag.REMISSION in index.find_flags(ICD_10_SYSTEM, "C92.01")


def test_find_flags_unknown(index):
    """Test unknown systems and codes yield None"""
    assert index.find_flags(LOINC_SYSTEM, "0000-0") is None
    assert index.find_flags("http://example.com/codes", "85337-4") is None
    assert index.find_flags(None, "85337-4") is None
    assert index.find_flags(LOINC_SYSTEM, None) is None


def test_find_flags_exact_match(index):
    """Test flag codes are matched verbatim"""
    assert index.find_flags(ICD_10_SYSTEM, "c92.01") is None
    assert index.find_flags(LOINC_SYSTEM, " 85337-4") is None


def test_find_disease_type(index):
    """Test disease lookups across systems"""
    assert index.find_disease_type(SNOMED_CT_SYSTEM, "254837009") == DiseaseType.BREAST_CANCER
    assert index.find_disease_type(ICD_10_SYSTEM, "C50.911") == DiseaseType.BREAST_CANCER
    assert index.find_disease_type(SNOMED_CT_SYSTEM, "91861009") == DiseaseType.ACUTE_MYELOID_LEUKEMIA
    assert index.find_disease_type(SNOMED_CT_SYSTEM, "1234") is None


def test_stage_lookup_case_insensitive_for_cancerstaging(index):
    """Test AJCC codes match regardless of case"""
    assert index.tumor_stage_for_code(CANCERSTAGING_SYSTEM, "3A") == 3
    assert index.tumor_stage_for_code(CANCERSTAGING_SYSTEM, "3a") == 3
    assert index.tumor_stage_for_code(CANCERSTAGING_SYSTEM, "0IS") == 0
    assert index.tumor_stage_for_code(CANCERSTAGING_SYSTEM, "4") == 4


def test_stage_lookup_zero_is_not_missing(index):
    """Test stage 0 is returned as 0, not None"""
    stage = index.tumor_stage_for_code(SNOMED_CT_SYSTEM, "261613009")
    assert stage == 0
    assert stage is not None


def test_stage_lookup_case_sensitive_elsewhere():
    """Test only cancerstaging.org codes are lower-cased"""
    index = build_reverse_index(
        criterion_codes={},
        disease_codes={},
        stage_codes={2: {"http://example.com/stages": ["IIA"]}}
    )
    assert index.tumor_stage_for_code("http://example.com/stages", "IIA") == 2
    assert index.tumor_stage_for_code("http://example.com/stages", "iia") is None


def test_normalize_stage_code():
    """Test stage code normalization per system"""
    assert normalize_stage_code(CANCERSTAGING_SYSTEM, "3A") == "3a"
    assert normalize_stage_code(SNOMED_CT_SYSTEM, "ABC") == "ABC"


def test_stage_lookup_unknown(index):
    """Test unknown stage codes yield None"""
    assert index.tumor_stage_for_code(CANCERSTAGING_SYSTEM, "9Z") is None
    assert index.tumor_stage_for_code(LOINC_SYSTEM, "3A") is None


def test_flags_are_additive():
    """Test a code listed under several flags maps to all of them"""
    index = build_reverse_index(
        criterion_codes={
            CriterionFlag.ER: {LOINC_SYSTEM: ["1-1"]},
            CriterionFlag.PR: {LOINC_SYSTEM: ["1-1", "2-2"]},
        },
        disease_codes={},
        stage_codes={}
    )
    assert index.find_flags(LOINC_SYSTEM, "1-1") == frozenset({CriterionFlag.ER, CriterionFlag.PR})
    assert index.find_flags(LOINC_SYSTEM, "2-2") == frozenset({CriterionFlag.PR})


def test_disease_conflict_keeps_first(caplog):
    """Test a disease code registered twice keeps the first mapping and warns"""
    caplog.set_level(logging.WARNING)
    index = build_reverse_index(
        criterion_codes={},
        disease_codes={
            DiseaseType.BREAST_CANCER: {SNOMED_CT_SYSTEM: ["123"]},
            DiseaseType.MELANOMA: {SNOMED_CT_SYSTEM: ["123"]},
        },
        stage_codes={}
    )

    assert index.find_disease_type(SNOMED_CT_SYSTEM, "123") == DiseaseType.BREAST_CANCER
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "melanoma" in warnings[0].getMessage()
    assert "keeping original mapping to breast_cancer" in warnings[0].getMessage()


def test_stage_conflict_after_normalization(caplog):
    """Test '2A' and '2a' collide for cancerstaging.org and the first stage wins"""
    caplog.set_level(logging.WARNING)
    index = build_reverse_index(
        criterion_codes={},
        disease_codes={},
        stage_codes={
            2: {CANCERSTAGING_SYSTEM: ["2A"]},
            3: {CANCERSTAGING_SYSTEM: ["2a"]},
        }
    )

    assert index.tumor_stage_for_code(CANCERSTAGING_SYSTEM, "2A") == 2
    assert any("tumor stage" in r.getMessage() for r in caplog.records)


def test_shipped_tables_have_no_conflicts(caplog):
    """Test the shipped tables build without conflict warnings"""
    caplog.set_level(logging.WARNING)
    build_reverse_index()
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_build_is_deterministic():
    """Test rebuilding the index from the same tables gives identical lookups"""
    first = build_reverse_index()
    second = build_reverse_index()

    assert {s: dict(c) for s, c in first.flags.items()} == {s: dict(c) for s, c in second.flags.items()}
    assert {s: dict(c) for s, c in first.diseases.items()} == {s: dict(c) for s, c in second.diseases.items()}
    assert {s: dict(c) for s, c in first.stages.items()} == {s: dict(c) for s, c in second.stages.items()}


def test_default_index_is_shared():
    """Test the default index is built once"""
    assert get_default_index() is get_default_index()


def test_index_is_read_only(index):
    """Test the index lookups cannot be modified"""
    with pytest.raises(TypeError):
        index.flags[LOINC_SYSTEM]["new-code"] = frozenset()
    with pytest.raises(TypeError):
        index.diseases["http://example.com"] = {}


def test_criterion_coverage_lists_every_flag():
    """Test coverage report includes every flag, sorted by count"""
    coverage = criterion_coverage()
    assert set(coverage) == set(CriterionFlag)

    counts = list(coverage.values())
    assert counts == sorted(counts, reverse=True)
    assert coverage[CriterionFlag.ER] == 4


def test_unmapped_flags():
    """Test flags without codes are reported"""
    table = {CriterionFlag.ER: {LOINC_SYSTEM: ["1-1"]}}
    unmapped = unmapped_flags(table)
    assert CriterionFlag.ER not in unmapped
    assert CriterionFlag.PR in unmapped
    assert len(unmapped) == len(CriterionFlag) - 1


def test_find_flags_every_shipped_code(index):
    """Test every code in the criterion table maps to exactly its registered flags"""
    expected = {}
    for flag, systems in ANCORA_CRITERION_CODES.items():
        for system, codes in systems.items():
            for code in codes:
                expected.setdefault((system, code), set()).add(flag)

    assert expected
    for (system, code), flags in expected.items():
        assert index.find_flags(system, code) == frozenset(flags), f"{system}|{code}"


def test_identical_duplicate_logs_debug_only(caplog):
    """Test re-registering a code with the same outcome is not a conflict"""
    caplog.set_level(logging.DEBUG, logger="ancora_matching.mappings.reverse_index")
    index = build_reverse_index(
        criterion_codes={},
        disease_codes={DiseaseType.MELANOMA: {SNOMED_CT_SYSTEM: ["372244006", "372244006"]}},
        stage_codes={4: {CANCERSTAGING_SYSTEM: ["4A", "4a"]}}
    )

    assert index.find_disease_type(SNOMED_CT_SYSTEM, "372244006") == DiseaseType.MELANOMA
    assert index.tumor_stage_for_code(CANCERSTAGING_SYSTEM, "4A") == 4
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    duplicates = [r for r in caplog.records if "registered twice" in r.getMessage()]
    assert len(duplicates) == 2
