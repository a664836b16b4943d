# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from datetime import datetime, timezone

from ancora_matching.constants import (
    CANCERSTAGING_SYSTEM,
    ICD_10_SYSTEM,
    LOINC_SYSTEM,
    RX_NORM_SYSTEM,
    SNOMED_CT_SYSTEM,
)
from ancora_matching.extraction import CriteriaAccumulator, CriteriaExtractor

from fhir_builders import (
    bundle,
    coding,
    condition,
    medication_statement,
    observation,
    parameters,
    patient,
    procedure,
    staging_observation,
)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def fixed_now():
    """Fixed 'current time' so ages are deterministic"""
    return datetime(2023, 2, 3, tzinfo=timezone.utc)


@pytest.fixture
def accumulator():
    return CriteriaAccumulator()


@pytest.fixture
def extractor(fixed_now):
    """Extractor over the shipped code tables"""
    return CriteriaExtractor(now=fixed_now)


@pytest.fixture
def breast_cancer_bundle():
    """Patient bundle for an ER-positive, HER2-negative breast cancer patient"""
    return bundle(
        patient(gender="female", birth_date="1970-06-15"),
        condition(coding(SNOMED_CT_SYSTEM, "254837009", "Malignant neoplasm of breast")),
        observation(
            [coding(LOINC_SYSTEM, "85337-4", "Estrogen receptor")],
            [coding(SNOMED_CT_SYSTEM, "10828004", "Positive")]
        ),
        observation(
            [coding(LOINC_SYSTEM, "85319-2", "HER2")],
            [coding(SNOMED_CT_SYSTEM, "260385009", "Negative")]
        ),
        staging_observation(CANCERSTAGING_SYSTEM, "3A"),
        observation([coding(LOINC_SYSTEM, "89247-1", "ECOG")], value_integer=1),
        medication_statement(coding(RX_NORM_SYSTEM, "2555", "cisplatin")),
        procedure(coding(SNOMED_CT_SYSTEM, "387713003", "Surgical procedure")),
        parameters(zipCode="01730", travelRadius=25.0),
    )


@pytest.fixture
def aml_bundle():
    """Patient bundle for an AML patient in remission"""
    return bundle(
        patient(gender="male", birth_date="1955"),
        condition(
            coding(SNOMED_CT_SYSTEM, "91861009", "Acute myeloid leukemia"),
            coding(ICD_10_SYSTEM, "C92.01", "AML in remission")
        ),
        observation(
            [coding(LOINC_SYSTEM, "98489-8", "FLT3 ITD")],
            [coding(SNOMED_CT_SYSTEM, "10828004", "Positive")]
        ),
    )
