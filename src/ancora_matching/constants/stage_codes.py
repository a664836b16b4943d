# ============================================================================
# src/ancora_matching/constants/stage_codes.py
# ============================================================================
"""
Tumor Stage Code Table and Observation Codes
- Staging value codes -> tumor stage (0-4)
- LOINC codes that mark an Observation as a staging observation
- SNOMED result qualifiers (Positive / Negative)
- Performance status LOINC codes (ECOG, Karnofsky)
- mCODE histology morphology extension
"""

from typing import Dict, List

from .criteria import NumericCriterion
from .systems import CANCERSTAGING_SYSTEM, LOINC_SYSTEM, SNOMED_CT_SYSTEM


# Layout: stage -> coding system -> list of codes.
# cancerstaging.org (AJCC) codes are matched case-insensitively.
ANCORA_STAGE_CODES: Dict[int, Dict[str, List[str]]] = {
    0: {
        CANCERSTAGING_SYSTEM: ["0", "0a", "0is", "is"],
        SNOMED_CT_SYSTEM: [
            "261613009",   # Stage 0
            "1228923003",  # AJCC stage 0
        ],
    },
    1: {
        CANCERSTAGING_SYSTEM: [
            "1", "1A", "1A1", "1A2", "1A3", "1B", "1B1", "1B2", "1B3", "1C",
            "1S",
        ],
        SNOMED_CT_SYSTEM: [
            "258215001",   # Stage 1
            "261634002",   # Stage 1A
            "261635001",   # Stage 1B
            "1228929004",  # AJCC stage I
        ],
    },
    2: {
        CANCERSTAGING_SYSTEM: ["2", "2A", "2A1", "2A2", "2B", "2C"],
        SNOMED_CT_SYSTEM: [
            "258219007",   # Stage 2
            "261614003",   # Stage 2A
            "261615002",   # Stage 2B
            "1228938002",  # AJCC stage II
        ],
    },
    3: {
        CANCERSTAGING_SYSTEM: [
            "3", "3A", "3A1", "3A2", "3B", "3C", "3C1", "3C2", "3D",
        ],
        SNOMED_CT_SYSTEM: [
            "258224005",   # Stage 3
            "261638004",   # Stage 3A
            "261639007",   # Stage 3B
            "1228944003",  # AJCC stage III
        ],
    },
    4: {
        CANCERSTAGING_SYSTEM: ["4", "4A", "4B", "4C"],
        SNOMED_CT_SYSTEM: [
            "258228008",   # Stage 4
            "261643006",   # Stage 4A
            "261644000",   # Stage 4B
            "1228951001",  # AJCC stage IV
        ],
    },
}

# mCODE limits stage group observations to these LOINC codes:
# clinical, pathological, and other-method stage group
STAGE_LOINC_CODES = frozenset({"21908-9", "21902-2", "21914-7"})

# SNOMED CT qualifiers carried in Observation.valueCodeableConcept
POSITIVE_QUALIFIER_CODE = "10828004"
NEGATIVE_QUALIFIER_CODE = "260385009"
RESULT_QUALIFIERS: Dict[str, bool] = {
    POSITIVE_QUALIFIER_CODE: True,
    NEGATIVE_QUALIFIER_CODE: False,
}

# Performance status observations (valueInteger), LOINC
PERFORMANCE_STATUS_CODES: Dict[str, NumericCriterion] = {
    "89247-1": NumericCriterion.ECOG,
    "89243-0": NumericCriterion.KARNOFSKY,
}

HISTOLOGY_MORPHOLOGY_EXTENSION_URL = (
    "http://hl7.org/fhir/us/mcode/StructureDefinition/"
    "mcode-histology-morphology-behavior"
)
