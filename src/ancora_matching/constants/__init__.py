# ============================================================================
# src/ancora_matching/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .systems import (
    LOINC_SYSTEM,
    SNOMED_CT_SYSTEM,
    RX_NORM_SYSTEM,
    ICD_10_SYSTEM,
    CANCERSTAGING_SYSTEM,
    CASE_INSENSITIVE_STAGE_SYSTEMS,
)
from .criteria import CriterionFlag, NumericCriterion, NatalSex, DiseaseType, NATAL_SEX_KEY
from .criterion_codes import ANCORA_CRITERION_CODES
from .disease_codes import ANCORA_DISEASE_CODES
from .stage_codes import (
    ANCORA_STAGE_CODES,
    STAGE_LOINC_CODES,
    RESULT_QUALIFIERS,
    PERFORMANCE_STATUS_CODES,
    HISTOLOGY_MORPHOLOGY_EXTENSION_URL,
)
