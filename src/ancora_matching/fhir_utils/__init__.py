# ============================================================================
# src/ancora_matching/fhir_utils/__init__.py
# ============================================================================
"""
Parsing of patient bundle resources into typed records.
"""

from .parsing import (
    ParsedCoding,
    ParsedCondition,
    ParsedObservation,
    ParsedMedicationStatement,
    ParsedProcedure,
    ParsedPatient,
    ParsedParameter,
    ParsedParameters,
    as_json_dict,
    parse_codings,
    parse_codeable_concept,
    parse_resource,
    iter_bundle_resources,
)
