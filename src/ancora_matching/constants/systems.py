# ============================================================================
# src/ancora_matching/constants/systems.py
# ============================================================================
"""
Coding System URIs
- Vocabularies recognized by the code tables
"""

LOINC_SYSTEM = "http://loinc.org"
SNOMED_CT_SYSTEM = "http://snomed.info/sct"
RX_NORM_SYSTEM = "http://www.nlm.nih.gov/research/umls/rxnorm"
ICD_10_SYSTEM = "http://hl7.org/fhir/sid/icd-10-cm"
CANCERSTAGING_SYSTEM = "http://cancerstaging.org"

# Systems whose codes are case-folded before tumor stage lookup
CASE_INSENSITIVE_STAGE_SYSTEMS = frozenset({CANCERSTAGING_SYSTEM})
