# ============================================================================
# src/ancora_matching/fhir_utils/parsing.py
# ============================================================================
"""
FHIR Resource Parsing

Converts loosely-structured patient bundle resources into small typed records
holding only the fields extraction cares about. Every field is optional:
a missing or mistyped value parses to None (or an empty list) instead of
raising, so one bad resource never aborts the rest of the bundle.

Accepts plain JSON dicts as well as fhir.resources models.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Union
import json
import logging

from fhir.resources.bundle import Bundle
from fhir.resources.resource import Resource

from ancora_matching.constants import HISTOLOGY_MORPHOLOGY_EXTENSION_URL


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedCoding:
    system: Optional[str] = None
    code: Optional[str] = None
    display: Optional[str] = None


@dataclass
class ParsedCondition:
    codings: List[ParsedCoding] = field(default_factory=list)
    # Codings from the mCODE histology-morphology-behavior extension
    histology_codings: List[ParsedCoding] = field(default_factory=list)


@dataclass
class ParsedObservation:
    codings: List[ParsedCoding] = field(default_factory=list)
    # None when valueCodeableConcept or its coding list is absent/malformed
    value_codings: Optional[List[ParsedCoding]] = None
    value_integer: Optional[int] = None


@dataclass
class ParsedMedicationStatement:
    codings: List[ParsedCoding] = field(default_factory=list)


@dataclass
class ParsedProcedure:
    status: Optional[str] = None
    codings: List[ParsedCoding] = field(default_factory=list)


@dataclass
class ParsedPatient:
    gender: Optional[str] = None
    birth_date: Optional[str] = None


@dataclass
class ParsedParameter:
    name: str
    value: Any = None


@dataclass
class ParsedParameters:
    parameters: List[ParsedParameter] = field(default_factory=list)


ParsedResource = Union[
    ParsedCondition,
    ParsedObservation,
    ParsedMedicationStatement,
    ParsedProcedure,
    ParsedPatient,
    ParsedParameters,
]


# ============================================================================
# Primitive helpers
# ============================================================================

def as_json_dict(resource: Any) -> Optional[Dict[str, Any]]:
    """
    Get the JSON representation of a resource.

    Args:
        resource: JSON dict or fhir.resources model

    Returns:
        Dict, or None if the value is neither
    """
    if isinstance(resource, dict):
        return resource

    if isinstance(resource, Resource):
        try:
            data = json.loads(resource.model_dump_json())
        except (TypeError, ValueError) as e:
            logger.debug(f"Could not serialize {type(resource).__name__}: {e}")
            return None
        if not isinstance(data, dict):
            return None
        if "resourceType" not in data:
            data["resourceType"] = resource.get_resource_type()
        return data

    return None


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def parse_codings(value: Any) -> List[ParsedCoding]:
    """Parse a coding array. Non-list input and non-object entries are dropped."""
    if not isinstance(value, list):
        return []

    codings = []
    for item in value:
        if not isinstance(item, dict):
            continue
        codings.append(ParsedCoding(
            system=_str_or_none(item.get("system")),
            code=_str_or_none(item.get("code")),
            display=_str_or_none(item.get("display"))
        ))
    return codings


def parse_codeable_concept(value: Any) -> Optional[List[ParsedCoding]]:
    """
    Parse the coding list of a CodeableConcept.

    Returns:
        List of codings, or None if there is no usable coding array
    """
    if not isinstance(value, dict):
        return None
    coding = value.get("coding")
    if not isinstance(coding, list):
        return None
    return parse_codings(coding)


def _concept_codings(value: Any) -> List[ParsedCoding]:
    return parse_codeable_concept(value) or []


def _integer_or_none(value: Any) -> Optional[int]:
    # bool is an int subclass in Python but never a FHIR integer
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


# ============================================================================
# Resource parsers
# ============================================================================

def parse_condition(resource: Dict[str, Any]) -> ParsedCondition:
    histology = []
    extensions = resource.get("extension")
    if isinstance(extensions, list):
        for extension in extensions:
            if not isinstance(extension, dict):
                continue
            if extension.get("url") != HISTOLOGY_MORPHOLOGY_EXTENSION_URL:
                continue
            histology.extend(_concept_codings(extension.get("valueCodeableConcept")))

    return ParsedCondition(
        codings=_concept_codings(resource.get("code")),
        histology_codings=histology
    )


def parse_observation(resource: Dict[str, Any]) -> ParsedObservation:
    return ParsedObservation(
        codings=_concept_codings(resource.get("code")),
        value_codings=parse_codeable_concept(resource.get("valueCodeableConcept")),
        value_integer=_integer_or_none(resource.get("valueInteger"))
    )


def parse_medication_statement(resource: Dict[str, Any]) -> ParsedMedicationStatement:
    # R4 uses medicationCodeableConcept; older generated bundles put it in code
    concept = resource.get("medicationCodeableConcept")
    if not isinstance(concept, dict):
        concept = resource.get("code")
    return ParsedMedicationStatement(codings=_concept_codings(concept))


def parse_procedure(resource: Dict[str, Any]) -> ParsedProcedure:
    return ParsedProcedure(
        status=_str_or_none(resource.get("status")),
        codings=_concept_codings(resource.get("code"))
    )


def parse_patient(resource: Dict[str, Any]) -> ParsedPatient:
    return ParsedPatient(
        gender=_str_or_none(resource.get("gender")),
        birth_date=_str_or_none(resource.get("birthDate"))
    )


def parse_parameters(resource: Dict[str, Any]) -> ParsedParameters:
    parameters = []
    raw_parameters = resource.get("parameter")
    if isinstance(raw_parameters, list):
        for parameter in raw_parameters:
            if not isinstance(parameter, dict):
                continue
            name = parameter.get("name")
            if not isinstance(name, str):
                continue
            value = parameter.get("valueString")
            if value is None:
                value = parameter.get("valueInteger", parameter.get("valueDecimal"))
            parameters.append(ParsedParameter(name=name, value=value))
    return ParsedParameters(parameters=parameters)


RESOURCE_PARSERS: Dict[str, Callable[[Dict[str, Any]], ParsedResource]] = {
    "Condition": parse_condition,
    "Observation": parse_observation,
    "MedicationStatement": parse_medication_statement,
    "Procedure": parse_procedure,
    "Patient": parse_patient,
    "Parameters": parse_parameters,
}


def parse_resource(resource: Any) -> Optional[ParsedResource]:
    """
    Parse a single FHIR resource.

    Args:
        resource: JSON dict or fhir.resources model

    Returns:
        Typed record, or None for unsupported or unreadable resources
    """
    data = as_json_dict(resource)
    if data is None:
        return None
    resource_type = data.get("resourceType")
    if not isinstance(resource_type, str):
        return None
    parser = RESOURCE_PARSERS.get(resource_type)
    if parser is None:
        return None
    return parser(data)


def iter_bundle_resources(bundle: Any) -> Iterator[Any]:
    """
    Yield the resource of every bundle entry that has one.

    Entries without a resource (or bundles without an entry list) are skipped.
    """
    if isinstance(bundle, dict):
        entries = bundle.get("entry")
        if not isinstance(entries, list):
            return
        for entry in entries:
            if isinstance(entry, dict) and "resource" in entry:
                yield entry["resource"]
        return

    if not isinstance(bundle, Bundle):
        return
    for entry in getattr(bundle, "entry", None) or []:
        resource = getattr(entry, "resource", None)
        if resource is not None:
            yield resource
