# ============================================================================
# FILE: tests/fhir_builders.py
# ============================================================================
"""
Small builders for FHIR JSON resources used across the tests.
"""

from ancora_matching.constants import LOINC_SYSTEM


def coding(system, code, display=None):
    result = {"system": system, "code": code}
    if display:
        result["display"] = display
    return result


def concept(*codings):
    return {"coding": list(codings)}


def condition(*codings, extension=None):
    resource = {"resourceType": "Condition", "code": concept(*codings)}
    if extension is not None:
        resource["extension"] = extension
    return resource


def observation(code_codings, value_codings=None, value_integer=None):
    resource = {"resourceType": "Observation", "status": "final", "code": concept(*code_codings)}
    if value_codings is not None:
        resource["valueCodeableConcept"] = concept(*value_codings)
    if value_integer is not None:
        resource["valueInteger"] = value_integer
    return resource


def staging_observation(system, code, loinc="21908-9"):
    return observation([coding(LOINC_SYSTEM, loinc)], [coding(system, code)])


def medication_statement(*codings):
    return {
        "resourceType": "MedicationStatement",
        "status": "completed",
        "medicationCodeableConcept": concept(*codings),
    }


def procedure(*codings, status="completed"):
    return {"resourceType": "Procedure", "status": status, "code": concept(*codings)}


def patient(gender=None, birth_date=None):
    resource = {"resourceType": "Patient"}
    if gender is not None:
        resource["gender"] = gender
    if birth_date is not None:
        resource["birthDate"] = birth_date
    return resource


def parameters(**values):
    params = []
    for name, value in values.items():
        if isinstance(value, str):
            params.append({"name": name, "valueString": value})
        elif isinstance(value, int):
            params.append({"name": name, "valueInteger": value})
        else:
            params.append({"name": name, "valueDecimal": value})
    return {"resourceType": "Parameters", "parameter": params}


def bundle(*resources):
    return {
        "resourceType": "Bundle",
        "type": "collection",
        "entry": [{"resource": resource} for resource in resources],
    }


