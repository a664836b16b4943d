# ============================================================================
# src/ancora_matching/extraction/extractor.py
# ============================================================================
"""
Criteria Extractor

Walks the clinical resources of a patient bundle and folds recognized codes
into a CriteriaAccumulator:

- Condition: criterion flags + disease type (last recognized wins), plus
  histology codes from the mCODE morphology extension
- Observation: biomarker result (Positive/Negative qualifier), ECOG and
  Karnofsky performance status, tumor stage
- MedicationStatement: prior therapy flags
- Procedure: flags, only for completed procedures
- Patient: natal sex and age
- Parameters: zip code, travel radius, phase, recruitment status

Extraction never raises for malformed resources. Anything that does not
parse simply contributes nothing.
"""

from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional, Union
import logging
import math
import re

from ancora_matching.constants import (
    LOINC_SYSTEM,
    SNOMED_CT_SYSTEM,
    STAGE_LOINC_CODES,
    RESULT_QUALIFIERS,
    PERFORMANCE_STATUS_CODES,
    NatalSex,
    NumericCriterion,
)
from ancora_matching.fhir_utils.parsing import (
    ParsedCoding,
    ParsedCondition,
    ParsedMedicationStatement,
    ParsedObservation,
    ParsedParameters,
    ParsedPatient,
    ParsedProcedure,
    as_json_dict,
    parse_condition,
    parse_medication_statement,
    parse_observation,
    parse_parameters,
    parse_patient,
    parse_procedure,
    parse_resource,
)
from ancora_matching.mappings.reverse_index import ReverseIndex, get_default_index
from .accumulator import CriteriaAccumulator


logger = logging.getLogger(__name__)

MIN_AGE = 1
MAX_AGE = 100

# YYYY, YYYY-MM or YYYY-MM-DD, optionally followed by a time
_BIRTH_DATE_PATTERN = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?(?:T.*)?$")


# ============================================================================
# Demographics helpers
# ============================================================================

def parse_birth_date(value: Any) -> Optional[date]:
    """
    Parse a FHIR date that may be a year, a year-month or a full date.

    Missing month/day anchor to January / the 1st.

    Returns:
        date, or None if unparseable
    """
    if not isinstance(value, str):
        return None
    match = _BIRTH_DATE_PATTERN.match(value.strip())
    if not match:
        return None
    year, month, day = match.groups()
    try:
        return date(int(year), int(month or 1), int(day or 1))
    except ValueError:
        return None


def _day_ordinal(value: Union[date, datetime]) -> int:
    # Day of the week, Sunday = 0. Within the birth month the age compares
    # weekday ordinals, not days of the month; the reference ages (21 on
    # 2023-02-03, 20 on 2023-02-02 for a 2002-02-01 birth) depend on it.
    return value.isoweekday() % 7


def compute_age(birth_date: date, now: datetime) -> int:
    """
    Age in whole years as of `now`, using UTC calendar fields.

    One year is subtracted when the current month is before the birth month,
    or within the birth month when the current day ordinal is before the
    birth day ordinal. Ages reported to Ancora are compared this way, so
    2002-02-01 is 21 as of 2023-02-03 and 20 as of 2023-02-02.

    Result is clamped to [1, 100].
    """
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)

    age = now.year - birth_date.year
    if now.month < birth_date.month or (
        now.month == birth_date.month and _day_ordinal(now) < _day_ordinal(birth_date)
    ):
        age -= 1

    return max(MIN_AGE, min(MAX_AGE, age))


def _parse_radius(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        return None
    return value


# ============================================================================
# Extractor
# ============================================================================

class CriteriaExtractor:
    """
    Applies per-resource extraction rules against a ReverseIndex.

    The index is read-only and may be shared; the accumulator passed to each
    call is owned by the caller's extraction pass.
    """

    def __init__(
        self,
        index: Optional[ReverseIndex] = None,
        now: Optional[datetime] = None
    ):
        """
        Args:
            index: Code lookups (defaults to the shipped code tables)
            now: Fixed "current time" for age calculation (defaults to the
                time each Patient is processed)
        """
        self.index = index if index is not None else get_default_index()
        self.now = now

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def extract(self, resource: Any, accumulator: CriteriaAccumulator) -> bool:
        """
        Fold one resource into the accumulator.

        Args:
            resource: FHIR resource (JSON dict or fhir.resources model)
            accumulator: Criteria for the bundle being processed

        Returns:
            True if the resource type is one extraction understands
        """
        parsed = parse_resource(resource)
        if parsed is None:
            return False

        if isinstance(parsed, ParsedCondition):
            self._apply_condition(parsed, accumulator)
        elif isinstance(parsed, ParsedObservation):
            self._apply_observation(parsed, accumulator)
        elif isinstance(parsed, ParsedMedicationStatement):
            self._add_flags(parsed.codings, accumulator)
        elif isinstance(parsed, ParsedProcedure):
            self._apply_procedure(parsed, accumulator)
        elif isinstance(parsed, ParsedPatient):
            self._apply_patient(parsed, accumulator)
        elif isinstance(parsed, ParsedParameters):
            self._apply_parameters(parsed, accumulator)
        return True

    def add_condition(self, condition: Any, accumulator: CriteriaAccumulator) -> None:
        data = as_json_dict(condition)
        if data is not None:
            self._apply_condition(parse_condition(data), accumulator)

    def add_observation(self, observation: Any, accumulator: CriteriaAccumulator) -> None:
        data = as_json_dict(observation)
        if data is not None:
            self._apply_observation(parse_observation(data), accumulator)

    def add_medication_statement(self, statement: Any, accumulator: CriteriaAccumulator) -> None:
        data = as_json_dict(statement)
        if data is not None:
            self._add_flags(parse_medication_statement(data).codings, accumulator)

    def add_procedure(self, procedure: Any, accumulator: CriteriaAccumulator) -> None:
        data = as_json_dict(procedure)
        if data is not None:
            self._apply_procedure(parse_procedure(data), accumulator)

    def add_patient(self, patient: Any, accumulator: CriteriaAccumulator) -> None:
        data = as_json_dict(patient)
        if data is not None:
            self._apply_patient(parse_patient(data), accumulator)

    def add_parameters(self, parameters: Any, accumulator: CriteriaAccumulator) -> None:
        data = as_json_dict(parameters)
        if data is not None:
            self._apply_parameters(parse_parameters(data), accumulator)

    # ------------------------------------------------------------------
    # Tumor stage
    # ------------------------------------------------------------------

    def find_tumor_stage(self, observation: Any) -> Optional[int]:
        """
        Determine the tumor stage recorded by a staging Observation.

        Only observations coded with one of the stage group LOINC codes are
        considered. The value codings are tried in order and the first one
        with a known stage wins.

        Args:
            observation: Observation (JSON dict, fhir.resources model or
                ParsedObservation)

        Returns:
            Stage 0-4, or None if none was found. Stage 0 is a real stage,
            test the result against None.
        """
        if not isinstance(observation, ParsedObservation):
            data = as_json_dict(observation)
            if data is None:
                return None
            observation = parse_observation(data)

        if not any(
            coding.code in STAGE_LOINC_CODES
            for coding in observation.codings
        ):
            return None

        if observation.value_codings is None:
            return None

        for coding in observation.value_codings:
            stage = self.index.tumor_stage_for_code(coding.system, coding.code)
            if stage is not None:
                return stage
        return None

    # ------------------------------------------------------------------
    # Per-resource rules
    # ------------------------------------------------------------------

    def _add_flags(
        self,
        codings: Iterable[ParsedCoding],
        accumulator: CriteriaAccumulator,
        value: bool = True
    ) -> None:
        for coding in codings:
            flags = self.index.find_flags(coding.system, coding.code)
            if flags:
                for flag in flags:
                    accumulator.set_flag(flag, value)

    def _apply_condition(self, condition: ParsedCondition, accumulator: CriteriaAccumulator) -> None:
        for coding in condition.codings:
            self._add_flags([coding], accumulator)
            disease = self.index.find_disease_type(coding.system, coding.code)
            if disease is not None:
                # Multiple disease codes: the last one seen wins
                accumulator.type_of_disease = disease

        self._add_flags(condition.histology_codings, accumulator)

    def _apply_observation(self, observation: ParsedObservation, accumulator: CriteriaAccumulator) -> None:
        # Biomarker result: the primary code names the marker, the value
        # carries Positive / Negative
        result = self._result_qualifier(observation.value_codings)
        if result is not None:
            self._add_flags(observation.codings, accumulator, result)

        if observation.value_integer is not None:
            for coding in observation.codings:
                if coding.system != LOINC_SYSTEM:
                    continue
                criterion = PERFORMANCE_STATUS_CODES.get(coding.code)
                if criterion is not None:
                    accumulator.set_numeric(criterion, observation.value_integer)

        stage = self.find_tumor_stage(observation)
        if stage is not None:
            accumulator.set_numeric(NumericCriterion.TUMOR_STAGE, stage)

    @staticmethod
    def _result_qualifier(value_codings: Optional[Iterable[ParsedCoding]]) -> Optional[bool]:
        if value_codings is None:
            return None
        for coding in value_codings:
            if coding.system == SNOMED_CT_SYSTEM and coding.code in RESULT_QUALIFIERS:
                return RESULT_QUALIFIERS[coding.code]
        return None

    def _apply_procedure(self, procedure: ParsedProcedure, accumulator: CriteriaAccumulator) -> None:
        if procedure.status != "completed":
            logger.debug(f"Skipping procedure with status {procedure.status!r}")
            return
        self._add_flags(procedure.codings, accumulator)

    def _apply_patient(self, patient: ParsedPatient, accumulator: CriteriaAccumulator) -> None:
        if patient.gender in (NatalSex.MALE.value, NatalSex.FEMALE.value):
            accumulator.natal_sex = NatalSex(patient.gender)

        birth_date = parse_birth_date(patient.birth_date)
        if birth_date is not None:
            now = self.now if self.now is not None else datetime.now(timezone.utc)
            accumulator.set_numeric(NumericCriterion.AGE, compute_age(birth_date, now))

    def _apply_parameters(self, parameters: ParsedParameters, accumulator: CriteriaAccumulator) -> None:
        for parameter in parameters.parameters:
            if parameter.name == "zipCode":
                if isinstance(parameter.value, str):
                    accumulator.zip_code = parameter.value
            elif parameter.name == "travelRadius":
                radius = _parse_radius(parameter.value)
                if radius is not None:
                    accumulator.travel_radius = radius
            elif parameter.name == "phase":
                if isinstance(parameter.value, str):
                    accumulator.phase = parameter.value
            elif parameter.name == "recruitmentStatus":
                if isinstance(parameter.value, str):
                    accumulator.recruitment_status = parameter.value


def extract_criteria(
    resource: Any,
    accumulator: CriteriaAccumulator,
    index: Optional[ReverseIndex] = None,
    now: Optional[datetime] = None
) -> bool:
    """
    Fold a single resource into `accumulator`.

    Convenience wrapper around CriteriaExtractor.extract().
    """
    return CriteriaExtractor(index=index, now=now).extract(resource, accumulator)
