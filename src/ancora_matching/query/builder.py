# ============================================================================
# src/ancora_matching/query/builder.py
# ============================================================================
"""
Query Assembler

Turns the criteria accumulated from a patient bundle into the request body
sent to the Ancora.ai matching API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
import json
import logging

from ancora_matching.config.query_config import QuerySettings, query_settings
from ancora_matching.constants import DiseaseType
from ancora_matching.extraction.accumulator import CriteriaAccumulator
from ancora_matching.utils.exceptions import QueryValidationError


logger = logging.getLogger(__name__)

NO_DISEASE_MESSAGE = (
    "No supported disease category found within patient data, "
    "cannot generate a valid query."
)


@dataclass
class AncoraQuery:
    """A complete Ancora.ai query."""
    country: str
    type_of_disease: DiseaseType
    criterions: Dict[str, Any] = field(default_factory=dict)
    zip_code: Optional[str] = None
    radius: Optional[float] = None
    radius_unit: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON request body."""
        query: Dict[str, Any] = {
            "country": self.country,
            "type_of_disease": self.type_of_disease.value,
        }
        if self.zip_code is not None:
            query["zip_code"] = self.zip_code
        if self.radius is not None:
            query["radius"] = _json_number(self.radius)
            query["radius_unit"] = self.radius_unit
        query["criterions"] = dict(self.criterions)
        return query

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def _json_number(value: float) -> Union[int, float]:
    # 25.0 -> 25 so integral radii serialize as integers
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def coerce_disease_type(value: Union[DiseaseType, str, None]) -> Optional[DiseaseType]:
    if value is None or isinstance(value, DiseaseType):
        return value
    try:
        return DiseaseType(value)
    except ValueError:
        raise QueryValidationError(f"Unknown disease type: {value!r}")


def build_query(
    accumulator: CriteriaAccumulator,
    default_type_of_disease: Union[DiseaseType, str, None] = None,
    settings: Optional[QuerySettings] = None
) -> AncoraQuery:
    """
    Build the final query from accumulated criteria.

    Args:
        accumulator: Criteria gathered from one patient bundle
        default_type_of_disease: Used when no Condition resolved a disease type
        settings: Query settings (defaults to environment configuration)

    Returns:
        AncoraQuery holding copies of the accumulated values

    Raises:
        QueryValidationError: No disease type could be determined
    """
    settings = settings or query_settings

    type_of_disease = (
        accumulator.type_of_disease
        or coerce_disease_type(default_type_of_disease)
        or settings.DEFAULT_TYPE_OF_DISEASE
    )
    criterions = accumulator.criterions()

    if type_of_disease is None:
        raise QueryValidationError(NO_DISEASE_MESSAGE, criterions=criterions)

    if accumulator.travel_radius is not None:
        radius = accumulator.travel_radius
    else:
        radius = settings.DEFAULT_TRAVEL_RADIUS

    query = AncoraQuery(
        # Ancora currently only serves US requests
        country=settings.QUERY_COUNTRY,
        type_of_disease=type_of_disease,
        criterions=criterions,
        zip_code=accumulator.zip_code,
        radius=radius,
        radius_unit=settings.RADIUS_UNIT
    )
    logger.debug(
        f"Built query for {type_of_disease.value} with {len(criterions)} criteria"
    )
    return query
