# ============================================================================
# src/ancora_matching/query/api_query.py
# ============================================================================
"""
AncoraAPIQuery

Builds the Ancora criteria for a whole patient bundle in one pass and turns
them into a query on request.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union
import json
import logging

from ancora_matching.config.query_config import QuerySettings
from ancora_matching.constants import DiseaseType
from ancora_matching.extraction.accumulator import CriteriaAccumulator
from ancora_matching.extraction.extractor import CriteriaExtractor
from ancora_matching.fhir_utils.parsing import iter_bundle_resources
from ancora_matching.mappings.reverse_index import ReverseIndex
from .builder import AncoraQuery, coerce_disease_type, build_query


logger = logging.getLogger(__name__)


class AncoraAPIQuery:
    """
    Query built from the values within a patient bundle.

    Unreadable entries and unsupported resource types are skipped.
    """

    def __init__(
        self,
        patient_bundle: Any,
        default_type_of_disease: Union[DiseaseType, str, None] = None,
        index: Optional[ReverseIndex] = None,
        now: Optional[datetime] = None,
        settings: Optional[QuerySettings] = None
    ):
        """
        Args:
            patient_bundle: FHIR Bundle (JSON dict or fhir.resources model)
            default_type_of_disease: Disease type to fall back on if none can
                be found within the patient data
            index: Code lookups (defaults to the shipped code tables)
            now: Fixed "current time" for age calculation
            settings: Query settings (defaults to environment configuration)
        """
        self.criteria = CriteriaAccumulator()
        self.criteria.type_of_disease = coerce_disease_type(default_type_of_disease)
        self.settings = settings

        extractor = CriteriaExtractor(index=index, now=now)
        processed = 0
        skipped = 0
        for resource in iter_bundle_resources(patient_bundle):
            if extractor.extract(resource, self.criteria):
                processed += 1
            else:
                skipped += 1

        logger.debug(
            f"Processed {processed} resources ({skipped} skipped), "
            f"type of disease: {self.type_of_disease}"
        )

    @property
    def type_of_disease(self) -> Optional[DiseaseType]:
        return self.criteria.type_of_disease

    @property
    def zip_code(self) -> Optional[str]:
        return self.criteria.zip_code

    @property
    def travel_radius(self) -> Optional[float]:
        return self.criteria.travel_radius

    @property
    def phase(self) -> Optional[str]:
        return self.criteria.phase

    @property
    def recruitment_status(self) -> Optional[str]:
        return self.criteria.recruitment_status

    @property
    def criterions(self) -> Dict[str, Any]:
        return self.criteria.criterions()

    def to_query(self) -> AncoraQuery:
        """
        Create the query for this bundle.

        Raises:
            QueryValidationError: No disease type was found and no default given
        """
        return build_query(self.criteria, settings=self.settings)

    def __str__(self) -> str:
        if self.type_of_disease is None:
            return (
                "[AncoraAPIQuery (invalid: no typeOfDisease, with criteria: "
                f"{json.dumps(self.criterions)})]"
            )
        return f"[AncoraAPIQuery {self.to_query().to_json()}]"
