# ============================================================================
# src/ancora_matching/config/query_config.py
# ============================================================================
"""
Query Settings
- Country
- Default travel radius and unit
- Fallback disease type
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from ancora_matching.constants.criteria import DiseaseType


class QuerySettings(BaseSettings):
    QUERY_COUNTRY: str = Field(
        default="US",
        min_length=2, max_length=2,
        description="Country code sent with every query (Ancora only serves US requests for now)"
    )
    DEFAULT_TRAVEL_RADIUS: float = Field(
        default=400,
        gt=0,
        description="Search radius used when the patient bundle gives no travelRadius"
    )
    RADIUS_UNIT: Literal["MI", "KM"] = Field(
        default="MI",
        description="Distance unit for the search radius"
    )
    DEFAULT_TYPE_OF_DISEASE: Optional[DiseaseType] = Field(
        default=None,
        description="Disease type to query when no Condition resolves one"
    )

query_settings = QuerySettings()
