# ============================================================================
# src/ancora_matching/extraction/accumulator.py
# ============================================================================
"""
Criteria accumulated while scanning one patient bundle
- Boolean criterion flags and numeric criteria kept in separate maps
- Disease type, natal sex, search parameters
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ancora_matching.constants import (
    CriterionFlag,
    DiseaseType,
    NatalSex,
    NumericCriterion,
    NATAL_SEX_KEY,
)


@dataclass
class CriteriaAccumulator:
    flags: Dict[CriterionFlag, bool] = field(default_factory=dict)
    numeric: Dict[NumericCriterion, int] = field(default_factory=dict)
    natal_sex: Optional[NatalSex] = None

    # Unset until a Condition resolves one (or a default is given)
    type_of_disease: Optional[DiseaseType] = None

    # Search parameters
    zip_code: Optional[str] = None
    travel_radius: Optional[float] = None
    phase: Optional[str] = None
    recruitment_status: Optional[str] = None

    def set_flag(self, flag: CriterionFlag, value: bool = True) -> None:
        self.flags[flag] = value

    def set_numeric(self, criterion: NumericCriterion, value: int) -> None:
        self.numeric[criterion] = value

    def criterions(self) -> Dict[str, Any]:
        """
        Flat criterion-name -> value map in the shape Ancora expects.

        Always a new dict; later changes to the accumulator do not show up
        in a map already returned.
        """
        result: Dict[str, Any] = {}
        for flag, value in self.flags.items():
            result[flag.value] = value
        for criterion, value in self.numeric.items():
            result[criterion.value] = value
        if self.natal_sex is not None:
            result[NATAL_SEX_KEY] = self.natal_sex.value
        return result
