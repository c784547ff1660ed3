from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from nutriscreen.models.screening.classifier import Measurement


_YES = {"yes", "y", "true", "1"}
_NO = {"no", "n", "false", "0"}


class SurveySubmission(BaseModel):
    ward: int = Field(..., ge=0, description="Ward number used for aggregate reporting")
    child_id: str = Field("", description="Free-text child identifier")
    age_months: float
    weight_kg: float
    height_cm: float
    muac_cm: float
    illness: bool = Field(..., description="Recent illness (form sends yes/no)")
    immunized: bool = Field(..., description="Up to date on immunization (form sends yes/no)")
    meals_per_day: int = Field(..., description="Whole meals per day")
    diet_groups: float = Field(..., description="Number of food groups eaten yesterday")

    @field_validator("child_id", mode="before")
    @classmethod
    def _strip_child_id(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("illness", "immunized", mode="before")
    @classmethod
    def _yes_no(cls, v: Any) -> Any:
        if isinstance(v, str):
            s = v.strip().lower()
            if s in _YES:
                return True
            if s in _NO:
                return False
        return v

    def to_measurement(self) -> Measurement:
        return Measurement(
            age_months=self.age_months,
            weight=self.weight_kg,
            height=self.height_cm,
            muac=self.muac_cm,
            illness=self.illness,
            immunized=self.immunized,
            meals_per_day=self.meals_per_day,
            diet_groups=self.diet_groups,
        )
