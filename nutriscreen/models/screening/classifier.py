from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List

import numpy as np


class UnknownCategory(ValueError):
    """Raised when a label does not name one of the four screening categories."""


class InvalidMeasurement(ValueError):
    def __init__(self, bad_fields: List[str]):
        self.bad_fields = bad_fields
        super().__init__(f"Non-numeric or non-finite measurement fields: {', '.join(bad_fields)}")


class Category(str, Enum):
    # Declaration order is severity order.
    NOURISHED = "Nourished"
    BORDERLINE = "Borderline"
    AT_RISK = "At Risk"
    SEVERELY_MALNOURISHED = "Severely Malnourished"

    @property
    def severity(self) -> int:
        return list(Category).index(self)

    @property
    def is_adverse(self) -> bool:
        return self is not Category.NOURISHED

    @classmethod
    def parse(cls, value: Any) -> "Category":
        if isinstance(value, Category):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownCategory(f"Unknown category: {value!r}") from None


@dataclass(frozen=True)
class Measurement:
    age_months: float
    weight: float
    height: float
    muac: float
    illness: bool
    immunized: bool
    meals_per_day: float
    diet_groups: float


@dataclass(frozen=True)
class ScoringRules:
    muac_severe: float = 11.5
    muac_moderate: float = 12.5
    muac_mild: float = 13.5
    meals_low: float = 2
    meals_mid: float = 3
    diet_low: float = 2
    diet_mid: float = 4
    severe_cutoff: int = 6
    at_risk_cutoff: int = 4
    borderline_cutoff: int = 2

    @classmethod
    def from_dict(cls, thresholds: Dict[str, Any] | None) -> "ScoringRules":
        known = {f.name for f in fields(cls)}
        unknown = set(thresholds or {}) - known
        if unknown:
            raise ValueError(f"Unknown scoring thresholds: {sorted(unknown)}")
        return cls(**(thresholds or {}))


DEFAULT_RULES = ScoringRules()

# Band maxima: MUAC 3 + meals 2 + diet 2 + illness 1 + immunization 1
MAX_SCORE = 9


@dataclass(frozen=True)
class ScoreBreakdown:
    muac_points: int
    meal_points: int
    diet_points: int
    illness_points: int
    immunization_points: int

    @property
    def total(self) -> int:
        return (
            self.muac_points
            + self.meal_points
            + self.diet_points
            + self.illness_points
            + self.immunization_points
        )


def validate_measurement(m: Measurement) -> None:
    """Reject NaN/inf in numeric fields. Booleans are not checked."""
    bad = []
    for f in fields(m):
        value = getattr(m, f.name)
        if isinstance(value, bool):
            continue
        try:
            ok = bool(np.isfinite(float(value)))
        except (TypeError, ValueError):
            ok = False
        if not ok:
            bad.append(f.name)
    if bad:
        raise InvalidMeasurement(bad)


def score_breakdown(m: Measurement, rules: ScoringRules = DEFAULT_RULES) -> ScoreBreakdown:
    """
    Additive point score, higher is worse.
    NaN inputs compare false everywhere and therefore contribute no points.
    """
    if m.muac < rules.muac_severe:
        muac_pts = 3
    elif m.muac < rules.muac_moderate:
        muac_pts = 2
    elif m.muac < rules.muac_mild:
        muac_pts = 1
    else:
        muac_pts = 0

    if m.meals_per_day <= rules.meals_low:
        meal_pts = 2
    elif m.meals_per_day == rules.meals_mid:
        meal_pts = 1
    else:
        meal_pts = 0

    if m.diet_groups <= rules.diet_low:
        diet_pts = 2
    elif m.diet_groups <= rules.diet_mid:
        diet_pts = 1
    else:
        diet_pts = 0

    return ScoreBreakdown(
        muac_points=muac_pts,
        meal_points=meal_pts,
        diet_points=diet_pts,
        illness_points=1 if m.illness else 0,
        immunization_points=0 if m.immunized else 1,
    )


def category_for_score(score: int, rules: ScoringRules = DEFAULT_RULES) -> Category:
    if score >= rules.severe_cutoff:
        return Category.SEVERELY_MALNOURISHED
    if score >= rules.at_risk_cutoff:
        return Category.AT_RISK
    if score >= rules.borderline_cutoff:
        return Category.BORDERLINE
    return Category.NOURISHED


def classify(m: Measurement, rules: ScoringRules = DEFAULT_RULES) -> Category:
    """
    Rule-based screening category for one child.
    This is a placeholder heuristic; a learned model can replace it behind the same signature.
    """
    return category_for_score(score_breakdown(m, rules).total, rules)
