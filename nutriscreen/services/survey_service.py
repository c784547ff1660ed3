from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from nutriscreen.models.screening.classifier import (
    DEFAULT_RULES,
    Category,
    InvalidMeasurement,
    Measurement,
    ScoreBreakdown,
    ScoringRules,
    classify,
    score_breakdown,
    validate_measurement,
)
from nutriscreen.recommendations.engine import build_recommendations
from nutriscreen.recommendations.schemas import RecommendationBundle
from nutriscreen.schemas.survey import SurveySubmission
from nutriscreen.services.view_model import (
    ChartPayload,
    StatusView,
    chart_payload,
    hotspot_rows,
    status_view,
)
from nutriscreen.services.ward_aggregator import WardAggregator, WardSummary


logger = logging.getLogger(__name__)

# Swappable scoring rule: any (measurement, rules) -> Category callable.
Classifier = Callable[[Measurement, ScoringRules], Category]


@dataclass(frozen=True)
class SubmissionResult:
    child_id: str
    ward: int
    category: Category
    breakdown: ScoreBreakdown
    status: StatusView
    recommendations: RecommendationBundle


class SurveySession:
    """One field worker's screening session: classify, record, derive ward views."""

    def __init__(
        self,
        rules: ScoringRules = DEFAULT_RULES,
        strict_inputs: bool = False,
        aggregator: Optional[WardAggregator] = None,
        foods_per_category: int = 3,
        classifier: Classifier = classify,
    ) -> None:
        self.rules = rules
        self.strict_inputs = strict_inputs
        self.aggregator = aggregator if aggregator is not None else WardAggregator()
        self.foods_per_category = foods_per_category
        self.classifier = classifier

    @classmethod
    def from_config(cls, cfg: dict) -> "SurveySession":
        screening = cfg.get("screening") or {}
        recs = cfg.get("recommendations") or {}
        return cls(
            rules=ScoringRules.from_dict(screening.get("thresholds")),
            strict_inputs=bool(screening.get("strict_inputs", False)),
            foods_per_category=int(recs.get("foods_per_category", 3)),
        )

    @property
    def observation_count(self) -> int:
        return len(self.aggregator)

    def submit(self, submission: SurveySubmission) -> SubmissionResult:
        m = submission.to_measurement()
        if self.strict_inputs:
            try:
                validate_measurement(m)
            except InvalidMeasurement as e:
                logger.warning("Rejected submission for child %r: %s", submission.child_id, e)
                raise

        category = self.classifier(m, self.rules)
        # audit trail of the point rule, shown next to the category
        breakdown = score_breakdown(m, self.rules)
        self.aggregator.record(submission.ward, category, child_id=submission.child_id)
        logger.info(
            "Child %r in ward %s scored %d -> %s",
            submission.child_id,
            submission.ward,
            breakdown.total,
            category.value,
        )

        return SubmissionResult(
            child_id=submission.child_id,
            ward=submission.ward,
            category=category,
            breakdown=breakdown,
            status=status_view(submission.child_id, category),
            recommendations=build_recommendations(category, foods_per_tag=self.foods_per_category),
        )

    def hotspot_table(self) -> List[WardSummary]:
        return self.aggregator.hotspot_table()

    def hotspot_rows(self) -> List[Tuple[str, str, str]]:
        return hotspot_rows(self.aggregator.hotspot_table())

    def chart_payload(self) -> ChartPayload:
        return chart_payload(self.aggregator.chart_series())
