from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from nutriscreen.models.screening.classifier import Category


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Observation:
    ward: Any
    status: Category
    child_id: Optional[str] = None


@dataclass(frozen=True)
class WardSummary:
    ward: Any
    nourished_count: int
    adverse_count: int
    total: int
    adverse_percent: float


@dataclass(frozen=True)
class ChartSeries:
    wards: Tuple[Any, ...]
    nourished_counts: Tuple[int, ...]
    adverse_counts: Tuple[int, ...]


def adverse_percent(adverse: int, total: int) -> float:
    return 100.0 * adverse / total if total else 0.0


class WardAggregator:
    """Append-only log of (ward, category) observations for one survey session.

    Every derived view is rebuilt from the full log on each call, so the same
    log always yields the same chart series and hotspot table.
    """

    def __init__(self, observations: Iterable[Observation] = ()) -> None:
        self._observations: List[Observation] = list(observations)

    def __len__(self) -> int:
        return len(self._observations)

    @property
    def observations(self) -> Tuple[Observation, ...]:
        return tuple(self._observations)

    def record(self, ward: Any, category: Category | str, child_id: Optional[str] = None) -> None:
        obs = Observation(ward=ward, status=Category.parse(category), child_id=child_id)
        self._observations.append(obs)
        logger.debug("Recorded ward=%s status=%s (n=%d)", ward, obs.status.value, len(self._observations))

    def _tally(self) -> Dict[Any, List[int]]:
        """ward -> [nourished, adverse]"""
        counts: Dict[Any, List[int]] = defaultdict(lambda: [0, 0])
        for obs in self._observations:
            counts[obs.ward][1 if obs.status.is_adverse else 0] += 1
        return dict(counts)

    def chart_series(self) -> ChartSeries:
        counts = self._tally()
        wards = sorted(counts)
        return ChartSeries(
            wards=tuple(wards),
            nourished_counts=tuple(counts[w][0] for w in wards),
            adverse_counts=tuple(counts[w][1] for w in wards),
        )

    def hotspot_table(self) -> List[WardSummary]:
        """Wards ranked by share of non-nourished children, highest first (ties: ward ascending)."""
        counts = self._tally()
        rows: List[WardSummary] = []
        for ward in sorted(counts):
            good, bad = counts[ward]
            total = good + bad
            rows.append(
                WardSummary(
                    ward=ward,
                    nourished_count=good,
                    adverse_count=bad,
                    total=total,
                    adverse_percent=adverse_percent(bad, total),
                )
            )

        # sort is stable, so equal percentages keep ward order
        rows.sort(key=lambda r: r.adverse_percent, reverse=True)
        return rows
