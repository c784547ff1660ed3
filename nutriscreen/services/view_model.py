"""
Plain display data for the client. Nothing here knows about streamlit;
the rendering adapter in frontend/ consumes these structures.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from nutriscreen.models.screening.classifier import Category
from nutriscreen.services.ward_aggregator import ChartSeries, WardSummary


SERIES_LABELS: Tuple[str, str] = ("Nourished", "At Risk / Malnourished")
SERIES_COLORS: Tuple[str, str] = ("#22c55e", "#ef4444")
X_TITLE = "Ward"
Y_TITLE = "Number of children"

STATUS_STYLE: Dict[Category, str] = {
    Category.NOURISHED: "good",
    Category.BORDERLINE: "risk",
    Category.AT_RISK: "risk",
    Category.SEVERELY_MALNOURISHED: "bad",
}

CARD_PALETTE: Dict[Category, Dict[str, str]] = {
    Category.SEVERELY_MALNOURISHED: {"bg_color": "#fee2e2", "border_color": "#dc2626"},
    Category.AT_RISK: {"bg_color": "#fef08a", "border_color": "#f59e0b"},
    Category.BORDERLINE: {"bg_color": "#fed7aa", "border_color": "#f97316"},
    Category.NOURISHED: {"bg_color": "#dcfce7", "border_color": "#22c55e"},
}

HOTSPOT_COLUMNS: Tuple[str, str, str] = ("Ward", "Children screened", "% at risk")


@dataclass(frozen=True)
class StatusView:
    text: str
    style: str
    category: Optional[Category] = None


@dataclass(frozen=True)
class ChartPayload:
    category_labels: Tuple[str, str]
    ward_labels: Tuple[str, ...]
    values: Tuple[Tuple[int, ...], Tuple[int, ...]]
    x_title: str = X_TITLE
    y_title: str = Y_TITLE


NEUTRAL_STATUS = StatusView(text="No child screened yet.", style="neutral")


def status_view(child_id: str, category: Category) -> StatusView:
    return StatusView(
        text=f"Child {child_id} is classified as: {category.value}",
        style=STATUS_STYLE[category],
        category=category,
    )


def chart_payload(series: ChartSeries) -> ChartPayload:
    return ChartPayload(
        category_labels=SERIES_LABELS,
        ward_labels=tuple(str(w) for w in series.wards),
        values=(series.nourished_counts, series.adverse_counts),
    )


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def hotspot_rows(table: Sequence[WardSummary]) -> List[Tuple[str, str, str]]:
    return [(str(r.ward), str(r.total), format_percent(r.adverse_percent)) for r in table]


def card_palette(category: Category) -> Dict[str, str]:
    return dict(CARD_PALETTE[category])
