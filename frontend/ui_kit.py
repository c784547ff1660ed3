import html

import pandas as pd
import streamlit as st

from nutriscreen.services.view_model import HOTSPOT_COLUMNS, SERIES_COLORS, ChartPayload, StatusView


STYLE_COLORS = {
    "neutral": ("rgba(148,163,184,0.15)", "#94a3b8"),
    "good": ("rgba(34,197,94,0.15)", "#22c55e"),
    "risk": ("rgba(245,158,11,0.15)", "#f59e0b"),
    "bad": ("rgba(239,68,68,0.15)", "#ef4444"),
}


def set_page(title: str):
    st.set_page_config(
        page_title=title,
        page_icon="🥣",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.markdown(
        """
        <style>
        .block-container { padding-top: 1.0rem; padding-bottom: 2rem; }
        div[data-testid="stMetric"] { background: rgba(255,255,255,0.04); border: 1px solid rgba(255,255,255,0.06); padding: 14px 14px 10px 14px; border-radius: 14px; }
        .card { border-radius: 16px; padding: 16px; margin-bottom: 10px; }
        .muted { opacity: 0.75; }
        .small { font-size: 0.92rem; }
        </style>
        """,
        unsafe_allow_html=True,
    )


def urgency_badge(level: str) -> str:
    level = (level or "").lower()
    if level == "high":
        return "🔴 HIGH"
    if level == "medium":
        return "🟠 MEDIUM"
    if level == "low":
        return "🟢 LOW"
    return "⚪ UNKNOWN"


def banner_html(view: StatusView) -> str:
    # view.text carries the typed child ID
    bg, border = STYLE_COLORS.get(view.style, STYLE_COLORS["neutral"])
    return f"<div class='card' style='background:{bg};border:2px solid {border}'><b>{html.escape(view.text)}</b></div>"


def status_banner(view: StatusView):
    st.markdown(banner_html(view), unsafe_allow_html=True)


def card(title: str, body_md: str, bg_color: str = "rgba(255,255,255,0.04)", border_color: str = "rgba(255,255,255,0.06)"):
    st.markdown(
        f"<div class='card' style='background:{bg_color};border:1px solid {border_color};color:#111'>"
        f"<h4 style='margin:0 0 8px 0'>{title}</h4>{body_md}</div>",
        unsafe_allow_html=True,
    )


def chart_frame(payload: ChartPayload) -> pd.DataFrame:
    """Two count columns indexed by ward label, in ward order."""
    nourished, adverse = payload.values
    index = pd.Index(list(payload.ward_labels), name=payload.x_title)
    # numeric ward labels keep numeric axis order instead of "10" < "2"
    numeric = pd.to_numeric(index, errors="coerce")
    if len(index) and not numeric.isna().any():
        index = pd.Index(numeric.astype(int), name=payload.x_title)
    return pd.DataFrame(
        {
            payload.category_labels[0]: list(nourished),
            payload.category_labels[1]: list(adverse),
        },
        index=index,
    )


def ward_chart(payload: ChartPayload):
    if not payload.ward_labels:
        st.info("No children screened yet. Submit the form to populate ward statistics.")
        return
    st.bar_chart(
        chart_frame(payload),
        x_label=payload.x_title,
        y_label=payload.y_title,
        color=list(SERIES_COLORS),
        stack=False,
    )


def hotspot_frame(rows) -> pd.DataFrame:
    return pd.DataFrame(rows, columns=list(HOTSPOT_COLUMNS))
