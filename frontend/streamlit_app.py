import logging

import streamlit as st
from pydantic import ValidationError

from nutriscreen.config import configure_logging, load_config
from nutriscreen.models.screening.classifier import MAX_SCORE, InvalidMeasurement
from nutriscreen.recommendations.engine import foods_by_category, search_food
from nutriscreen.recommendations.schemas import FOOD_TAGS
from nutriscreen.schemas.survey import SurveySubmission
from nutriscreen.services.session_gate import SessionGate
from nutriscreen.services.view_model import NEUTRAL_STATUS, card_palette

from ui_kit import card, hotspot_frame, set_page, status_banner, urgency_badge, ward_chart


@st.cache_resource(show_spinner=False)
def _load_cfg() -> dict:
    cfg = load_config()
    configure_logging(cfg)
    return cfg


cfg = _load_cfg()
logger = logging.getLogger("nutriscreen.frontend")
gate = SessionGate.from_config(cfg)

set_page(cfg.get("app", {}).get("title", "Ward Nutrition Screening"))

# One SurveySession per browser session; dropped on sign-out.
if "survey" not in st.session_state:
    st.session_state["survey"] = None
if "last_result" not in st.session_state:
    st.session_state["last_result"] = None


# -----------------------
# Helpers
# -----------------------
def sign_out():
    st.session_state["survey"] = None
    st.session_state["last_result"] = None
    logger.info("Survey session ended")


def food_table(items):
    return [
        {"": f.icon, "Food": f.name, "Quantity": f.quantity, "Value": f.nutritional_value, "Cost": f.cost}
        for f in items
    ]


def render_recommendations(result):
    bundle = result.recommendations
    profile = bundle.profile
    palette = card_palette(result.category)

    card(
        profile.priority,
        f"<p>{profile.description}</p>"
        f"<p><b>Urgency:</b> {urgency_badge(profile.urgency)} &nbsp; "
        f"<b>Follow-up:</b> in {profile.follow_up_days} days</p>"
        f"<p><b>Meal frequency:</b> {profile.meal_frequency}</p>"
        f"<p>{profile.supplementation}</p>",
        bg_color=palette["bg_color"],
        border_color=palette["border_color"],
    )

    left, right = st.columns(2)
    with left:
        st.markdown("**Recommended foods**")
        st.dataframe(food_table(bundle.foods), use_container_width=True, hide_index=True)
    with right:
        plan = bundle.meal_plan
        st.markdown("**Daily meal plan**")
        st.markdown(
            f"- **Breakfast:** {plan.breakfast}\n"
            f"- **Mid-morning:** {plan.mid_morning}\n"
            f"- **Lunch:** {plan.lunch}\n"
            f"- **Afternoon:** {plan.afternoon}\n"
            f"- **Dinner:** {plan.dinner}"
        )
        st.caption(plan.notes)


# -----------------------
# Sign-in page
# -----------------------
def sign_in_page():
    st.title(cfg.get("app", {}).get("title", "Ward Nutrition Screening"))
    st.caption(cfg.get("app", {}).get("caption", ""))
    with st.form("login"):
        code = st.text_input("Access code", type="password")
        ok = st.form_submit_button("Sign in")
    if ok:
        survey = gate.start(code)
        if survey is None:
            st.error(gate.hint)
        else:
            st.session_state["survey"] = survey
            st.rerun()


# -----------------------
# Survey page
# -----------------------
def survey_page():
    survey = st.session_state["survey"]

    st.sidebar.button("Sign out", on_click=sign_out)

    st.title("Child Nutrition Survey")
    tabs = st.tabs(["Screening", "Ward Hotspots", "Food Guide"])

    with tabs[0]:
        with st.form("survey", clear_on_submit=True):
            c1, c2 = st.columns(2)
            ward = c1.number_input("Ward number", min_value=0, step=1, value=1)
            child_id = c2.text_input("Child ID")
            c3, c4, c5, c6 = st.columns(4)
            age_months = c3.number_input("Age (months)", min_value=0.0, value=24.0)
            weight = c4.number_input("Weight (kg)", min_value=0.0, value=11.0)
            height = c5.number_input("Height (cm)", min_value=0.0, value=85.0)
            muac = c6.number_input("MUAC (cm)", min_value=0.0, value=13.5, step=0.1)
            c7, c8, c9, c10 = st.columns(4)
            illness = c7.selectbox("Illness in last 2 weeks", ["no", "yes"])
            immunized = c8.selectbox("Immunization up to date", ["yes", "no"])
            meals = c9.number_input("Meals per day", min_value=0, step=1, value=3)
            diet_groups = c10.number_input("Food groups eaten", min_value=0, max_value=8, step=1, value=4)
            submitted = st.form_submit_button("Classify & record")

        if submitted:
            try:
                sub = SurveySubmission(
                    ward=int(ward),
                    child_id=child_id,
                    age_months=age_months,
                    weight_kg=weight,
                    height_cm=height,
                    muac_cm=muac,
                    illness=illness,
                    immunized=immunized,
                    meals_per_day=meals,
                    diet_groups=diet_groups,
                )
                st.session_state["last_result"] = survey.submit(sub)
            except (ValidationError, InvalidMeasurement) as e:
                st.error(f"Could not classify this child: {e}")

        result = st.session_state.get("last_result")
        status_banner(result.status if result else NEUTRAL_STATUS)
        if result:
            st.caption(
                f"Score {result.breakdown.total}/{MAX_SCORE} "
                f"(MUAC {result.breakdown.muac_points}, meals {result.breakdown.meal_points}, "
                f"diet {result.breakdown.diet_points}, illness {result.breakdown.illness_points}, "
                f"immunization {result.breakdown.immunization_points})"
            )
            render_recommendations(result)

    with tabs[1]:
        st.subheader("Children by ward")
        ward_chart(survey.chart_payload())
        st.subheader("Hotspot wards")
        rows = survey.hotspot_rows()
        if rows:
            st.dataframe(hotspot_frame(rows), use_container_width=True, hide_index=True)
        else:
            st.info("Hotspot ranking appears after the first submission.")

    with tabs[2]:
        tag = st.selectbox("Food category", FOOD_TAGS)
        st.dataframe(food_table(foods_by_category(tag)), use_container_width=True, hide_index=True)
        name = st.text_input("Look up a food by name")
        if name:
            hit = search_food(name)
            if hit is None:
                st.warning(f"'{name}' is not in the food guide.")
            else:
                card(f"{hit.icon} {hit.name}", f"{hit.quantity} · {hit.nutritional_value} · {hit.cost} ({hit.category})")

    # rendered last so the count includes this run's submission
    st.sidebar.metric("Children screened", survey.observation_count)


if st.session_state["survey"] is None:
    sign_in_page()
else:
    survey_page()
