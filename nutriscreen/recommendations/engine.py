from __future__ import annotations

import logging
from typing import Any, List, Optional

from nutriscreen.models.screening.classifier import Category, UnknownCategory
from nutriscreen.recommendations.catalog import FOOD_CATALOG, MEAL_PLANS, RECOMMENDATION_MATRIX
from nutriscreen.recommendations.schemas import (
    FOOD_TAGS,
    FoodItem,
    MealPlan,
    RecommendationBundle,
    RecommendationProfile,
)


logger = logging.getLogger(__name__)


def recommend(category: Any) -> RecommendationProfile:
    """Static guidance profile for a category. Unknown labels raise UnknownCategory."""
    cat = Category.parse(category)
    return RecommendationProfile(category=cat.value, **RECOMMENDATION_MATRIX[cat])


def meal_plan(category: Any) -> MealPlan:
    try:
        cat = Category.parse(category)
    except UnknownCategory:
        logger.warning("No meal plan for %r, using Borderline plan", category)
        cat = Category.BORDERLINE
    return MealPlan(**MEAL_PLANS.get(cat, MEAL_PLANS[Category.BORDERLINE]))


def foods_by_category(tag: str) -> List[FoodItem]:
    return [FoodItem(category=tag, **f) for f in FOOD_CATALOG.get(tag, [])]


def search_food(name: str) -> Optional[FoodItem]:
    """Case-insensitive exact match on food name across all tags."""
    needle = (name or "").strip().lower()
    if not needle:
        return None
    for tag in FOOD_TAGS:
        for f in FOOD_CATALOG[tag]:
            if f["name"].lower() == needle:
                return FoodItem(category=tag, **f)
    return None


def build_recommendations(category: Any, foods_per_tag: int = 3) -> RecommendationBundle:
    """Profile + the first few catalog foods for each tag the profile surfaces + daily meal plan."""
    profile = recommend(category)
    foods: List[FoodItem] = []
    for tag in FOOD_TAGS:
        if tag in profile.food_tags:
            foods.extend(foods_by_category(tag)[:foods_per_tag])
    return RecommendationBundle(profile=profile, foods=foods, meal_plan=meal_plan(profile.category))
