from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


FoodTag = Literal["protein", "calories", "micronutrients"]
FOOD_TAGS: List[str] = ["protein", "calories", "micronutrients"]


class FoodItem(BaseModel):
    name: str
    quantity: str
    nutritional_value: str
    cost: str
    icon: str
    category: FoodTag


class RecommendationProfile(BaseModel):
    category: str
    priority: str
    description: str
    urgency: Literal["low", "medium", "high"]
    meal_frequency: str
    food_tags: List[FoodTag]
    supplementation: str
    follow_up_days: int = Field(..., gt=0)


class MealPlan(BaseModel):
    breakfast: str
    mid_morning: str
    lunch: str
    afternoon: str
    dinner: str
    notes: str


class RecommendationBundle(BaseModel):
    profile: RecommendationProfile
    foods: List[FoodItem]
    meal_plan: MealPlan
