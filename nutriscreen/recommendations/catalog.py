from __future__ import annotations

from typing import Any, Dict, List

from nutriscreen.models.screening.classifier import Category


FOOD_CATALOG: Dict[str, List[Dict[str, str]]] = {
    "protein": [
        {"name": "Eggs", "quantity": "1-2 per day", "nutritional_value": "6g protein/egg", "cost": "₹5-8", "icon": "🥚"},
        {"name": "Milk/Curd", "quantity": "200ml daily", "nutritional_value": "6g protein/cup", "cost": "₹15-20", "icon": "🥛"},
        {"name": "Moong Dal", "quantity": "1 cup cooked", "nutritional_value": "8g protein", "cost": "₹30", "icon": "🫘"},
        {"name": "Chick Peas (Chana)", "quantity": "¾ cup cooked", "nutritional_value": "15g protein", "cost": "₹40", "icon": "🫘"},
        {"name": "Peanut Butter", "quantity": "2 tbsp", "nutritional_value": "8g protein", "cost": "₹20", "icon": "🥜"},
        {"name": "Chicken", "quantity": "100g cooked", "nutritional_value": "26g protein", "cost": "₹60-80", "icon": "🍗"},
    ],
    "calories": [
        {"name": "Rice", "quantity": "1 cup cooked", "nutritional_value": "206 calories", "cost": "₹20/kg", "icon": "🍚"},
        {"name": "Wheat Roti", "quantity": "2-3 per meal", "nutritional_value": "70 cal/roti", "cost": "₹1/roti", "icon": "🫓"},
        {"name": "Jaggery", "quantity": "1 tbsp", "nutritional_value": "38 calories", "cost": "₹5", "icon": "🍯"},
        {"name": "Ghee/Oil", "quantity": "1 tsp", "nutritional_value": "45 calories", "cost": "₹8", "icon": "🧈"},
        {"name": "Banana", "quantity": "1 medium", "nutritional_value": "90 calories", "cost": "₹5-10", "icon": "🍌"},
        {"name": "Sweet Potato", "quantity": "1 medium", "nutritional_value": "100 calories", "cost": "₹15", "icon": "🍠"},
    ],
    "micronutrients": [
        {"name": "Spinach", "quantity": "1 cup cooked", "nutritional_value": "Iron, Vit A, Folate", "cost": "₹20", "icon": "🥬"},
        {"name": "Carrots", "quantity": "1 medium", "nutritional_value": "Beta-carotene", "cost": "₹5", "icon": "🥕"},
        {"name": "Orange/Citrus", "quantity": "1 fruit", "nutritional_value": "Vitamin C, Folate", "cost": "₹8", "icon": "🍊"},
        {"name": "Tomato", "quantity": "1 medium", "nutritional_value": "Lycopene, Vit C", "cost": "₹5", "icon": "🍅"},
        {"name": "Fortified Wheat Flour", "quantity": "As per roti", "nutritional_value": "Iron, B12, Folate", "cost": "₹30/kg", "icon": "🌾"},
        {"name": "Sesame Seeds", "quantity": "2 tbsp", "nutritional_value": "Calcium, Iron", "cost": "₹30", "icon": "🤎"},
    ],
}


RECOMMENDATION_MATRIX: Dict[Category, Dict[str, Any]] = {
    Category.SEVERELY_MALNOURISHED: {
        "priority": "🔴 CRITICAL - Immediate Intervention Required",
        "description": "This child needs urgent medical and nutritional support",
        "food_tags": ["protein", "calories", "micronutrients"],
        "meal_frequency": "4-5 meals/day + 2 snacks",
        "urgency": "high",
        "supplementation": "⚠️ CONSULT HEALTH WORKER IMMEDIATELY. Nutritional supplements are REQUIRED.",
        "follow_up_days": 7,
    },
    Category.AT_RISK: {
        "priority": "🟠 HIGH PRIORITY - Close Monitoring Required",
        "description": "This child shows signs of malnutrition and needs support",
        "food_tags": ["protein", "calories"],
        "meal_frequency": "3 meals + 2 snacks/day",
        "urgency": "medium",
        "supplementation": "✓ Fortified foods strongly recommended. Schedule regular health check-ups.",
        "follow_up_days": 14,
    },
    Category.BORDERLINE: {
        "priority": "🟡 MODERATE - Preventive Care Needed",
        "description": "This child is borderline; focus on improving nutrition",
        "food_tags": ["protein", "micronutrients"],
        "meal_frequency": "3 balanced meals/day",
        "urgency": "low",
        "supplementation": "✓ Focus on diverse food groups. Consider fortified foods.",
        "follow_up_days": 30,
    },
    Category.NOURISHED: {
        "priority": "🟢 GOOD - Healthy Status Maintained",
        "description": "This child is well-nourished. Continue current practices.",
        "food_tags": ["micronutrients"],
        "meal_frequency": "3 meals/day with variety",
        "urgency": "low",
        "supplementation": "✓ Continue balanced, diverse diet. Maintain current healthy habits.",
        "follow_up_days": 60,
    },
}


MEAL_PLANS: Dict[Category, Dict[str, str]] = {
    Category.SEVERELY_MALNOURISHED: {
        "breakfast": "Fortified cereal with milk and egg",
        "mid_morning": "Banana with peanut butter",
        "lunch": "Rice with moong dal, carrots, and ghee",
        "afternoon": "Milk with jaggery",
        "dinner": "Wheat roti with vegetable curry",
        "notes": "Include fortified foods. Add extra ghee/oil.",
    },
    Category.AT_RISK: {
        "breakfast": "Wheat roti with curd and banana",
        "mid_morning": "Orange or local fruit",
        "lunch": "Rice with chana, spinach, and oil",
        "afternoon": "Milk or buttermilk",
        "dinner": "Moong dal with roti",
        "notes": "Include 2 protein sources daily.",
    },
    Category.BORDERLINE: {
        "breakfast": "Rice porridge with jaggery and ghee",
        "mid_morning": "Fruit or nuts",
        "lunch": "Roti with dal and seasonal vegetable",
        "afternoon": "Milk or curd",
        "dinner": "Rice or roti with curry",
        "notes": "Ensure food variety.",
    },
    Category.NOURISHED: {
        "breakfast": "Varied - roti, rice, eggs, or porridge",
        "mid_morning": "Seasonal fruit",
        "lunch": "Balanced meal with protein, carb, vegetable",
        "afternoon": "Milk or yogurt",
        "dinner": "Varied dinner maintaining balance",
        "notes": "Continue healthy eating.",
    },
}
