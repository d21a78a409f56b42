"""Structured-output schemas for generation requests.

The schemas avoid ``additionalProperties`` because Gemini's schema dialect
rejects it.
"""

import copy

from smart_chef.domain.plans import MealType
from smart_chef.domain.recipes import Difficulty

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "description": "Short unique recipe id"},
        "name": {"type": "string", "description": "Recipe name"},
        "image_keyword": {
            "type": "string",
            "description": "English keyword describing the dish, food only",
        },
        "description": {
            "type": "string",
            "description": "Appealing description of how the ingredients are used",
        },
        "ingredients": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Ingredients with approximate quantities",
        },
        "substitutes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "original": {"type": "string"},
                    "replacement": {"type": "string"},
                },
                "required": ["original", "replacement"],
            },
            "description": "Possible ingredient substitutions",
        },
        "instructions": {
            "type": "array",
            "items": {"type": "string"},
            "description": "Detailed, clearly ordered preparation steps",
        },
        "time": {"type": "string", "description": "Total preparation time"},
        "difficulty": {
            "type": "string",
            "enum": [level.value for level in Difficulty],
        },
        "calories": {
            "type": "integer",
            "description": "Approximate calories for the whole meal",
        },
    },
    "required": [
        "id",
        "name",
        "image_keyword",
        "description",
        "ingredients",
        "instructions",
        "time",
        "difficulty",
    ],
}

MEAL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "enum": [meal.value for meal in MealType]},
        "name": {"type": "string"},
        "description": {"type": "string", "description": "Short ingredient summary"},
        "calories": {"type": "integer"},
    },
    "required": ["type", "name", "calories"],
}

WEEKLY_PLAN_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "nutrition_summary": {
            "type": "object",
            "description": "Energy calculations based on the user's data",
            "properties": {
                "bmr": {"type": "integer", "description": "Basal metabolic rate"},
                "tdee": {
                    "type": "integer",
                    "description": "Total daily energy expenditure",
                },
                "target_daily_calories": {
                    "type": "integer",
                    "description": "Daily calories targeted for the chosen goal",
                },
                "macro_advice": {
                    "type": "string",
                    "description": "One sentence on protein/carb/fat split",
                },
            },
            "required": ["target_daily_calories", "macro_advice"],
        },
        "days": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "day": {"type": "string", "description": "Day name"},
                    "total_calories": {
                        "type": "integer",
                        "description": "Sum of the day's calories",
                    },
                    "meals": {"type": "array", "items": MEAL_SCHEMA},
                },
                "required": ["day", "meals", "total_calories"],
            },
        },
    },
    "required": ["days"],
}


def recipe_list_schema() -> dict[str, object]:
    """Return the schema for an array of recipes."""
    return {"type": "array", "items": copy.deepcopy(RECIPE_SCHEMA)}


def weekly_plan_schema() -> dict[str, object]:
    """Return the schema for a weekly plan object."""
    return copy.deepcopy(WEEKLY_PLAN_SCHEMA)
