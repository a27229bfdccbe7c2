"""Structured output schemas declared to the model."""

from google.genai import types

from ..models.diet import DAYS_PER_WEEK, MEAL_FIELDS

MEAL_PROPERTIES = {
    "name": types.Schema(type=types.Type.STRING),
    "description": types.Schema(type=types.Type.STRING),
    "instructions": types.Schema(
        type=types.Type.STRING,
        description="Detailed step-by-step professional cooking instructions.",
    ),
    "prepTime": types.Schema(type=types.Type.STRING, description="e.g. 15 min, 45 min"),
    "difficulty": types.Schema(type=types.Type.STRING, description="Fácil, Media o Alta"),
    "calories": types.Schema(type=types.Type.NUMBER),
    "protein": types.Schema(type=types.Type.NUMBER),
    "carbs": types.Schema(type=types.Type.NUMBER),
    "fats": types.Schema(type=types.Type.NUMBER),
}

MEAL_REQUIRED = list(MEAL_FIELDS)

ADVICE_FIELDS = [
    "recommendations",
    "exercisePlan",
    "basalRecommendations",
    "supplementAdvise",
]

DAY_REQUIRED = ["day", "breakfast", "lunch", "snack", "dinner", "totalCalories"]


def meal_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties=MEAL_PROPERTIES,
        required=MEAL_REQUIRED,
    )


def daily_diet_schema() -> types.Schema:
    return types.Schema(
        type=types.Type.OBJECT,
        properties={
            "day": types.Schema(type=types.Type.STRING),
            "breakfast": meal_schema(),
            "lunch": meal_schema(),
            "snack": meal_schema(),
            "dinner": meal_schema(),
            "totalCalories": types.Schema(type=types.Type.NUMBER),
            "exerciseNote": types.Schema(type=types.Type.STRING),
        },
        required=DAY_REQUIRED,
    )


def weekly_diet_schema() -> types.Schema:
    """Object with a 7-day ``plan`` array and four advice strings."""
    properties = {
        "plan": types.Schema(
            type=types.Type.ARRAY,
            items=daily_diet_schema(),
            min_items=DAYS_PER_WEEK,
            max_items=DAYS_PER_WEEK,
        ),
    }
    for name in ADVICE_FIELDS:
        properties[name] = types.Schema(type=types.Type.STRING)

    return types.Schema(
        type=types.Type.OBJECT,
        properties=properties,
        required=["plan", *ADVICE_FIELDS],
    )


def alternatives_schema(count: int = 2) -> types.Schema:
    return types.Schema(
        type=types.Type.ARRAY,
        items=meal_schema(),
        min_items=count,
        max_items=count,
    )
