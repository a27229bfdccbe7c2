"""AI generation of diet plans."""

from .executor import (
    DietPlanGenerator,
    clean_json_response,
    decode_meals,
    decode_weekly_diet,
)
from .prompts import build_alternatives_prompt, build_weekly_plan_prompt

__all__ = [
    "build_alternatives_prompt",
    "build_weekly_plan_prompt",
    "clean_json_response",
    "decode_meals",
    "decode_weekly_diet",
    "DietPlanGenerator",
]
