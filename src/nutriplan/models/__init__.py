"""Data models for nutriplan."""

from .diet import DailyDiet, Meal, MealSlot, WeeklyDiet
from .progress import ProgressEntry
from .user_profile import (
    ActivityLevel,
    DietType,
    ExerciseType,
    Gender,
    Language,
    UserProfile,
)

__all__ = [
    "ActivityLevel",
    "DailyDiet",
    "DietType",
    "ExerciseType",
    "Gender",
    "Language",
    "Meal",
    "MealSlot",
    "ProgressEntry",
    "UserProfile",
    "WeeklyDiet",
]
