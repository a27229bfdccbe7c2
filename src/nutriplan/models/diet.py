"""Weekly diet plan data models.

A plan is the three-tier document returned by the model: a WeeklyDiet holds
seven DailyDiet entries, each with four Meal slots. Dictionaries use the same
camelCase keys as the model's JSON output so a stored plan reloads unchanged.
"""

from dataclasses import dataclass
from enum import Enum


class MealSlot(str, Enum):
    """The four meals of a day, in serving order."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACK = "snack"
    DINNER = "dinner"


DAYS_PER_WEEK = 7

MEAL_FIELDS = (
    "name",
    "description",
    "instructions",
    "prepTime",
    "difficulty",
    "calories",
    "protein",
    "carbs",
    "fats",
)


@dataclass
class Meal:
    """A single dish with its recipe and macros."""

    name: str
    description: str
    instructions: str
    prep_time: str
    difficulty: str
    calories: float
    protein: float
    carbs: float
    fats: float

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "instructions": self.instructions,
            "prepTime": self.prep_time,
            "difficulty": self.difficulty,
            "calories": self.calories,
            "protein": self.protein,
            "carbs": self.carbs,
            "fats": self.fats,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Meal":
        """Create from dictionary.

        Raises:
            KeyError: If a required field is missing
            TypeError/ValueError: If a macro is not numeric
        """
        return cls(
            name=str(data["name"]),
            description=str(data["description"]),
            instructions=str(data["instructions"]),
            prep_time=str(data["prepTime"]),
            difficulty=str(data["difficulty"]),
            calories=_number(data["calories"]),
            protein=_number(data["protein"]),
            carbs=_number(data["carbs"]),
            fats=_number(data["fats"]),
        )

    def macros_within(self, other: "Meal", tolerance: float = 0.05) -> bool:
        """Check whether this meal's macros are within ``tolerance`` of other's."""
        for attr in ("calories", "protein", "carbs", "fats"):
            target = getattr(other, attr)
            if abs(getattr(self, attr) - target) > abs(target) * tolerance:
                return False
        return True


@dataclass
class DailyDiet:
    """One day of the plan."""

    day: str
    breakfast: Meal
    lunch: Meal
    snack: Meal
    dinner: Meal
    total_calories: float
    exercise_note: str | None = None

    @property
    def meals(self) -> list[Meal]:
        return [self.get_meal(slot) for slot in MealSlot]

    def get_meal(self, slot: MealSlot) -> Meal:
        return getattr(self, MealSlot(slot).value)

    def computed_calories(self) -> float:
        return sum(meal.calories for meal in self.meals)

    def recompute_total(self) -> None:
        """Set total_calories to the sum of the four meals."""
        self.total_calories = self.computed_calories()

    def replace_meal(self, slot: MealSlot, meal: Meal) -> None:
        """Swap one meal and recompute the day total locally."""
        setattr(self, MealSlot(slot).value, meal)
        self.recompute_total()

    def macro_totals(self) -> dict[str, float]:
        """Sum protein/carbs/fats over the day."""
        return {
            "protein": sum(m.protein for m in self.meals),
            "carbs": sum(m.carbs for m in self.meals),
            "fats": sum(m.fats for m in self.meals),
        }

    def to_dict(self) -> dict:
        data = {
            "day": self.day,
            "breakfast": self.breakfast.to_dict(),
            "lunch": self.lunch.to_dict(),
            "snack": self.snack.to_dict(),
            "dinner": self.dinner.to_dict(),
            "totalCalories": self.total_calories,
        }
        if self.exercise_note is not None:
            data["exerciseNote"] = self.exercise_note
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "DailyDiet":
        return cls(
            day=str(data["day"]),
            breakfast=Meal.from_dict(data["breakfast"]),
            lunch=Meal.from_dict(data["lunch"]),
            snack=Meal.from_dict(data["snack"]),
            dinner=Meal.from_dict(data["dinner"]),
            total_calories=_number(data["totalCalories"]),
            exercise_note=data.get("exerciseNote"),
        )


@dataclass
class WeeklyDiet:
    """Seven days of meals plus the free-text advice sections."""

    plan: list[DailyDiet]
    recommendations: str
    exercise_plan: str
    basal_recommendations: str
    supplement_advise: str

    def get_day(self, index: int) -> DailyDiet:
        """Get a day by zero-based index.

        Raises:
            IndexError: If the index is outside the plan
        """
        if index < 0 or index >= len(self.plan):
            raise IndexError(f"Day {index} out of range (plan has {len(self.plan)} days)")
        return self.plan[index]

    def swap_meal(self, day_index: int, slot: MealSlot, meal: Meal) -> DailyDiet:
        """Replace one meal and return the updated day."""
        day = self.get_day(day_index)
        day.replace_meal(slot, meal)
        return day

    def to_dict(self) -> dict:
        return {
            "plan": [day.to_dict() for day in self.plan],
            "recommendations": self.recommendations,
            "exercisePlan": self.exercise_plan,
            "basalRecommendations": self.basal_recommendations,
            "supplementAdvise": self.supplement_advise,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeeklyDiet":
        """Rebuild a plan; raises ValueError unless it has exactly seven days."""
        if len(data["plan"]) != DAYS_PER_WEEK:
            raise ValueError(f"Expected {DAYS_PER_WEEK} days, got {len(data['plan'])}")
        return cls(
            plan=[DailyDiet.from_dict(day) for day in data["plan"]],
            recommendations=str(data["recommendations"]),
            exercise_plan=str(data["exercisePlan"]),
            basal_recommendations=str(data["basalRecommendations"]),
            supplement_advise=str(data["supplementAdvise"]),
        )

    def get_summary(self) -> str:
        """Compact per-day overview for terminal display."""
        lines = []
        for i, day in enumerate(self.plan, 1):
            lines.append(f"{i}. {day.day} - {_format_kcal(day.total_calories)} kcal")
            for slot in MealSlot:
                meal = day.get_meal(slot)
                lines.append(f"   {slot.value:<10} {meal.name} ({_format_kcal(meal.calories)} kcal)")
        return "\n".join(lines)


def _number(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return value


def _format_kcal(value: float) -> str:
    return f"{value:g}"
