"""Tests for data models."""

import pytest

from conftest import make_meal, make_plan_data

from nutriplan.models.diet import DailyDiet, Meal, MealSlot, WeeklyDiet
from nutriplan.models.progress import ProgressEntry
from nutriplan.models.user_profile import (
    ActivityLevel,
    DietType,
    ExerciseType,
    Gender,
    Language,
    UserProfile,
)


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_defaults(self):
        profile = UserProfile()
        assert profile.age == 30
        assert profile.gender == Gender.MALE
        assert (profile.weight, profile.height, profile.waist) == (70, 170, 85)
        assert profile.diet_type == DietType.STANDARD
        assert profile.activity_level == ActivityLevel.SEDENTARY
        assert profile.exercise_type == ExerciseType.NONE
        assert (profile.exercise_frequency, profile.exercise_duration) == (3, 45)
        assert profile.basal_steps == 5000
        assert profile.is_valid()

    def test_required_fields(self):
        profile = UserProfile(age=0, weight=0)
        errors = profile.validate()
        assert errors == {"age": "required", "weight": "required"}

    @pytest.mark.parametrize(
        "field_name,value",
        [
            ("age", 11),
            ("age", 101),
            ("weight", 34),
            ("height", 231),
            ("waist", 39),
            ("exercise_frequency", 8),
            ("exercise_duration", 241),
            ("basal_steps", 50001),
        ],
    )
    def test_out_of_range(self, field_name, value):
        profile = UserProfile(**{field_name: value})
        assert profile.validate() == {field_name: "out_of_range"}

    @pytest.mark.parametrize("field_name", ["weight", "height", "waist"])
    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_values_out_of_range(self, field_name, value):
        profile = UserProfile(**{field_name: value})
        assert profile.validate() == {field_name: "out_of_range"}

    def test_range_bounds_inclusive(self):
        profile = UserProfile(age=12, weight=250, height=100, waist=180, exercise_frequency=0, basal_steps=50000)
        assert profile.is_valid()

    def test_set_diseases_drops_stale_notes(self):
        profile = UserProfile(diseases=["Diabetes", "Asma"])
        profile.set_disease_note("Diabetes", "tipo 2")
        profile.set_disease_note("Asma", "leve")

        profile.set_diseases(["Asma"])

        assert profile.diseases == ["Asma"]
        assert profile.disease_notes == {"Asma": "leve"}

    def test_toggle_genetic_marker(self):
        profile = UserProfile()
        profile.toggle_genetic_marker("FTO")
        profile.toggle_genetic_marker("APOE")
        assert profile.genetic_markers == ["FTO", "APOE"]

        profile.toggle_genetic_marker("FTO")
        assert profile.genetic_markers == ["APOE"]

    def test_round_trip(self, sample_profile):
        data = sample_profile.to_dict()
        assert data["diseaseNotes"] == {"Hipertensión": "controlada con enalapril"}
        assert data["dietType"] == "Mediterránea"
        assert data["basalSteps"] == 7000

        restored = UserProfile.from_dict(data)
        assert restored == sample_profile

    def test_from_dict_fills_optional_fields(self):
        profile = UserProfile.from_dict({"age": 50, "weight": 80, "height": 180, "waist": 90})
        assert profile.language == Language.ES
        assert profile.disease_notes == {}
        assert profile.genetic_markers == []


class TestMeal:
    def test_from_dict_uses_wire_names(self):
        meal = Meal.from_dict(make_meal("Avena", 400))
        assert meal.prep_time == "15 min"
        assert meal.to_dict()["prepTime"] == "15 min"

    def test_missing_field(self):
        data = make_meal("Avena", 400)
        del data["fats"]
        with pytest.raises(KeyError):
            Meal.from_dict(data)

    def test_non_numeric_macro(self):
        data = make_meal("Avena", 400)
        data["calories"] = "400"
        with pytest.raises(TypeError):
            Meal.from_dict(data)

    def test_macros_within(self):
        meal = Meal.from_dict(make_meal("Pollo", 600, protein=45))
        close = Meal.from_dict(make_meal("Pavo", 620, protein=46))
        far = Meal.from_dict(make_meal("Pizza", 900, protein=30))
        assert close.macros_within(meal)
        assert not far.macros_within(meal)


class TestDailyDiet:
    def test_swap_recomputes_total(self):
        data = make_plan_data()["plan"][0]
        data["snack"] = make_meal("Yogur", 200)
        data["totalCalories"] = 1234
        day = DailyDiet.from_dict(data)

        day.replace_meal(MealSlot.SNACK, Meal.from_dict(make_meal("Hummus", 250)))

        assert day.total_calories == 400 + 600 + 250 + 500
        assert day.snack.name == "Hummus"

    def test_exercise_note_optional(self):
        days = make_plan_data()["plan"]
        assert DailyDiet.from_dict(days[0]).exercise_note == "Caminar 30 minutos"
        rest_day = DailyDiet.from_dict(days[1])
        assert rest_day.exercise_note is None
        assert "exerciseNote" not in rest_day.to_dict()

    def test_macro_totals(self):
        day = DailyDiet.from_dict(make_plan_data()["plan"][0])
        assert day.macro_totals() == {"protein": 105, "carbs": 160, "fats": 52}


class TestWeeklyDiet:
    def test_round_trip_is_identical(self):
        data = make_plan_data()
        assert WeeklyDiet.from_dict(data).to_dict() == data

    def test_from_dict_requires_seven_days(self):
        data = make_plan_data()
        data["plan"] = data["plan"][:3]
        with pytest.raises(ValueError):
            WeeklyDiet.from_dict(data)

    def test_get_day_out_of_range(self):
        diet = WeeklyDiet.from_dict(make_plan_data())
        with pytest.raises(IndexError):
            diet.get_day(7)
        with pytest.raises(IndexError):
            diet.get_day(-1)

    def test_swap_meal(self):
        diet = WeeklyDiet.from_dict(make_plan_data())
        day = diet.swap_meal(2, MealSlot.SNACK, Meal.from_dict(make_meal("Fruta", 150)))
        assert day is diet.plan[2]
        assert day.total_calories == 1650

    def test_summary_lists_every_day(self):
        summary = WeeklyDiet.from_dict(make_plan_data()).get_summary()
        assert "1. Lunes - 1750 kcal" in summary
        assert "7. Domingo" in summary


class TestProgressEntry:
    def test_record_computes_bmi(self):
        entry = ProgressEntry.record(70, 85, 170)
        assert entry.bmi == 24.2
        assert entry.recorded_at is not None

    def test_round_trip(self):
        entry = ProgressEntry(date="2024-03-07T10:00:00", weight=72.5, waist=84, bmi=25.1)
        assert ProgressEntry.from_dict(entry.to_dict()) == entry
