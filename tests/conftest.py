"""Pytest configuration and fixtures."""

import copy
import json
import tempfile
from pathlib import Path
from types import SimpleNamespace

import pytest

from nutriplan.config import Settings
from nutriplan.db import StateRepository
from nutriplan.models.diet import Meal, WeeklyDiet
from nutriplan.models.user_profile import DietType, Gender, Language, UserProfile
from nutriplan.services.planner import PlannerService

DAY_NAMES = ["Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"]


def make_meal(name: str, calories: float, protein: float = 20, carbs: float = 40, fats: float = 10) -> dict:
    """Wire-format meal as the model returns it."""
    return {
        "name": name,
        "description": f"{name} casero",
        "instructions": "1. Preparar\n2. Servir",
        "prepTime": "15 min",
        "difficulty": "Fácil",
        "calories": calories,
        "protein": protein,
        "carbs": carbs,
        "fats": fats,
    }


def make_plan_data() -> dict:
    """Seven-day plan with 400/600/250/500 kcal meals on each day."""
    days = []
    for i, name in enumerate(DAY_NAMES):
        day = {
            "day": name,
            "breakfast": make_meal(f"Avena {i}", 400),
            "lunch": make_meal(f"Pollo {i}", 600, protein=45),
            "snack": make_meal(f"Yogur {i}", 250),
            "dinner": make_meal(f"Salmón {i}", 500, fats=22),
            "totalCalories": 1750,
        }
        if i % 2 == 0:
            day["exerciseNote"] = "Caminar 30 minutos"
        days.append(day)
    return {
        "plan": days,
        "recommendations": "Hidrátate bien.",
        "exercisePlan": "Fuerza 3 días por semana.",
        "basalRecommendations": "Usa las escaleras.",
        "supplementAdvise": "Vitamina D en invierno.",
    }


class FakeModels:
    """Stands in for ``client.aio.models`` and records each request."""

    def __init__(self, responses: list):
        self.responses = list(responses)
        self.calls: list[dict] = []

    async def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return SimpleNamespace(text=response)


class FakeGeminiClient:
    """Minimal shape of ``genai.Client`` used by DietPlanGenerator."""

    def __init__(self, *responses):
        self.models = FakeModels(responses)
        self.aio = SimpleNamespace(models=self.models)


class FakeGenerator:
    """In-memory DietPlanGenerator replacement for service tests."""

    def __init__(self, plan: dict | None = None, error: Exception | None = None, alternatives=None):
        self.plan = plan or make_plan_data()
        self.error = error
        self.alternatives = alternatives if alternatives is not None else [
            Meal.from_dict(make_meal("Tortilla", 580, protein=44)),
            Meal.from_dict(make_meal("Lentejas", 610, protein=46)),
        ]
        self.plan_calls: list[UserProfile] = []
        self.alternative_calls: list[tuple[Meal, UserProfile]] = []

    async def generate_plan(self, profile: UserProfile) -> WeeklyDiet:
        self.plan_calls.append(profile)
        if self.error is not None:
            raise self.error
        return WeeklyDiet.from_dict(copy.deepcopy(self.plan))

    async def get_meal_alternatives(self, meal: Meal, profile: UserProfile) -> list[Meal]:
        self.alternative_calls.append((meal, profile))
        return list(self.alternatives)


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def sample_profile():
    """A complete, valid profile."""
    return UserProfile(
        age=42,
        gender=Gender.FEMALE,
        weight=70,
        height=170,
        waist=80,
        intolerances=["Lactosa"],
        diseases=["Hipertensión"],
        disease_notes={"Hipertensión": "controlada con enalapril"},
        treatments=["Enalapril"],
        genetic_markers=["FTO"],
        supplements=["Omega 3"],
        diet_type=DietType.MEDITERRANEAN,
        basal_steps=7000,
        language=Language.ES,
    )


@pytest.fixture
def plan_data():
    return make_plan_data()


@pytest.fixture
def plan_json(plan_data):
    return json.dumps(plan_data, ensure_ascii=False)


@pytest.fixture
def settings(tmp_path):
    return Settings(api_key="test-key", model="gemini-test", data_dir=tmp_path)


@pytest.fixture
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def service(temp_db_path, fake_generator):
    """PlannerService over a temporary database and a fake generator."""
    return PlannerService(repository=StateRepository(temp_db_path), generator=fake_generator)
