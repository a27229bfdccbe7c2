"""Tests for prompt building, response decoding and the Gemini generator."""

import asyncio
import json

import pytest

from conftest import FakeGeminiClient, make_meal

from nutriplan.agents import (
    DietPlanGenerator,
    build_alternatives_prompt,
    build_weekly_plan_prompt,
    clean_json_response,
    decode_meals,
    decode_weekly_diet,
)
from nutriplan.agents.output_specs import weekly_diet_schema
from nutriplan.config import Settings
from nutriplan.exceptions import ConfigurationError, GenerationError, MalformedResponseError
from nutriplan.models.diet import Meal, WeeklyDiet
from nutriplan.models.user_profile import Language


class TestCleanJsonResponse:
    def test_plain_json_untouched(self):
        assert clean_json_response('{"a": 1}') == '{"a": 1}'

    def test_strips_json_fence(self):
        assert clean_json_response('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_strips_bare_fence(self):
        assert clean_json_response('```\n[1, 2]\n```  ') == "[1, 2]"


class TestDecodeWeeklyDiet:
    def test_valid_plan(self, plan_json):
        diet = decode_weekly_diet(plan_json)
        assert isinstance(diet, WeeklyDiet)
        assert len(diet.plan) == 7
        assert diet.supplement_advise == "Vitamina D en invierno."

    def test_fenced_plan(self, plan_json):
        diet = decode_weekly_diet(f"```json\n{plan_json}\n```")
        assert diet.plan[0].day == "Lunes"

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_empty_response(self, text):
        with pytest.raises(MalformedResponseError):
            decode_weekly_diet(text)

    def test_invalid_json(self):
        with pytest.raises(MalformedResponseError) as exc_info:
            decode_weekly_diet("{not json")
        assert exc_info.value.raw_text == "{not json"

    def test_wrong_day_count(self, plan_data):
        plan_data["plan"] = plan_data["plan"][:6]
        with pytest.raises(MalformedResponseError):
            decode_weekly_diet(json.dumps(plan_data))

    def test_missing_advice(self, plan_data):
        del plan_data["supplementAdvise"]
        with pytest.raises(MalformedResponseError):
            decode_weekly_diet(json.dumps(plan_data))

    def test_top_level_array(self):
        with pytest.raises(MalformedResponseError):
            decode_weekly_diet("[]")

    def test_malformed_is_generation_error(self):
        with pytest.raises(GenerationError):
            decode_weekly_diet("nope")


class TestDecodeMeals:
    def test_valid(self):
        meals = decode_meals(json.dumps([make_meal("A", 500), make_meal("B", 510)]))
        assert [m.name for m in meals] == ["A", "B"]

    def test_not_a_list(self):
        with pytest.raises(MalformedResponseError):
            decode_meals(json.dumps(make_meal("A", 500)))


class TestPrompts:
    def test_weekly_prompt_includes_profile(self, sample_profile):
        prompt = build_weekly_plan_prompt(sample_profile)
        assert "ESPAÑOL" in prompt
        assert "Edad: 42 años" in prompt
        assert "Pasos diarios promedio: 7000" in prompt
        assert "Lactosa" in prompt
        assert "Hipertensión (Detalles: controlada con enalapril)" in prompt
        assert "FTO (rs9939609):" in prompt
        assert "Mediterránea" in prompt

    def test_weekly_prompt_language(self, sample_profile):
        sample_profile.language = Language.EN
        assert "INGLÉS" in build_weekly_plan_prompt(sample_profile)

    def test_weekly_prompt_placeholders_for_empty_lists(self):
        from nutriplan.models.user_profile import UserProfile

        prompt = build_weekly_plan_prompt(UserProfile())
        assert "Intolerancias y Alergias: Ninguna" in prompt
        assert "Marcadores Genéticos: No conocidos" in prompt

    def test_alternatives_prompt(self, sample_profile):
        meal = Meal.from_dict(make_meal("Pollo al horno", 600, protein=45))
        prompt = build_alternatives_prompt(meal, sample_profile)
        assert '"Pollo al horno"' in prompt
        assert "600 kcal" in prompt
        assert "45g proteína" in prompt
        assert "+/- 5%" in prompt
        assert "Lactosa" in prompt


class TestSchemas:
    def test_weekly_schema_requires_seven_days(self):
        schema = weekly_diet_schema()
        assert schema.properties["plan"].min_items == 7
        assert schema.properties["plan"].max_items == 7
        assert "supplementAdvise" in schema.required


class TestDietPlanGenerator:
    def test_missing_key_fails_before_request(self, sample_profile):
        client = FakeGeminiClient()
        generator = DietPlanGenerator(Settings(api_key=None), client=client)

        with pytest.raises(ConfigurationError):
            asyncio.run(generator.generate_plan(sample_profile))
        assert client.models.calls == []

    def test_blank_key_counts_as_missing(self, sample_profile):
        generator = DietPlanGenerator(Settings(api_key="   "), client=FakeGeminiClient())
        with pytest.raises(ConfigurationError):
            asyncio.run(generator.generate_plan(sample_profile))

    def test_generate_plan(self, settings, sample_profile, plan_json):
        client = FakeGeminiClient(plan_json)
        generator = DietPlanGenerator(settings, client=client)

        diet = asyncio.run(generator.generate_plan(sample_profile))

        assert len(diet.plan) == 7
        call = client.models.calls[0]
        assert call["model"] == "gemini-test"
        assert call["config"].response_mime_type == "application/json"
        assert "Edad: 42 años" in call["contents"]

    def test_sdk_error_is_wrapped(self, settings, sample_profile):
        generator = DietPlanGenerator(settings, client=FakeGeminiClient(RuntimeError("quota exceeded")))

        with pytest.raises(GenerationError, match="quota exceeded"):
            asyncio.run(generator.generate_plan(sample_profile))

    def test_malformed_response(self, settings, sample_profile):
        generator = DietPlanGenerator(settings, client=FakeGeminiClient("Lo siento, no puedo."))

        with pytest.raises(MalformedResponseError):
            asyncio.run(generator.generate_plan(sample_profile))

    def test_alternatives(self, settings, sample_profile):
        meals = [make_meal("A", 590), make_meal("B", 610), make_meal("C", 600)]
        generator = DietPlanGenerator(settings, client=FakeGeminiClient(json.dumps(meals)))
        meal = Meal.from_dict(make_meal("Pollo", 600))

        result = asyncio.run(generator.get_meal_alternatives(meal, sample_profile))

        assert [m.name for m in result] == ["A", "B"]

    def test_alternatives_without_key(self, sample_profile):
        client = FakeGeminiClient()
        generator = DietPlanGenerator(Settings(api_key=None), client=client)
        meal = Meal.from_dict(make_meal("Pollo", 600))

        assert asyncio.run(generator.get_meal_alternatives(meal, sample_profile)) == []
        assert client.models.calls == []

    @pytest.mark.parametrize("response", [RuntimeError("boom"), "", "{bad"])
    def test_alternatives_failure_is_empty(self, settings, sample_profile, response):
        generator = DietPlanGenerator(settings, client=FakeGeminiClient(response))
        meal = Meal.from_dict(make_meal("Pollo", 600))

        assert asyncio.run(generator.get_meal_alternatives(meal, sample_profile)) == []
