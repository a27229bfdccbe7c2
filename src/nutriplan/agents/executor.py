"""Plan generation against the Gemini API."""

import json
import logging
import re

from google import genai
from google.genai import types

from ..config import Settings, get_settings
from ..exceptions import ConfigurationError, GenerationError, MalformedResponseError
from ..models.diet import Meal, WeeklyDiet
from ..models.user_profile import UserProfile
from .output_specs import DAYS_PER_WEEK, alternatives_schema, weekly_diet_schema
from .prompts import build_alternatives_prompt, build_weekly_plan_prompt

logger = logging.getLogger(__name__)

ALTERNATIVES_COUNT = 2
MACRO_TOLERANCE = 0.05

_FENCE_OPEN = re.compile(r"^```(?:json)?", re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"```$")


def clean_json_response(text: str) -> str:
    """Strip a Markdown code fence wrapped around a JSON payload."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _FENCE_OPEN.sub("", cleaned, count=1)
        cleaned = _FENCE_CLOSE.sub("", cleaned.rstrip(), count=1)
    return cleaned.strip()


def _decode_json(text: str | None):
    if not text or not text.strip():
        raise MalformedResponseError("The model returned an empty response", text or "")
    cleaned = clean_json_response(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"The model response is not valid JSON: {e}", text) from e


def decode_weekly_diet(text: str | None) -> WeeklyDiet:
    """Decode raw model text into a WeeklyDiet.

    Raises:
        MalformedResponseError: If the text is empty, not JSON, or not a 7-day plan
    """
    data = _decode_json(text)
    if not isinstance(data, dict):
        raise MalformedResponseError("Expected a JSON object at the top level", text or "")
    if not isinstance(data.get("plan"), list) or len(data["plan"]) != DAYS_PER_WEEK:
        raise MalformedResponseError(
            f"Expected a plan with {DAYS_PER_WEEK} days", text or ""
        )
    try:
        return WeeklyDiet.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponseError(f"Plan is missing or has invalid field: {e}", text or "") from e


def decode_meals(text: str | None) -> list[Meal]:
    """Decode raw model text into a list of meals.

    Raises:
        MalformedResponseError: If the text is not a JSON list of complete meals
    """
    data = _decode_json(text)
    if not isinstance(data, list):
        raise MalformedResponseError("Expected a JSON array of meals", text or "")
    try:
        return [Meal.from_dict(item) for item in data]
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedResponseError(f"Meal is missing or has invalid field: {e}", text or "") from e


class DietPlanGenerator:
    """Generates weekly plans and meal alternatives with Gemini."""

    def __init__(self, settings: Settings | None = None, client: genai.Client | None = None):
        self.settings = settings or get_settings()
        self._client = client

    def _get_client(self) -> genai.Client:
        if not self.settings.has_api_key:
            raise ConfigurationError(
                "GEMINI_API_KEY is not set. Export GEMINI_API_KEY (or API_KEY) "
                "in the environment the app runs in."
            )
        if self._client is None:
            self._client = genai.Client(api_key=self.settings.api_key)
        return self._client

    async def _generate_text(self, prompt: str, schema: types.Schema) -> str | None:
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.settings.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                ),
            )
        except Exception as e:
            raise GenerationError(str(e) or e.__class__.__name__) from e
        return response.text

    async def generate_plan(self, profile: UserProfile) -> WeeklyDiet:
        """Generate a full weekly plan for a profile.

        Args:
            profile: Complete user profile; its language drives the output language

        Returns:
            The decoded WeeklyDiet

        Raises:
            ConfigurationError: If no API key is configured (no request is sent)
            GenerationError: If the request fails
            MalformedResponseError: If the response cannot be decoded
        """
        prompt = build_weekly_plan_prompt(profile)
        logger.info("Requesting weekly plan from %s", self.settings.model)
        try:
            text = await self._generate_text(prompt, weekly_diet_schema())
            diet = decode_weekly_diet(text)
        except GenerationError as e:
            logger.error("Plan generation failed: %s", e)
            raise
        logger.info("Received plan with %d days", len(diet.plan))
        return diet

    async def get_meal_alternatives(self, meal: Meal, profile: UserProfile) -> list[Meal]:
        """Ask for two substitutes with macros within 5% of ``meal``.

        Never raises: any failure yields an empty list.
        """
        if not self.settings.has_api_key:
            logger.warning("No API key configured; skipping meal alternatives")
            return []

        prompt = build_alternatives_prompt(
            meal, profile, count=ALTERNATIVES_COUNT, tolerance=MACRO_TOLERANCE
        )
        try:
            text = await self._generate_text(prompt, alternatives_schema(ALTERNATIVES_COUNT))
            meals = decode_meals(text)
        except GenerationError as e:
            logger.warning("Meal alternatives failed: %s", e)
            return []
        return meals[:ALTERNATIVES_COUNT]
