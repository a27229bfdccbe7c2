"""State coordination between the profile, the store and the plan generator."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path

from ..agents import DietPlanGenerator
from ..db.repositories import StateRepository
from ..exceptions import (
    ConfigurationError,
    GenerationError,
    GenerationInProgressError,
    NoProfileError,
    ProfileValidationError,
    StaleSwapError,
)
from ..i18n import get_translation
from ..models.diet import Meal, MealSlot, WeeklyDiet
from ..models.progress import ProgressEntry
from ..models.user_profile import Language, UserProfile
from ..utils.calculators import calculate_bmi, calculate_cv_risk_score, get_bmi_category

logger = logging.getLogger(__name__)


class Tab(str, Enum):
    """The four views of the app."""

    PLAN = "plan"
    TRACKING = "tracking"
    PROFILE = "profile"
    REFS = "refs"


@dataclass
class AppState:
    """In-memory view of everything the UI shows."""

    profile: UserProfile | None = None
    history: list[ProgressEntry] = field(default_factory=list)
    diet: WeeklyDiet | None = None
    language: Language = Language.ES
    active_tab: Tab = Tab.PLAN
    error: str | None = None
    loading: bool = False

    @property
    def has_profile(self) -> bool:
        return self.profile is not None


@dataclass
class SummaryCards:
    """Derived metrics shown above the tabs."""

    bmi: float
    bmi_category: str
    waist: float
    cv_risk: str
    weight: float


class PlannerService:
    """Owns the app state and every operation that changes it.

    One instance per running app. Persisted records are written only after
    the operation that produces them succeeds.
    """

    def __init__(
        self,
        repository: StateRepository | None = None,
        generator: DietPlanGenerator | None = None,
        db_path: Path | None = None,
        default_language: Language | str = Language.ES,
    ):
        self.repository = repository or StateRepository(db_path)
        self.generator = generator or DietPlanGenerator()
        self.default_language = Language(default_language)
        self.state = AppState(language=self.default_language)
        self._swap_tokens: dict[tuple[int, MealSlot], int] = {}
        self._token_counter = 0

    async def load(self) -> AppState:
        """Load persisted records into memory."""
        self.state = AppState(
            profile=await self.repository.profiles.get(),
            history=await self.repository.history.list_all(),
            diet=await self.repository.diets.get(),
            language=await self.repository.settings.get_language(self.default_language),
        )
        return self.state

    @property
    def t(self) -> dict[str, str]:
        return get_translation(self.state.language.value)

    # Language / view

    async def set_language(self, language: Language | str) -> None:
        self.state.language = Language(language)
        await self.repository.settings.set_language(self.state.language)

    def set_tab(self, tab: Tab | str) -> None:
        self.state.active_tab = Tab(tab)

    def dismiss_error(self) -> None:
        self.state.error = None

    # Profile submission

    async def submit_profile(self, profile: UserProfile) -> WeeklyDiet:
        """Validate a profile, generate a plan and persist everything.

        On failure the error message is stored on the state, nothing is
        persisted and the active tab is left as it was.

        Raises:
            ProfileValidationError: If a field is missing or out of range
            GenerationInProgressError: If a generation is already running
            ConfigurationError: If the API key is missing
            GenerationError: If generation fails
        """
        errors = profile.validate()
        if errors:
            raise ProfileValidationError(errors)
        if self.state.loading:
            raise GenerationInProgressError("A plan is already being generated")

        profile = replace(profile, language=self.state.language)
        self.state.loading = True
        self.state.error = None
        try:
            diet = await self.generator.generate_plan(profile)
        except ConfigurationError as e:
            self.state.error = self.t["error_config"]
            logger.error("Configuration error: %s", e)
            raise
        except GenerationError as e:
            self.state.error = f"{self.t['error_detected']}: {e}"
            raise
        finally:
            self.state.loading = False

        entry = ProgressEntry.record(profile.weight, profile.waist, profile.height)
        history = [*self.state.history, entry]

        self.state.profile = profile
        self.state.diet = diet
        self.state.history = history
        self._swap_tokens.clear()

        await self.repository.profiles.save(profile)
        await self.repository.history.save_all(history)
        await self.repository.diets.save(diet)

        self.state.active_tab = Tab.PLAN
        return diet

    # Progress log

    async def log_progress(self, weight: float, waist: float) -> ProgressEntry:
        """Append a sample and patch the profile's current weight and waist."""
        profile = self._require_profile()
        entry = ProgressEntry.record(weight, waist, profile.height)
        self.state.history = [*self.state.history, entry]
        await self.repository.history.save_all(self.state.history)

        self.state.profile = replace(profile, weight=weight, waist=waist)
        await self.repository.profiles.save(self.state.profile)
        return entry

    # Meal swaps

    def issue_swap_token(self, day_index: int, slot: MealSlot | str) -> int:
        """Start a new request for a slot, invalidating older ones."""
        self._token_counter += 1
        self._swap_tokens[(day_index, MealSlot(slot))] = self._token_counter
        return self._token_counter

    async def request_alternatives(
        self, day_index: int, slot: MealSlot | str
    ) -> tuple[int, list[Meal]]:
        """Fetch substitutes for one meal.

        Returns:
            The request token to pass back to swap_meal, and the alternatives
            (empty when none could be generated)
        """
        profile = self._require_profile()
        diet = self._require_diet()
        slot = MealSlot(slot)
        meal = diet.get_day(day_index).get_meal(slot)
        token = self.issue_swap_token(day_index, slot)
        alternatives = await self.generator.get_meal_alternatives(meal, profile)
        return token, alternatives

    async def swap_meal(
        self,
        day_index: int,
        slot: MealSlot | str,
        meal: Meal,
        token: int | None = None,
    ) -> WeeklyDiet:
        """Replace one meal, recompute the day total and persist the plan.

        Raises:
            StaleSwapError: If ``token`` is not the latest for this slot
        """
        diet = self._require_diet()
        slot = MealSlot(slot)
        if token is not None and self._swap_tokens.get((day_index, slot)) != token:
            raise StaleSwapError(f"Swap for day {day_index} {slot.value} is out of date")

        diet.swap_meal(day_index, slot, meal)
        self._swap_tokens.pop((day_index, slot), None)
        await self.repository.diets.save(diet)
        return diet

    async def save_diet(self, diet: WeeklyDiet) -> None:
        self.state.diet = diet
        await self.repository.diets.save(diet)

    # Reset

    async def reset(self) -> None:
        """Delete profile, history and plan and return to onboarding."""
        removed = await self.repository.clear_user_data()
        logger.info("Reset removed %d records", removed)
        self.state = AppState(language=self.state.language)
        self._swap_tokens.clear()

    # Derived metrics

    def summary_cards(self) -> SummaryCards | None:
        profile = self.state.profile
        if profile is None:
            return None
        bmi = calculate_bmi(profile.weight, profile.height)
        return SummaryCards(
            bmi=bmi,
            bmi_category=get_bmi_category(bmi).value,
            waist=profile.waist,
            cv_risk=calculate_cv_risk_score(profile.waist, profile.height).value,
            weight=profile.weight,
        )

    def _require_profile(self) -> UserProfile:
        if self.state.profile is None:
            raise NoProfileError("No profile saved yet")
        return self.state.profile

    def _require_diet(self) -> WeeklyDiet:
        if self.state.diet is None:
            raise NoProfileError("No plan generated yet")
        return self.state.diet
