"""Manual user profile input via interactive questionnaire."""

import questionary
from questionary import Style

from ...data.medical_data import GENETIC_MARKERS
from ...models.user_profile import (
    VALID_RANGES,
    ActivityLevel,
    DietType,
    ExerciseType,
    Gender,
    Language,
    UserProfile,
)

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#059669 bold"),
        ("question", "bold"),
        ("answer", "fg:#10b981 bold"),
        ("pointer", "fg:#059669 bold"),
        ("highlighted", "fg:#059669 bold"),
        ("selected", "fg:#10b981"),
        ("separator", "fg:#64748b"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def range_validator(field_name: str, integer: bool = False):
    """Build a questionary validator enforcing VALID_RANGES for a field."""
    low, high = VALID_RANGES[field_name]

    def validate(text: str) -> bool | str:
        try:
            value = int(text) if integer else float(text)
        except ValueError:
            return "Please enter a number"
        if not low <= value <= high:
            return f"Must be between {low:g} and {high:g}"
        return True

    return validate


def parse_list(text: str | None) -> list[str]:
    """Split a comma-separated answer into trimmed, non-empty items."""
    if not text:
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


class ManualInputClient:
    """Interactive questionnaire for collecting the nutrition profile."""

    def __init__(self, language: Language = Language.ES):
        self.language = language

    async def _number(self, message: str, field_name: str, default: float, integer: bool = False):
        answer = await questionary.text(
            message,
            default=str(default),
            validate=range_validator(field_name, integer=integer),
            style=custom_style,
        ).ask_async()
        if answer is None:
            raise KeyboardInterrupt
        return int(answer) if integer else float(answer)

    async def collect_profile(self, initial: UserProfile | None = None) -> UserProfile:
        """Run interactive questionnaire to collect a profile.

        Args:
            initial: Existing profile whose values are offered as defaults
        """
        base = initial or UserProfile(language=self.language)
        print("\n=== Nutrition Profile Questionnaire ===\n")

        # Biometrics
        age = await self._number("Age (years):", "age", base.age, integer=True)
        gender = await questionary.select(
            "Gender:",
            choices=[questionary.Choice(g.value, g) for g in Gender],
            default=base.gender,
            style=custom_style,
        ).ask_async()
        weight = await self._number("Weight (kg):", "weight", base.weight)
        height = await self._number("Height (cm):", "height", base.height)
        waist = await self._number("Waist circumference (cm):", "waist", base.waist)

        # Diet and activity
        diet_type = await questionary.select(
            "Diet style:",
            choices=[questionary.Choice(d.value, d) for d in DietType],
            default=base.diet_type,
            style=custom_style,
        ).ask_async()
        activity_level = await questionary.select(
            "General activity level:",
            choices=[questionary.Choice(a.value, a) for a in ActivityLevel],
            default=base.activity_level,
            style=custom_style,
        ).ask_async()

        # Exercise
        exercise_type = await questionary.select(
            "Main sport:",
            choices=[questionary.Choice(e.value, e) for e in ExerciseType],
            default=base.exercise_type,
            style=custom_style,
        ).ask_async()
        exercise_frequency = base.exercise_frequency
        exercise_duration = base.exercise_duration
        exercise_description = base.exercise_description
        if exercise_type != ExerciseType.NONE:
            exercise_frequency = await self._number(
                "Days per week:", "exercise_frequency", base.exercise_frequency, integer=True
            )
            exercise_duration = await self._number(
                "Minutes per session:", "exercise_duration", base.exercise_duration, integer=True
            )
            exercise_description = await questionary.text(
                "Describe your training (optional):",
                default=base.exercise_description,
                style=custom_style,
            ).ask_async() or ""

        # NEAT
        basal_steps = await self._number(
            "Average daily steps:", "basal_steps", base.basal_steps, integer=True
        )
        basal_activity_desc = await questionary.text(
            "Describe your daily activity (job, commute...) (optional):",
            default=base.basal_activity_desc,
            style=custom_style,
        ).ask_async() or ""

        # Health
        intolerances = parse_list(await questionary.text(
            "Intolerances/allergies (comma separated):",
            default=", ".join(base.intolerances),
            style=custom_style,
        ).ask_async())
        diseases = parse_list(await questionary.text(
            "Diseases or conditions (comma separated):",
            default=", ".join(base.diseases),
            style=custom_style,
        ).ask_async())

        profile = UserProfile(
            age=age,
            gender=gender,
            weight=weight,
            height=height,
            waist=waist,
            intolerances=intolerances,
            disease_notes=dict(base.disease_notes),
            diet_type=diet_type,
            activity_level=activity_level,
            exercise_type=exercise_type,
            exercise_description=exercise_description,
            exercise_frequency=exercise_frequency,
            exercise_duration=exercise_duration,
            basal_steps=basal_steps,
            basal_activity_desc=basal_activity_desc,
            language=self.language,
        )
        profile.set_diseases(diseases)

        for disease in profile.diseases:
            note = await questionary.text(
                f"Notes for '{disease}' (optional):",
                default=profile.disease_notes.get(disease, ""),
                style=custom_style,
            ).ask_async()
            if note:
                profile.set_disease_note(disease, note)

        profile.treatments = parse_list(await questionary.text(
            "Medical treatments (comma separated):",
            default=", ".join(base.treatments),
            style=custom_style,
        ).ask_async())
        profile.supplements = parse_list(await questionary.text(
            "Current supplements (comma separated):",
            default=", ".join(base.supplements),
            style=custom_style,
        ).ask_async())

        profile.genetic_markers = await questionary.checkbox(
            "Known genetic markers:",
            choices=[
                questionary.Choice(
                    f"{marker.label} - {marker.describe(self.language.value)}",
                    marker.id,
                    checked=marker.id in base.genetic_markers,
                )
                for marker in GENETIC_MARKERS
            ],
            style=custom_style,
        ).ask_async() or []

        return profile
