"""User profile routes."""

import logging

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...clients.manual.client import parse_list
from ...data.medical_data import GENETIC_MARKERS
from ...exceptions import (
    ConfigurationError,
    GenerationError,
    GenerationInProgressError,
    ProfileValidationError,
)
from ...models.user_profile import (
    ERROR_REQUIRED,
    ActivityLevel,
    DietType,
    ExerciseType,
    Gender,
    UserProfile,
)
from ...services.planner import Tab
from ..dependencies import get_service, render

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


def _to_number(text: str, integer: bool = False) -> int | float | None:
    """Parse a form number; blank or garbage gives None."""
    try:
        return int(text) if integer else float(text)
    except ValueError:
        return None


def parse_diseases(text: str) -> tuple[list[str], dict[str, str]]:
    """Parse one disease per line, with an optional note after a colon.

    "Hipertensión: controlada con enalapril" gives the disease
    "Hipertensión" and that note.
    """
    diseases: list[str] = []
    notes: dict[str, str] = {}
    for line in text.splitlines():
        name, _, note = line.partition(":")
        name = name.strip()
        if not name or name in diseases:
            continue
        diseases.append(name)
        if note.strip():
            notes[name] = note.strip()
    return diseases, notes


def format_diseases(profile: UserProfile) -> str:
    """Inverse of parse_diseases for pre-filling the form."""
    lines = []
    for disease in profile.diseases:
        note = profile.disease_notes.get(disease)
        lines.append(f"{disease}: {note}" if note else disease)
    return "\n".join(lines)


def _profile_form(
    request: Request,
    profile: UserProfile,
    errors: dict[str, str] | None = None,
    status_code: int = 200,
):
    t = get_service(request).t
    messages = {
        name: t["error_required"] if code == ERROR_REQUIRED else t["error_invalid_range"]
        for name, code in (errors or {}).items()
    }
    return render(
        request,
        "profile.html",
        {
            "profile": profile,
            "diseases_text": format_diseases(profile),
            "errors": messages,
            "genders": [g.value for g in Gender],
            "diet_types": [d.value for d in DietType],
            "activity_levels": [a.value for a in ActivityLevel],
            "exercise_types": [e.value for e in ExerciseType],
            "markers": GENETIC_MARKERS,
        },
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def profile_page(request: Request):
    """Profile form; onboarding when no profile exists yet."""
    service = get_service(request)
    if service.state.has_profile:
        service.set_tab(Tab.PROFILE)
    return _profile_form(request, service.state.profile or UserProfile())


@router.post("")
async def save_profile(
    request: Request,
    age: str = Form(""),
    gender: Gender = Form(Gender.MALE),
    weight: str = Form(""),
    height: str = Form(""),
    waist: str = Form(""),
    intolerances: str = Form(""),
    diseases: str = Form(""),
    treatments: str = Form(""),
    supplements: str = Form(""),
    genetic_markers: list[str] = Form(default=[]),
    diet_type: DietType = Form(DietType.STANDARD),
    activity_level: ActivityLevel = Form(ActivityLevel.SEDENTARY),
    exercise_type: ExerciseType = Form(ExerciseType.NONE),
    exercise_description: str = Form(""),
    exercise_frequency: str = Form("3"),
    exercise_duration: str = Form("45"),
    basal_steps: str = Form("5000"),
    basal_activity_desc: str = Form(""),
):
    """Validate the profile and generate a new plan from it."""
    service = get_service(request)
    disease_list, disease_notes = parse_diseases(diseases)
    known_markers = {m.id for m in GENETIC_MARKERS}

    profile = UserProfile(
        age=_to_number(age, integer=True),
        gender=gender,
        weight=_to_number(weight),
        height=_to_number(height),
        waist=_to_number(waist),
        intolerances=parse_list(intolerances),
        diseases=disease_list,
        disease_notes=disease_notes,
        treatments=parse_list(treatments),
        genetic_markers=[m for m in genetic_markers if m in known_markers],
        supplements=parse_list(supplements),
        diet_type=diet_type,
        activity_level=activity_level,
        exercise_type=exercise_type,
        exercise_description=exercise_description.strip(),
        exercise_frequency=_to_number(exercise_frequency, integer=True),
        exercise_duration=_to_number(exercise_duration, integer=True),
        basal_steps=_to_number(basal_steps, integer=True),
        basal_activity_desc=basal_activity_desc.strip(),
        language=service.state.language,
    )

    try:
        await service.submit_profile(profile)
    except ProfileValidationError as e:
        service.state.error = service.t["error_fix_form"]
        return _profile_form(request, profile, errors=e.errors, status_code=400)
    except GenerationInProgressError:
        service.state.error = service.t["working"]
        return RedirectResponse(url="/profile", status_code=302)
    except (ConfigurationError, GenerationError) as e:
        # The banner carries the message; keep the submitted values on screen
        logger.warning("Plan generation failed: %s", e)
        return _profile_form(request, profile, status_code=502)

    return RedirectResponse(url="/plan", status_code=302)
