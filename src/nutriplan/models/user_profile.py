"""User profile data models."""

from dataclasses import dataclass, field
from enum import Enum


class Gender(str, Enum):
    """Declared gender."""

    MALE = "Masculino"
    FEMALE = "Femenino"
    OTHER = "Otro"


class Language(str, Enum):
    """Language used for the UI and for generated plans."""

    ES = "es"
    EN = "en"


class ActivityLevel(str, Enum):
    """Self-declared general activity level."""

    SEDENTARY = "Sedentario"
    LIGHT = "Ligero"
    MODERATE = "Moderado"
    ACTIVE = "Muy Activo"
    ATHLETE = "Atleta"


class ExerciseType(str, Enum):
    """Main sport practiced."""

    NONE = "Ninguno"
    RUNNING = "Running"
    STRENGTH = "Fuerza"
    YOGA = "Yoga"
    CYCLING = "Ciclismo"
    SWIMMING = "Natación"
    FUNCTIONAL = "Funcional"
    OTHER = "Otro"


class DietType(str, Enum):
    """Eating style the plan must follow."""

    STANDARD = "Estándar"
    VEGAN = "Vegana"
    KETO = "Cetogénica"
    PALEO = "Paleo"
    MEDITERRANEAN = "Mediterránea"
    INTERMITTENT = "Ayuno Intermitente"


# Plausible human ranges, inclusive
VALID_RANGES: dict[str, tuple[float, float]] = {
    "age": (12, 100),
    "weight": (35, 250),
    "height": (100, 230),
    "waist": (40, 180),
    "exercise_frequency": (0, 7),
    "exercise_duration": (0, 240),
    "basal_steps": (0, 50000),
}

# Fields where zero/empty means "not filled in"
REQUIRED_FIELDS = ("age", "weight", "height", "waist")

ERROR_REQUIRED = "required"
ERROR_RANGE = "out_of_range"


@dataclass
class UserProfile:
    """Biometric, medical and lifestyle profile of the user."""

    age: int = 30
    gender: Gender = Gender.MALE
    weight: float = 70  # kg
    height: float = 170  # cm
    waist: float = 85  # cm
    intolerances: list[str] = field(default_factory=list)
    diseases: list[str] = field(default_factory=list)
    disease_notes: dict[str, str] = field(default_factory=dict)
    treatments: list[str] = field(default_factory=list)
    genetic_markers: list[str] = field(default_factory=list)
    supplements: list[str] = field(default_factory=list)
    diet_type: DietType = DietType.STANDARD
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    exercise_type: ExerciseType = ExerciseType.NONE
    exercise_description: str = ""
    exercise_frequency: int = 3  # days/week
    exercise_duration: int = 45  # minutes/session
    basal_steps: int = 5000
    basal_activity_desc: str = ""
    language: Language = Language.ES

    def validate(self) -> dict[str, str]:
        """Check numeric fields against VALID_RANGES.

        Returns:
            Mapping of field name to error code; empty when the profile is valid
        """
        errors: dict[str, str] = {}
        for name, (low, high) in VALID_RANGES.items():
            value = getattr(self, name)
            if name in REQUIRED_FIELDS and not value:
                errors[name] = ERROR_REQUIRED
            elif value is None or not low <= value <= high:
                errors[name] = ERROR_RANGE
        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def set_diseases(self, diseases: list[str]) -> None:
        """Replace the disease list, dropping notes for removed diseases."""
        self.diseases = list(diseases)
        self.disease_notes = {
            disease: note
            for disease, note in self.disease_notes.items()
            if disease in self.diseases
        }

    def set_disease_note(self, disease: str, note: str) -> None:
        self.disease_notes[disease] = note

    def toggle_genetic_marker(self, marker_id: str) -> None:
        """Select the marker if absent, deselect it if present."""
        if marker_id in self.genetic_markers:
            self.genetic_markers = [m for m in self.genetic_markers if m != marker_id]
        else:
            self.genetic_markers = [*self.genetic_markers, marker_id]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "age": self.age,
            "gender": self.gender.value,
            "weight": self.weight,
            "height": self.height,
            "waist": self.waist,
            "intolerances": list(self.intolerances),
            "diseases": list(self.diseases),
            "diseaseNotes": dict(self.disease_notes),
            "treatments": list(self.treatments),
            "geneticMarkers": list(self.genetic_markers),
            "supplements": list(self.supplements),
            "dietType": self.diet_type.value,
            "activityLevel": self.activity_level.value,
            "exerciseType": self.exercise_type.value,
            "exerciseDescription": self.exercise_description,
            "exerciseFrequency": self.exercise_frequency,
            "exerciseDuration": self.exercise_duration,
            "basalSteps": self.basal_steps,
            "basalActivityDesc": self.basal_activity_desc,
            "language": self.language.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            age=data["age"],
            gender=Gender(data.get("gender", Gender.MALE.value)),
            weight=data["weight"],
            height=data["height"],
            waist=data["waist"],
            intolerances=data.get("intolerances", []),
            diseases=data.get("diseases", []),
            disease_notes=data.get("diseaseNotes") or {},
            treatments=data.get("treatments", []),
            genetic_markers=data.get("geneticMarkers", []),
            supplements=data.get("supplements", []),
            diet_type=DietType(data.get("dietType", DietType.STANDARD.value)),
            activity_level=ActivityLevel(
                data.get("activityLevel", ActivityLevel.SEDENTARY.value)
            ),
            exercise_type=ExerciseType(data.get("exerciseType", ExerciseType.NONE.value)),
            exercise_description=data.get("exerciseDescription", ""),
            exercise_frequency=data.get("exerciseFrequency", 3),
            exercise_duration=data.get("exerciseDuration", 45),
            basal_steps=data.get("basalSteps", 5000),
            basal_activity_desc=data.get("basalActivityDesc", ""),
            language=Language(data.get("language", Language.ES.value)),
        )

    def get_summary(self) -> str:
        """Short multi-line summary for terminal display."""
        summary = f"Age: {self.age} | {self.gender.value}\n"
        summary += f"Weight: {self.weight} kg | Height: {self.height} cm | Waist: {self.waist} cm\n"
        summary += f"Diet: {self.diet_type.value} | Activity: {self.activity_level.value}\n"
        summary += (
            f"Exercise: {self.exercise_type.value}, "
            f"{self.exercise_frequency} days/week, {self.exercise_duration} min\n"
        )
        summary += f"Basal steps: {self.basal_steps}\n"

        if self.intolerances:
            summary += f"Intolerances: {', '.join(self.intolerances)}\n"
        if self.diseases:
            summary += "Diseases:\n"
            for disease in self.diseases:
                note = self.disease_notes.get(disease)
                summary += f"  - {disease}" + (f" ({note})" if note else "") + "\n"
        if self.treatments:
            summary += f"Treatments: {', '.join(self.treatments)}\n"
        if self.supplements:
            summary += f"Supplements: {', '.join(self.supplements)}\n"
        if self.genetic_markers:
            summary += f"Genetic markers: {', '.join(self.genetic_markers)}\n"

        return summary
