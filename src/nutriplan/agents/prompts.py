"""Prompt templates for plan and alternative-meal generation."""

from ..data.medical_data import get_genetic_marker
from ..models.diet import Meal
from ..models.user_profile import Language, UserProfile

LANGUAGE_NAMES = {
    Language.ES: "ESPAÑOL",
    Language.EN: "INGLÉS",
}

WEEKLY_PLAN_TEMPLATE = """Actúa como un Chef Ejecutivo, Nutricionista Clínico, Farmacéutico y Entrenador de Alto Rendimiento. Genera un plan integral de 7 días COMPLETAMENTE EN IDIOMA {language}.

PERFIL DEL PACIENTE:
- Edad: {age} años | Sexo: {gender}
- Peso: {weight} kg | Talla: {height} cm | Cintura: {waist} cm
- Nivel de Actividad General Declarado: {activity_level}

ACTIVIDAD BASAL (NEAT):
- Pasos diarios promedio: {basal_steps}
- Descripción de actividad diaria: {basal_activity_desc}

EJERCICIO DEPORTIVO:
- Deporte Principal: {exercise_type}
- Frecuencia Actual: {exercise_frequency} días/semana
- Duración Media: {exercise_duration} minutos/sesión
- Descripción de su Ejercicio: {exercise_description}

SALUD Y BIOMÉDICA:
- Intolerancias y Alergias: {intolerances}
- Suplementos Actuales: {supplements}
- Enfermedades y Observaciones: {diseases}
- Tratamientos Médicos: {treatments}
- Marcadores Genéticos: {genetics}
- Estilo de Alimentación: {diet_type}

REGLAS DE ORO:
1. INSTRUCCIONES PRO: En "instructions", detalla el proceso paso a paso con técnicas profesionales.
2. NUTRICIÓN DE PRECISIÓN: Ajusta calorías (TDEE) para balance metabólico considerando tanto su actividad basal ({basal_steps} pasos) como su deporte.
3. PLAN DE MOVIMIENTO: Genera recomendaciones de ejercicio específicas en "exercisePlan".
4. ESTRATEGIA NEAT: Genera recomendaciones específicas para optimizar su actividad basal diaria (pasos, hábitos diarios) en "basalRecommendations".
5. GUÍA DE SUPLEMENTACIÓN: En "supplementAdvise", analiza sus suplementos actuales y sugiere otros con sólida evidencia.
6. EXERCISE NOTE: En cada día (day), añade una nota vinculada al esfuerzo de ese día en "exerciseNote".
7. "totalCalories" de cada día debe ser la suma de las calorías de sus cuatro comidas.
8. Respeta estrictamente las intolerancias y el estilo de alimentación indicados."""

ALTERNATIVES_TEMPLATE = """Como Chef-Nutricionista, genera {count} platos alternativos para esta comida: "{meal_name}".
RESTRICCIONES CRÍTICAS:
1. NUTRICIÓN: Aproximadamente {calories} kcal, {protein}g proteína, {carbs}g carbos y {fats}g grasas (+/- {tolerance}%).
2. ESTILO: Dieta "{diet_type}" e idioma {language}.
3. DETALLE: Instrucciones de cocina profesionales.
4. EXCLUSIONES: Evita por completo: {intolerances}."""


def _join(items: list[str], empty: str) -> str:
    return ", ".join(items) or empty


def format_genetics(marker_ids: list[str], language: str = "es") -> str:
    """Resolve marker ids to "label: description" pairs."""
    parts = []
    for marker_id in marker_ids:
        marker = get_genetic_marker(marker_id)
        if marker is None:
            parts.append(marker_id)
        else:
            parts.append(f"{marker.label}: {marker.describe(language)}")
    return ", ".join(parts)


def format_diseases(profile: UserProfile) -> str:
    """List diseases, attaching the user's note where there is one."""
    parts = []
    for disease in profile.diseases:
        note = profile.disease_notes.get(disease)
        parts.append(f"{disease} (Detalles: {note})" if note else disease)
    return ", ".join(parts)


def build_weekly_plan_prompt(profile: UserProfile) -> str:
    """Build the instruction string for a full weekly plan."""
    return WEEKLY_PLAN_TEMPLATE.format(
        language=LANGUAGE_NAMES[profile.language],
        age=profile.age,
        gender=profile.gender.value,
        weight=profile.weight,
        height=profile.height,
        waist=profile.waist,
        activity_level=profile.activity_level.value,
        basal_steps=profile.basal_steps,
        basal_activity_desc=profile.basal_activity_desc or "No especificada",
        exercise_type=profile.exercise_type.value,
        exercise_frequency=profile.exercise_frequency,
        exercise_duration=profile.exercise_duration,
        exercise_description=profile.exercise_description or "No especificada",
        intolerances=_join(profile.intolerances, "Ninguna"),
        supplements=_join(profile.supplements, "Ninguno"),
        diseases=format_diseases(profile) or "Ninguna",
        treatments=_join(profile.treatments, "Ninguno"),
        genetics=format_genetics(profile.genetic_markers) or "No conocidos",
        diet_type=profile.diet_type.value,
    )


def build_alternatives_prompt(
    meal: Meal,
    profile: UserProfile,
    count: int = 2,
    tolerance: float = 0.05,
) -> str:
    """Build the instruction string for substitute meals with matching macros."""
    return ALTERNATIVES_TEMPLATE.format(
        count=count,
        meal_name=meal.name,
        calories=meal.calories,
        protein=meal.protein,
        carbs=meal.carbs,
        fats=meal.fats,
        tolerance=round(tolerance * 100),
        diet_type=profile.diet_type.value,
        language="Español" if profile.language == Language.ES else "Inglés",
        intolerances=_join(profile.intolerances, "nada en particular"),
    )
