"""UI translations (Spanish and English)."""

TRANSLATIONS: dict[str, dict[str, str]] = {
    "es": {
        "app_title": "NutriPlan",
        "app_subtitle": "Tu plan nutricional personalizado",
        "ai_tag": "Nutrición con IA",
        "ai_desc": (
            "Completa tu perfil biométrico y médico y generaremos un plan semanal "
            "de comidas, ejercicio y suplementación adaptado a ti."
        ),
        "working": "Generando tu plan...",
        "working_desc": "Nuestro equipo de IA está analizando tu perfil. Esto puede tardar un minuto.",
        "card_bmi": "IMC",
        "card_waist": "Cintura",
        "card_cv_risk": "Riesgo CV",
        "card_weight": "Peso",
        "tab_diet": "Plan",
        "tab_evolution": "Evolución",
        "tab_profile": "Perfil",
        "tab_science": "Ciencia",
        "tracking_title": "Seguimiento de tu evolución",
        "tracking_weight": "Peso (kg)",
        "tracking_waist": "Cintura (cm)",
        "tracking_btn": "Registrar",
        "tracking_empty": "Aún no hay registros.",
        "btn_pdf": "PDF",
        "btn_csv": "CSV",
        "btn_share": "Compartir",
        "btn_generate": "Generar plan",
        "btn_save": "Guardar cambios",
        "btn_alternatives": "Ver alternativas",
        "btn_use": "Usar",
        "btn_exercise": "Plan de ejercicio",
        "refs_title": "Referencias científicas",
        "refs_methodology": "Metodología dietética",
        "refs_tables": "Tablas nutricionales",
        "refs_cv_risk": "Riesgo cardiovascular",
        "refs_meds": "Impacto de medicamentos",
        "refs_genetics": "Marcadores genéticos",
        "reset_confirm": "¿Seguro que quieres borrar todos tus datos? Esta acción no se puede deshacer.",
        "reset_done": "Todos los datos han sido borrados.",
        "error_required": "Campo obligatorio",
        "error_invalid_range": "Valor fuera de rango",
        "error_fix_form": "Corrige los errores del formulario antes de continuar.",
        "error_detected": "Error detectado",
        "error_execution": "Error de ejecución",
        "error_config": (
            "Falta la clave de la API. Define la variable de entorno GEMINI_API_KEY "
            "(o API_KEY) y vuelve a intentarlo."
        ),
        "error_no_profile": "Primero crea tu perfil.",
        "no_alternatives": "No se encontraron alternativas.",
        "report_evo_title": "Evolución NutriPlan",
        "report_generated": "Generado",
        "diet_total": "Total diario",
        "diet_meal_total": "kcal",
        "diet_exercise_note": "Nota de ejercicio",
        "diet_recommendations": "Recomendaciones",
        "diet_exercise_plan": "Plan de movimiento",
        "diet_basal": "Estrategia NEAT",
        "diet_supplements": "Suplementación",
        "meal_breakfast": "Desayuno",
        "meal_lunch": "Almuerzo",
        "meal_snack": "Merienda",
        "meal_dinner": "Cena",
        "col_date": "Fecha",
        "col_weight": "Peso",
        "col_waist": "Cintura",
        "col_bmi": "IMC",
        "risk_Low": "Bajo",
        "risk_Moderate": "Moderado",
        "risk_High": "Alto",
        "email_subject": "Mi Evolución Nutricional - NutriPlan AI",
        "email_body": (
            "Hola,\n\nTe comparto mi evolución nutricional registrada en NutriPlan AI.\n\n"
            "Último registro:\n- Peso: {weight} kg\n- Cintura: {waist} cm\n- IMC: {bmi}\n\n"
            "Generado con Inteligencia Artificial."
        ),
        "csv_header": "Fecha,Peso(kg),Cintura(cm),IMC",
    },
    "en": {
        "app_title": "NutriPlan",
        "app_subtitle": "Your personalized nutrition plan",
        "ai_tag": "AI Nutrition",
        "ai_desc": (
            "Fill in your biometric and medical profile and we will generate a weekly "
            "meal, exercise and supplement plan tailored to you."
        ),
        "working": "Generating your plan...",
        "working_desc": "Our AI team is analyzing your profile. This may take a minute.",
        "card_bmi": "BMI",
        "card_waist": "Waist",
        "card_cv_risk": "CV Risk",
        "card_weight": "Weight",
        "tab_diet": "Plan",
        "tab_evolution": "Evolution",
        "tab_profile": "Profile",
        "tab_science": "Science",
        "tracking_title": "Track your progress",
        "tracking_weight": "Weight (kg)",
        "tracking_waist": "Waist (cm)",
        "tracking_btn": "Log",
        "tracking_empty": "No entries yet.",
        "btn_pdf": "PDF",
        "btn_csv": "CSV",
        "btn_share": "Share",
        "btn_generate": "Generate plan",
        "btn_save": "Save changes",
        "btn_alternatives": "View alternatives",
        "btn_use": "Use",
        "btn_exercise": "Exercise plan",
        "refs_title": "Scientific references",
        "refs_methodology": "Dietary methodology",
        "refs_tables": "Nutritional tables",
        "refs_cv_risk": "Cardiovascular risk",
        "refs_meds": "Medication impact",
        "refs_genetics": "Genetic markers",
        "reset_confirm": "Are you sure you want to delete all your data? This cannot be undone.",
        "reset_done": "All data has been deleted.",
        "error_required": "Required field",
        "error_invalid_range": "Value out of range",
        "error_fix_form": "Please fix the form errors before continuing.",
        "error_detected": "Error detected",
        "error_execution": "Execution Error",
        "error_config": (
            "The API key is missing. Set the GEMINI_API_KEY (or API_KEY) environment "
            "variable and try again."
        ),
        "error_no_profile": "Create your profile first.",
        "no_alternatives": "No alternatives found.",
        "report_evo_title": "NutriPlan Progress",
        "report_generated": "Generated",
        "diet_total": "Daily total",
        "diet_meal_total": "kcal",
        "diet_exercise_note": "Exercise note",
        "diet_recommendations": "Recommendations",
        "diet_exercise_plan": "Movement plan",
        "diet_basal": "NEAT strategy",
        "diet_supplements": "Supplements",
        "meal_breakfast": "Breakfast",
        "meal_lunch": "Lunch",
        "meal_snack": "Snack",
        "meal_dinner": "Dinner",
        "col_date": "Date",
        "col_weight": "Weight",
        "col_waist": "Waist",
        "col_bmi": "BMI",
        "risk_Low": "Low",
        "risk_Moderate": "Moderate",
        "risk_High": "High",
        "email_subject": "My Nutritional Progress - NutriPlan AI",
        "email_body": (
            "Hi,\n\nSharing my nutritional progress logged in NutriPlan AI.\n\n"
            "Latest log:\n- Weight: {weight} kg\n- Waist: {waist} cm\n- BMI: {bmi}\n\n"
            "Generated with AI."
        ),
        "csv_header": "Date,Weight(kg),Waist(cm),BMI",
    },
}


def get_translation(language: str) -> dict[str, str]:
    """Get the string table for a language, falling back to Spanish."""
    return TRANSLATIONS.get(language, TRANSLATIONS["es"])
