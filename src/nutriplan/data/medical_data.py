"""Static reference content shown in the Science tab and used in prompts.

Every text block is available in Spanish and English.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneticMarker:
    """A nutrigenetic marker the user can flag in their profile."""

    id: str
    label: str
    desc: dict[str, str]

    def describe(self, language: str = "es") -> str:
        return self.desc.get(language, self.desc["es"])


GENETIC_MARKERS: list[GeneticMarker] = [
    GeneticMarker(
        id="FTO",
        label="FTO (rs9939609)",
        desc={
            "es": "Asociado a mayor apetito y preferencia por alimentos densos en energía.",
            "en": "Associated with increased appetite and preference for energy-dense foods.",
        },
    ),
    GeneticMarker(
        id="MC4R",
        label="MC4R (rs17782313)",
        desc={
            "es": "Relacionado con la regulación de la ingesta y riesgo de obesidad mórbida.",
            "en": "Linked to intake regulation and risk of morbid obesity.",
        },
    ),
    GeneticMarker(
        id="PPARG",
        label="PPARG (Pro12Ala)",
        desc={
            "es": "Influye en la sensibilidad a la insulina y el metabolismo de ácidos grasos.",
            "en": "Influences insulin sensitivity and fatty acid metabolism.",
        },
    ),
    GeneticMarker(
        id="APOE",
        label="APOE (ε4)",
        desc={
            "es": "Marcador de riesgo cardiovascular elevado y metabolismo lipídico alterado.",
            "en": "Marker of elevated cardiovascular risk and altered lipid metabolism.",
        },
    ),
    GeneticMarker(
        id="ADRB2",
        label="ADRB2 (Gly16Arg)",
        desc={
            "es": "Afecta la movilización de grasas durante el ejercicio físico.",
            "en": "Affects fat mobilization during physical exercise.",
        },
    ),
]

MEDICATIONS_IMPACT: dict[str, list[str]] = {
    "es": [
        "Corticoides (Prednisona, etc.) - Pueden causar retención de líquidos y aumento de glucemia.",
        "Antidepresivos (ISRS, Tricíclicos) - Algunos pueden alterar el centro del hambre.",
        "Antipsicóticos de 2ª generación - Alto riesgo metabólico.",
        "Betabloqueantes - Pueden reducir ligeramente la tasa metabólica basal.",
        "Insulina o Sulfonilureas - Riesgo de hipoglucemia y ganancia ponderal si no se ajusta la dieta.",
    ],
    "en": [
        "Corticosteroids (Prednisone, etc.) - May cause fluid retention and raised blood glucose.",
        "Antidepressants (SSRIs, Tricyclics) - Some may alter the hunger centre.",
        "Second-generation antipsychotics - High metabolic risk.",
        "Beta blockers - May slightly reduce basal metabolic rate.",
        "Insulin or Sulfonylureas - Risk of hypoglycaemia and weight gain if the diet is not adjusted.",
    ],
}

SCIENTIFIC_REFERENCES: dict[str, dict[str, str]] = {
    "es": {
        "diets": (
            "Basado en guías de la OMS, FESNAD (Federación Española de Sociedades de "
            "Nutrición, Alimentación y Dietética) y el consenso SEEDO (Sociedad Española "
            "para el Estudio de la Obesidad)."
        ),
        "nutritional_tables": (
            "Tablas de composición de alimentos BEDCA (Base de Datos Española de "
            "Composición de Alimentos) y USDA."
        ),
        "cv_risk": (
            "Cálculo del Riesgo Cardiovascular mediante el Índice Cintura/Talla (ICT). "
            "Un ICT > 0.5 se asocia a mayor riesgo metabólico y CV independientemente del IMC."
        ),
        "medications": (
            "Interacciones fármaco-alimento según el Catálogo de Medicamentos (Consejo "
            "General de Colegios Oficiales de Farmacéuticos)."
        ),
    },
    "en": {
        "diets": (
            "Based on WHO guidelines, FESNAD (Spanish Federation of Nutrition, Food and "
            "Dietetics Societies) and the SEEDO consensus (Spanish Society for the Study "
            "of Obesity)."
        ),
        "nutritional_tables": (
            "Food composition tables from BEDCA (Spanish Food Composition Database) and USDA."
        ),
        "cv_risk": (
            "Cardiovascular risk estimated with the Waist-to-Height Ratio (WHtR). A WHtR "
            "> 0.5 is associated with higher metabolic and CV risk regardless of BMI."
        ),
        "medications": (
            "Drug-food interactions according to the Medicines Catalogue (Spanish General "
            "Council of Official Pharmacist Associations)."
        ),
    },
}


def get_genetic_marker(marker_id: str) -> GeneticMarker | None:
    """Look up a marker by id."""
    for marker in GENETIC_MARKERS:
        if marker.id == marker_id:
            return marker
    return None


def get_references(language: str = "es") -> dict[str, str]:
    return SCIENTIFIC_REFERENCES.get(language, SCIENTIFIC_REFERENCES["es"])


def get_medications_impact(language: str = "es") -> list[str]:
    return MEDICATIONS_IMPACT.get(language, MEDICATIONS_IMPACT["es"])
