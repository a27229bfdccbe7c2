"""Reference content."""

from .medical_data import (
    GENETIC_MARKERS,
    MEDICATIONS_IMPACT,
    SCIENTIFIC_REFERENCES,
    GeneticMarker,
    get_genetic_marker,
    get_medications_impact,
    get_references,
)

__all__ = [
    "GENETIC_MARKERS",
    "GeneticMarker",
    "MEDICATIONS_IMPACT",
    "SCIENTIFIC_REFERENCES",
    "get_genetic_marker",
    "get_medications_impact",
    "get_references",
]
