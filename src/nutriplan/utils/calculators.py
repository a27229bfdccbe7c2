"""Body metric calculators and display formatting."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum


class BMICategory(str, Enum):
    """WHO BMI categories."""

    UNDERWEIGHT = "Bajo peso"
    NORMAL = "Normal"
    OVERWEIGHT = "Sobrepeso"
    OBESITY = "Obesidad"


class CVRisk(str, Enum):
    """Cardiovascular risk bucket from the waist-to-height ratio."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"


# Upper bounds (inclusive) of each waist-to-height ratio bucket
CV_RISK_LOW_MAX = 0.50
CV_RISK_MODERATE_MAX = 0.60

INVALID_DATE = "Invalid Date"

_MONTHS = {
    "es": ["ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sept", "oct", "nov", "dic"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}


def calculate_bmi(weight: float, height_cm: float) -> float:
    """Body mass index rounded to one decimal.

    Rounds half away from zero, so 24.25 becomes 24.3.
    """
    height_m = height_cm / 100
    bmi = Decimal(repr(weight / (height_m * height_m)))
    return float(bmi.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def get_bmi_category(bmi: float) -> BMICategory:
    if bmi < 18.5:
        return BMICategory.UNDERWEIGHT
    if bmi < 25:
        return BMICategory.NORMAL
    if bmi < 30:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESITY


def waist_to_height_ratio(waist: float, height: float) -> float:
    return waist / height


def calculate_cv_risk_score(waist: float, height: float) -> CVRisk:
    """Classify cardiovascular risk from waist and height (same unit).

    This is a simplified proxy for educational purposes: a ratio above 0.5
    is associated with higher metabolic and CV risk independently of BMI.
    """
    ratio = waist_to_height_ratio(waist, height)
    if ratio <= CV_RISK_LOW_MAX:
        return CVRisk.LOW
    if ratio <= CV_RISK_MODERATE_MAX:
        return CVRisk.MODERATE
    return CVRisk.HIGH


def format_date(iso_string: str, language: str = "es") -> str:
    """Format an ISO timestamp as a short day/month label.

    Spanish yields "07 mar", English yields "Mar 07". Malformed input gives
    "Invalid Date" instead of raising.
    """
    try:
        when = datetime.fromisoformat(str(iso_string).replace("Z", "+00:00"))
    except ValueError:
        return INVALID_DATE

    months = _MONTHS.get(language, _MONTHS["es"])
    month = months[when.month - 1]
    if language == "en":
        return f"{month} {when.day:02d}"
    return f"{when.day:02d} {month}"


def format_full_date(iso_string: str, language: str = "es") -> str:
    """Format an ISO timestamp as a numeric locale date (dd/mm/yyyy or m/d/yyyy)."""
    try:
        when = datetime.fromisoformat(str(iso_string).replace("Z", "+00:00"))
    except ValueError:
        return INVALID_DATE
    if language == "en":
        return f"{when.month}/{when.day}/{when.year}"
    return f"{when.day}/{when.month}/{when.year}"
