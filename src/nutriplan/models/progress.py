"""Progress tracking model."""

from dataclasses import dataclass
from datetime import datetime

from ..utils.calculators import calculate_bmi


@dataclass
class ProgressEntry:
    """A timestamped weight/waist sample with its derived BMI.

    Entries are appended to the history log and never changed afterwards.
    """

    date: str  # ISO 8601
    weight: float
    waist: float
    bmi: float

    @classmethod
    def record(
        cls,
        weight: float,
        waist: float,
        height_cm: float,
        when: datetime | None = None,
    ) -> "ProgressEntry":
        """Create an entry for now (or ``when``), computing BMI from height."""
        when = when or datetime.now()
        return cls(
            date=when.isoformat(),
            weight=weight,
            waist=waist,
            bmi=calculate_bmi(weight, height_cm),
        )

    @property
    def recorded_at(self) -> datetime | None:
        try:
            return datetime.fromisoformat(self.date)
        except ValueError:
            return None

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "weight": self.weight,
            "waist": self.waist,
            "bmi": self.bmi,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgressEntry":
        return cls(
            date=data["date"],
            weight=data["weight"],
            waist=data["waist"],
            bmi=data["bmi"],
        )
