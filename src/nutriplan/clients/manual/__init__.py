"""Interactive profile questionnaire."""

from .client import ManualInputClient

__all__ = ["ManualInputClient"]
