"""Error types raised by nutriplan."""


class NutriPlanError(Exception):
    """Base class for all nutriplan errors."""


class ConfigurationError(NutriPlanError):
    """The AI credential (or another setting) is missing."""


class GenerationError(NutriPlanError):
    """Plan generation failed (network, API side, or bad response)."""


class MalformedResponseError(GenerationError):
    """The model answered, but not with a decodable plan."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text


class ProfileValidationError(NutriPlanError):
    """A profile field is missing or outside its plausible range."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Invalid profile fields: {fields}")


class GenerationInProgressError(NutriPlanError):
    """A plan is already being generated."""


class StaleSwapError(NutriPlanError):
    """A meal swap arrived after a newer request for the same slot."""


class NoProfileError(NutriPlanError):
    """The operation needs a saved profile and there is none."""
