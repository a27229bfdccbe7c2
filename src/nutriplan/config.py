"""Runtime configuration read from the environment."""

import os
from dataclasses import dataclass, field
from pathlib import Path

# Default data directory (repo root /data)
DATA_DIR = Path(__file__).parent.parent.parent / "data"

DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_LANGUAGE = "es"


@dataclass
class Settings:
    """Application settings.

    The API key is looked up under ``GEMINI_API_KEY`` first and ``API_KEY``
    second, matching the variable names hosting platforms usually inject.
    """

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    data_dir: Path = field(default_factory=lambda: DATA_DIR)
    default_language: str = DEFAULT_LANGUAGE

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_env(cls, environ: dict | None = None) -> "Settings":
        """Build settings from environment variables."""
        env = os.environ if environ is None else environ
        data_dir = env.get("NUTRIPLAN_DATA_DIR")
        language = env.get("NUTRIPLAN_LANG", DEFAULT_LANGUAGE)
        if language not in ("es", "en"):
            language = DEFAULT_LANGUAGE
        return cls(
            api_key=env.get("GEMINI_API_KEY") or env.get("API_KEY"),
            model=env.get("NUTRIPLAN_MODEL", DEFAULT_MODEL),
            data_dir=Path(data_dir) if data_dir else DATA_DIR,
            default_language=language,
        )


def get_settings() -> Settings:
    """Get settings for the current process environment."""
    return Settings.from_env()
