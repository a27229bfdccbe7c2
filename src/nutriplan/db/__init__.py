"""Database layer for nutriplan."""

from .engine import get_db_path, init_db
from .repositories import (
    DietRepository,
    KeyValueStore,
    ProgressHistoryRepository,
    SettingsRepository,
    StateRepository,
    UserProfileRepository,
)

__all__ = [
    "DietRepository",
    "get_db_path",
    "init_db",
    "KeyValueStore",
    "ProgressHistoryRepository",
    "SettingsRepository",
    "StateRepository",
    "UserProfileRepository",
]
