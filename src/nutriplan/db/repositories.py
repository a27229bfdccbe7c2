"""Data access layer for nutriplan.

Each record lives under one key of the ``kv_store`` table as a JSON envelope
``{"version": 1, "data": ...}``. Records with an unknown version or a payload
that no longer matches the model load as empty rather than raising.
"""

import json
import logging
from pathlib import Path
from typing import Any

import aiosqlite

from ..models.diet import WeeklyDiet
from ..models.progress import ProgressEntry
from ..models.user_profile import Language, UserProfile
from .engine import (
    DIET_KEY,
    HISTORY_KEY,
    LANGUAGE_KEY,
    PROFILE_KEY,
    USER_DATA_KEYS,
    get_db_path,
    init_db,
)

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


class KeyValueStore:
    """Raw access to the kv_store table."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self._initialized = False

    async def _ensure_schema(self) -> None:
        if not self._initialized:
            await init_db(self.db_path)
            self._initialized = True

    async def get(self, key: str) -> str | None:
        """Get the raw text stored under a key."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return row[0]

    async def set(self, key: str, value: str) -> None:
        """Create or overwrite a key."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO kv_store (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            await db.commit()

    async def delete(self, *keys: str) -> int:
        """Delete keys, returning how many rows were removed."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                f"DELETE FROM kv_store WHERE key IN ({', '.join('?' for _ in keys)})",
                keys,
            )
            await db.commit()
            return cursor.rowcount

    async def keys(self) -> list[str]:
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT key FROM kv_store ORDER BY key")
            rows = await cursor.fetchall()
            return [row[0] for row in rows]


class _RecordRepository:
    """Shared envelope handling for single-key records."""

    key: str = ""

    def __init__(self, db_path: Path | None = None, store: KeyValueStore | None = None):
        self.store = store or KeyValueStore(db_path)

    async def _load_data(self) -> Any | None:
        raw = await self.store.get(self.key)
        if raw is None:
            return None
        try:
            envelope = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored record %s is not valid JSON; ignoring it", self.key)
            return None
        if not isinstance(envelope, dict) or envelope.get("version") != SCHEMA_VERSION:
            logger.warning("Stored record %s has an unsupported format; ignoring it", self.key)
            return None
        return envelope.get("data")

    async def _save_data(self, data: Any) -> None:
        envelope = {"version": SCHEMA_VERSION, "data": data}
        await self.store.set(self.key, json.dumps(envelope, ensure_ascii=False))

    async def clear(self) -> None:
        await self.store.delete(self.key)


class UserProfileRepository(_RecordRepository):
    """Repository for the single current profile."""

    key = PROFILE_KEY

    async def get(self) -> UserProfile | None:
        data = await self._load_data()
        if data is None:
            return None
        try:
            return UserProfile.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding stored profile: %s", e)
            return None

    async def save(self, profile: UserProfile) -> None:
        await self._save_data(profile.to_dict())


class ProgressHistoryRepository(_RecordRepository):
    """Repository for the ordered progress log."""

    key = HISTORY_KEY

    async def list_all(self) -> list[ProgressEntry]:
        """Get all entries, oldest first."""
        data = await self._load_data()
        if not isinstance(data, list):
            return []
        try:
            return [ProgressEntry.from_dict(entry) for entry in data]
        except (KeyError, TypeError) as e:
            logger.warning("Discarding stored history: %s", e)
            return []

    async def save_all(self, entries: list[ProgressEntry]) -> None:
        await self._save_data([entry.to_dict() for entry in entries])

    async def append(self, entry: ProgressEntry) -> list[ProgressEntry]:
        """Append one entry and return the updated log."""
        entries = await self.list_all()
        entries.append(entry)
        await self.save_all(entries)
        return entries


class DietRepository(_RecordRepository):
    """Repository for the current weekly plan."""

    key = DIET_KEY

    async def get(self) -> WeeklyDiet | None:
        data = await self._load_data()
        if data is None:
            return None
        try:
            return WeeklyDiet.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding stored diet: %s", e)
            return None

    async def save(self, diet: WeeklyDiet) -> None:
        await self._save_data(diet.to_dict())


class SettingsRepository(_RecordRepository):
    """Repository for the selected display language."""

    key = LANGUAGE_KEY

    async def get_language(self, default: Language = Language.ES) -> Language:
        data = await self._load_data()
        try:
            return Language(data) if data is not None else default
        except ValueError:
            return default

    async def set_language(self, language: Language) -> None:
        await self._save_data(Language(language).value)


class StateRepository:
    """All persisted records behind one object."""

    def __init__(self, db_path: Path | None = None):
        self.store = KeyValueStore(db_path)
        self.profiles = UserProfileRepository(store=self.store)
        self.history = ProgressHistoryRepository(store=self.store)
        self.diets = DietRepository(store=self.store)
        self.settings = SettingsRepository(store=self.store)

    async def clear_user_data(self) -> int:
        """Delete profile, history and diet."""
        return await self.store.delete(*USER_DATA_KEYS)
