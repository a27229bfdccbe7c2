"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import DATA_DIR

# Record keys, one row each in kv_store
PROFILE_KEY = "nutriplan_profile"
HISTORY_KEY = "nutriplan_history"
DIET_KEY = "nutriplan_diet"
LANGUAGE_KEY = "nutriplan_lang"

# Keys removed by a reset; the display language survives
USER_DATA_KEYS = (PROFILE_KEY, HISTORY_KEY, DIET_KEY)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "nutriplan.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        await db.commit()
