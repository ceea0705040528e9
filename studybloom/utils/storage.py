"""
KeyValueStore - JSON values keyed by string in ~/.studybloom/storage.db.

Plays the role browser local storage plays for a web client: completion
state, user-authored courses and mock accounts each live under one fixed
key. Reads are fail-soft so a corrupted value never blocks the app.
"""

import json
import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from studybloom.config import DEFAULT_STORAGE_DB

logger = logging.getLogger(__name__)


# Fixed storage keys
COMPLETED_SECTIONS_KEY = "completedSections"
USER_COURSES_KEY = "userCourses"
USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"


class KeyValueStore:
    """
    Persist JSON-serializable values in a single SQLite table.

    Each method opens its own connection, so one store can be shared by
    every component of a session.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Initialize the store.

        Args:
            db_path: Path to storage.db (default: ~/.studybloom/storage.db)
        """
        self.db_path = Path(db_path) if db_path else DEFAULT_STORAGE_DB
        self._ensure_database()

    def _ensure_database(self):
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
            """)
            conn.commit()
        finally:
            conn.close()

    def _get_connection(self) -> sqlite3.Connection:
        """Get a new database connection."""
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        return conn

    def get_raw(self, key: str) -> Optional[str]:
        """Get the stored text for a key, or None if absent."""
        conn = self._get_connection()
        try:
            row = conn.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None
        finally:
            conn.close()

    def set_raw(self, key: str, value: str):
        """Store text under a key, replacing any previous value."""
        conn = self._get_connection()
        try:
            now = datetime.now().isoformat()
            conn.execute(
                """INSERT INTO kv_store (key, value, updated_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT(key) DO UPDATE SET
                     value = ?,
                     updated_at = ?""",
                (key, value, now, value, now)
            )
            conn.commit()
        finally:
            conn.close()

    def get_json(self, key: str, default: Any = None) -> Any:
        """
        Get a decoded JSON value.

        Returns `default` when the key is missing or its value is not valid
        JSON. Corrupted values are logged, not raised.
        """
        raw = self.get_raw(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring corrupted value for {key!r}: {e}")
            return default

    def set_json(self, key: str, value: Any):
        """Encode a value as JSON and store it."""
        self.set_raw(key, json.dumps(value, ensure_ascii=False))

    def remove(self, key: str):
        """Delete a key. Missing keys are ignored."""
        conn = self._get_connection()
        try:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            conn.commit()
        finally:
            conn.close()

    def keys(self) -> list[str]:
        """List stored keys in alphabetical order."""
        conn = self._get_connection()
        try:
            cursor = conn.execute("SELECT key FROM kv_store ORDER BY key")
            return [row["key"] for row in cursor.fetchall()]
        finally:
            conn.close()
