"""
Usage Store - Persist character usage statistics and pins in SQLite.

Each insertion of a character bumps its use count and sets its last-used
time. Pinned characters are kept in a separate table keyed by codepoint;
the pin value is the pin time in nanoseconds, which doubles as pin order.

Invariant kept here: a row in character_usage always has use_count >= 1
and a non-null last_used.
"""

import sqlite3
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from unisearch.comparison.order import parse_timestamp
from unisearch.models import UsageInfo

DEFAULT_DB_PATH = Path.home() / ".local" / "share" / "unisearch" / "usage.db"


class UsageStore:
    """
    SQLite-backed record of character usage and pins.

    Methods:
        record_usage(codepoint): Count one insertion of a character
        get_usage(): Usage records keyed by codepoint
        pin(codepoint) / unpin(codepoint): Manage pinned characters
        get_pins(): Pin order keyed by codepoint
    """

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = Path(db_path or DEFAULT_DB_PATH).expanduser()
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        # Persistent connection with WAL mode for better concurrency
        self._conn = sqlite3.connect(str(self.db_path))
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._init_database()
        logger.debug(f"UsageStore initialized with db at {self.db_path}")

    def _init_database(self):
        """Create database schema if it doesn't exist."""
        cursor = self._conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS character_usage (
                codepoint TEXT PRIMARY KEY,
                use_count INTEGER DEFAULT 0,
                last_used INTEGER,
                created_at INTEGER
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS pinned_characters (
                codepoint TEXT PRIMARY KEY,
                pinned_at INTEGER
            )
        """)

        self._conn.commit()

    def record_usage(self, codepoint: str) -> None:
        """
        Record one insertion of a character.

        Args:
            codepoint: The inserted character

        Raises:
            sqlite3.Error: Callers log it and carry on; the insertion
                itself has already happened.
        """
        now = int(time.time())

        cursor = self._conn.cursor()
        cursor.execute("""
            INSERT INTO character_usage (codepoint, use_count, last_used, created_at)
            VALUES (?, 1, ?, ?)
            ON CONFLICT(codepoint) DO UPDATE SET
                use_count = use_count + 1,
                last_used = excluded.last_used
        """, (codepoint, now, now))
        self._conn.commit()

        logger.debug(f"Recorded usage for U+{ord(codepoint[0]):04X}")

    def get_usage(self) -> dict[str, UsageInfo]:
        """
        Get usage records for every used character.

        Returns:
            Mapping of codepoint to UsageInfo. Unparseable timestamps
            come back as last_used=None.
        """
        cursor = self._conn.cursor()
        cursor.execute("""
            SELECT codepoint, use_count, last_used
            FROM character_usage
            WHERE use_count > 0
        """)

        return {
            codepoint: UsageInfo(last_used=parse_timestamp(last_used), use_count=use_count)
            for codepoint, use_count, last_used in cursor.fetchall()
        }

    def get_pins(self) -> dict[str, int]:
        """Pin order (pin time in nanoseconds) keyed by codepoint."""
        cursor = self._conn.cursor()
        cursor.execute("SELECT codepoint, pinned_at FROM pinned_characters ORDER BY pinned_at")
        return dict(cursor.fetchall())

    def pin(self, codepoint: str) -> bool:
        """
        Pin a character. Pinning an already pinned character keeps its order.

        Returns:
            True on success, False if the database write failed
        """
        try:
            # pinned_at strictly increases even if the clock does not
            self._conn.execute("""
                INSERT OR IGNORE INTO pinned_characters (codepoint, pinned_at)
                SELECT ?, MAX(?, COALESCE(MAX(pinned_at), 0) + 1) FROM pinned_characters
            """, (codepoint, time.time_ns()))
            self._conn.commit()
        except sqlite3.Error:
            logger.exception(f"Failed to pin {codepoint!r}")
            return False
        return True

    def unpin(self, codepoint: str) -> bool:
        """Unpin a character. Returns False if the database write failed."""
        try:
            self._conn.execute("DELETE FROM pinned_characters WHERE codepoint = ?", (codepoint,))
            self._conn.commit()
        except sqlite3.Error:
            logger.exception(f"Failed to unpin {codepoint!r}")
            return False
        return True

    def clear_usage(self, codepoint: Optional[str] = None) -> bool:
        """
        Clear usage statistics.

        Args:
            codepoint: If provided, clear only this character's stats.
                       If None, clear all stats.
        """
        try:
            if codepoint:
                self._conn.execute("DELETE FROM character_usage WHERE codepoint = ?", (codepoint,))
            else:
                self._conn.execute("DELETE FROM character_usage")
            self._conn.commit()
        except sqlite3.Error:
            logger.exception(f"Failed to clear usage for {codepoint or 'all characters'}")
            return False
        return True

    def close(self) -> None:
        self._conn.close()

