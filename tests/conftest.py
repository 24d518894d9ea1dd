"""
Shared test fixtures for the Unisearch test suite.

Provides temporary databases, settings files, and in-memory catalogs.
Databases and settings use real file I/O (no mocking of the filesystem).
"""

import sqlite3
from datetime import datetime, timezone

import pytest
import toml

from unisearch.models import Character, UsageInfo


def day(n: int) -> datetime:
    """Midnight UTC on day n of January 2024."""
    return datetime(2024, 1, n, tzinfo=timezone.utc)


def char(codepoint: str, name: str, use_count: int = 0, last_used=None, pin=None) -> Character:
    """Build a Character; use_count > 0 or last_used attaches a usage record."""
    usage = None
    if use_count or last_used is not None:
        usage = UsageInfo(last_used=last_used, use_count=use_count)
    return Character(codepoint=codepoint, name=name, pin=pin, usage=usage)


class FakeCharacterService:
    """In-memory stand-in for CharacterService with call counters."""

    def __init__(self, characters):
        self.characters = list(characters)
        self.recorded = []
        self.get_used_calls = 0
        self.record_error = None

    async def get_all_characters(self):
        return [Character(codepoint=c.codepoint, name=c.name) for c in self.characters]

    async def get_all(self):
        return list(self.characters)

    async def get_used(self):
        self.get_used_calls += 1
        return [c for c in self.characters if c.usage is not None]

    async def record_usage(self, codepoint):
        if self.record_error is not None:
            raise self.record_error
        self.recorded.append(codepoint)


@pytest.fixture
def scenario_catalog():
    """Hot Beverage (frequent), Star (recent), Umbrella (never used)."""
    return [
        char("☕", "Hot Beverage", use_count=10, last_used=day(1)),
        char("★", "Star", use_count=1, last_used=day(9)),
        char("☂", "Umbrella"),
    ]


@pytest.fixture
def tmp_db(tmp_path):
    """Create a real SQLite database with UsageStore-compatible schema."""
    db_path = tmp_path / "usage.db"
    conn = sqlite3.connect(str(db_path))
    conn.execute("""
        CREATE TABLE IF NOT EXISTS character_usage (
            codepoint TEXT PRIMARY KEY,
            use_count INTEGER DEFAULT 0,
            last_used INTEGER,
            created_at INTEGER
        )
    """)
    conn.execute("""
        CREATE TABLE IF NOT EXISTS pinned_characters (
            codepoint TEXT PRIMARY KEY,
            pinned_at INTEGER
        )
    """)
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with a small catalog and tmp database."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "catalog": {"ranges": [[0x2600, 0x2605]]},
        "storage": {"db_path": str(tmp_path / "cli_usage.db")},
        "search": {"max_results": 20},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path
