"""
Character Service - The Unicode catalog joined with usage history and pins.

The static catalog is built from the unicodedata module once per service.
Usage and pins are read from the UsageStore on every call so that a new
search session always sees the latest history.
"""

import unicodedata
from typing import Callable, Iterable, Optional, Sequence

from loguru import logger

from unisearch.models import Character
from unisearch.services.usage import UsageStore

DEFAULT_RANGES = ((0x0020, 0x2FFFF),)

# Control, surrogate, private use, unassigned
SKIPPED_CATEGORIES = {"Cc", "Cs", "Co", "Cn"}


def load_unicode_catalog(ranges: Iterable[Sequence[int]] = DEFAULT_RANGES) -> list[Character]:
    """
    Build the character catalog from unicodedata.

    Args:
        ranges: Inclusive (first, last) codepoint ranges to scan

    Returns:
        Named characters in codepoint order
    """
    characters = []
    for first, last in ranges:
        for value in range(first, last + 1):
            char = chr(value)
            if unicodedata.category(char) in SKIPPED_CATEGORIES:
                continue
            name = unicodedata.name(char, "")
            if name:
                characters.append(Character(codepoint=char, name=name.title()))

    logger.debug(f"Loaded Unicode catalog with {len(characters)} characters")
    return characters


class CharacterService:
    """
    Catalog provider for search sessions.

    Methods:
        get_all_characters(): Static catalog, no usage data
        get_all(): Catalog with usage records and pins attached
        get_used(): Only the characters with a usage record
        record_usage(codepoint), pin(codepoint), unpin(codepoint)
    """

    def __init__(
        self,
        usage_store: UsageStore,
        catalog_loader: Optional[Callable[[], list[Character]]] = None,
    ):
        self.usage_store = usage_store
        self._catalog_loader = catalog_loader or load_unicode_catalog
        self._catalog: Optional[list[Character]] = None

    async def get_all_characters(self) -> list[Character]:
        if self._catalog is None:
            self._catalog = list(self._catalog_loader())
        return self._catalog

    async def get_all(self) -> list[Character]:
        """Every catalog character, with usage and pin attached where known."""
        usage = self.usage_store.get_usage()
        pins = self.usage_store.get_pins()

        return [
            Character(
                codepoint=character.codepoint,
                name=character.name,
                pin=pins.get(character.codepoint),
                usage=usage.get(character.codepoint),
            )
            for character in await self.get_all_characters()
        ]

    async def get_used(self) -> list[Character]:
        return [c for c in await self.get_all() if c.is_usage_tracked]

    async def get_character(self, codepoint: str) -> Optional[Character]:
        for character in await self.get_all():
            if character.codepoint == codepoint:
                return character
        return None

    async def record_usage(self, codepoint: str) -> None:
        self.usage_store.record_usage(codepoint)

    async def pin(self, codepoint: str) -> bool:
        return self.usage_store.pin(codepoint)

    async def unpin(self, codepoint: str) -> bool:
        return self.usage_store.unpin(codepoint)
