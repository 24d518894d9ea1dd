"""
Pin Panel - Choose which characters always show first.

Sections:
- Recently Used: every used character, most recent first
- Most Often Used: characters used more often than average
"""

from dataclasses import dataclass

from unisearch.models import Character
from unisearch.search.statistics import average_use_count, most_recently_used
from unisearch.services.catalog import CharacterService

SECTION_RECENT = "Recently Used"
SECTION_OFTEN = "Most Often Used"


@dataclass
class PinEntry:
    character: Character
    pinned: bool


class PinPanel:
    """Lists pin candidates and toggles pins through the CharacterService."""

    def __init__(self, character_service: CharacterService):
        self.character_service = character_service

    async def sections(self) -> list[tuple[str, list[PinEntry]]]:
        used = await self.character_service.get_used()

        recent = most_recently_used(used)

        average = average_use_count(used)
        often = [c for c in recent if c.usage.use_count > average]

        return [
            (SECTION_RECENT, [self._entry(c) for c in recent]),
            (SECTION_OFTEN, [self._entry(c) for c in often]),
        ]

    @staticmethod
    def _entry(character: Character) -> PinEntry:
        return PinEntry(character=character, pinned=character.is_pinned)

    async def toggle(self, codepoint: str, pinned: bool) -> bool:
        if pinned:
            return await self.character_service.pin(codepoint)
        return await self.character_service.unpin(codepoint)
