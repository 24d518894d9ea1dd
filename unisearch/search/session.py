"""
Search Session - One open search prompt, from first keystroke to choice.

Usage statistics are computed lazily on first use and reused for every
keystroke in the session. Open a new session to see fresh statistics.
"""

import random
from typing import Callable, Optional

from loguru import logger

from unisearch.comparison.matches import fill_null_character_match_scores, rank_and_order
from unisearch.models import CharacterMatch, UsageDisplayStatistics
from unisearch.search.cache import ReadCache
from unisearch.search.matching import (
    is_empty_query,
    matched_name_or_codepoint,
    to_null_match,
    to_search_query_match,
)
from unisearch.search.statistics import compute_usage_statistics
from unisearch.services.catalog import CharacterService

PLACEHOLDER_TEMPLATE = "Unicode search: {name}"


class SearchSession:
    """
    Ranks catalog characters for each query of one search prompt.

    Args:
        character_service: Catalog provider and usage recorder
        insert: Called with the chosen character; writes it into the document
    """

    def __init__(
        self,
        character_service: CharacterService,
        insert: Optional[Callable[[str], None]] = None,
    ):
        self.character_service = character_service
        self.insert = insert
        self.usage_statistics: ReadCache[UsageDisplayStatistics] = ReadCache(self._compute_statistics)

    async def _compute_statistics(self) -> UsageDisplayStatistics:
        used = await self.character_service.get_used()
        return compute_usage_statistics(used)

    async def get_suggestions(self, query: Optional[str]) -> list[CharacterMatch]:
        """
        Matching characters for the query, best first.

        An empty query lists every catalog character.
        """
        all_characters = await self.character_service.get_all()

        if is_empty_query(query):
            prepared = [to_null_match(c) for c in all_characters]
        else:
            prepared = [
                match for match in map(to_search_query_match(query), all_characters)
                if matched_name_or_codepoint(match)
            ]

        statistics = await self.usage_statistics.get_value()
        ranked = rank_and_order(prepared, statistics)
        return [fill_null_character_match_scores(match) for match in ranked]

    async def choose(self, match: CharacterMatch) -> None:
        """Insert the chosen character, then record its usage."""
        codepoint = match.character.codepoint
        if self.insert is not None:
            self.insert(codepoint)

        try:
            await self.character_service.record_usage(codepoint)
        except Exception:
            logger.exception(f"Failed to record character usage for {codepoint!r}")

    async def placeholder(self) -> str:
        """Prompt text naming a random catalog character."""
        characters = await self.character_service.get_all_characters()
        if not characters:
            return PLACEHOLDER_TEMPLATE.format(name="")
        return PLACEHOLDER_TEMPLATE.format(name=random.choice(characters).name)
