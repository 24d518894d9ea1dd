"""
Search Panel - Text rendering of ranked suggestions.

Each row shows:
- The character itself
- Its name with matched spans highlighted
- Its hex codepoint, only when the query hit the codepoint
- "recent" / "frequent" badges from the session's usage statistics

The panel never reorders what the session returns; it only truncates.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence

from unisearch.comparison.matches import is_frequently_used, is_recently_used
from unisearch.models import CharacterMatch, Span, UsageDisplayStatistics
from unisearch.search.matching import to_hexadecimal
from unisearch.search.session import SearchSession

BADGE_RECENT = "recent"
BADGE_FREQUENT = "frequent"


def render_matches(text: str, spans: Sequence[Span], marker: tuple[str, str] = ("[", "]")) -> str:
    """
    Wrap each matched span of text in markers.

    Example:
        >>> render_matches("Hot Beverage", [(0, 3)])
        '[Hot] Beverage'
    """
    opening, closing = marker
    parts = []
    position = 0
    for start, end in sorted(spans):
        parts.append(text[position:start])
        parts.append(f"{opening}{text[start:end]}{closing}")
        position = end
    parts.append(text[position:])
    return "".join(parts)


@dataclass
class SuggestionRow:
    """One rendered suggestion."""
    preview: str
    name: str
    codepoint: str = ""
    badges: list[str] = field(default_factory=list)
    match: Optional[CharacterMatch] = None


class SearchPanel:
    """
    Presentation wrapper around a SearchSession.

    Args:
        session: Session that ranks suggestions
        max_results: Number of rows to show (0 shows all)
    """

    def __init__(self, session: SearchSession, max_results: int = 100):
        self.session = session
        self.max_results = max_results

    async def get_rows(self, query: str) -> list[SuggestionRow]:
        matches = await self.session.get_suggestions(query)
        if self.max_results:
            matches = matches[:self.max_results]

        statistics = await self.session.usage_statistics.get_value()
        return [self._to_row(match, statistics) for match in matches]

    def _to_row(self, match: CharacterMatch, statistics: UsageDisplayStatistics) -> SuggestionRow:
        character = match.character

        badges = []
        if is_recently_used(character, statistics):
            badges.append(BADGE_RECENT)
        if is_frequently_used(character, statistics):
            badges.append(BADGE_FREQUENT)

        codepoint = ""
        if match.codepoint.matched:
            codepoint = render_matches(to_hexadecimal(character), match.codepoint.spans)

        return SuggestionRow(
            preview=character.codepoint,
            name=render_matches(character.name, match.name.spans),
            codepoint=codepoint,
            badges=badges,
            match=match,
        )

    async def choose(self, row: SuggestionRow) -> None:
        await self.session.choose(row.match)

    async def placeholder(self) -> str:
        return await self.session.placeholder()

    @staticmethod
    def format_row(row: SuggestionRow) -> str:
        """Single-line text form of a row."""
        line = f"{row.preview}  {row.name}"
        if row.codepoint:
            line += f"  U+{row.codepoint}"
        if row.badges:
            line += "  (" + ", ".join(row.badges) + ")"
        return line
