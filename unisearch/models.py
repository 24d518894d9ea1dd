"""
Data model - Characters, usage records, and query matches.

A Character either carries a UsageInfo record (usage-tracked) or not.
Ranking code branches on that single None check instead of on types.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional

Span = tuple[int, int]

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


@dataclass(frozen=True)
class UsageInfo:
    """Usage statistics for one character."""
    last_used: Optional[datetime] = None
    use_count: int = 0


@dataclass(frozen=True)
class Character:
    """A catalog entry. pin holds the pin order, or None when unpinned."""
    codepoint: str
    name: str
    pin: Optional[int] = None
    usage: Optional[UsageInfo] = None

    @property
    def is_usage_tracked(self) -> bool:
        return self.usage is not None

    @property
    def is_pinned(self) -> bool:
        return self.pin is not None


@dataclass(frozen=True)
class TextMatch:
    """
    Match of a query against one text field.

    spans are half-open [start, end) ranges into the matched text.
    A score of None marks the null match used when there is no query.
    """
    spans: tuple[Span, ...] = ()
    score: Optional[float] = None

    @property
    def matched(self) -> bool:
        return len(self.spans) > 0


NULL_TEXT_MATCH = TextMatch()
NO_TEXT_MATCH = TextMatch(spans=(), score=0.0)


@dataclass(frozen=True)
class CharacterMatch:
    """A character paired with its name and codepoint matches."""
    character: Character
    name: TextMatch = NULL_TEXT_MATCH
    codepoint: TextMatch = NULL_TEXT_MATCH

    @property
    def score(self) -> Optional[float]:
        """Best score among the fields that matched, None if none did."""
        scores = [m.score for m in (self.name, self.codepoint) if m.matched and m.score is not None]
        return max(scores) if scores else None

    def with_scores(self, name: TextMatch, codepoint: TextMatch) -> "CharacterMatch":
        return replace(self, name=name, codepoint=codepoint)


@dataclass(frozen=True)
class UsageDisplayStatistics:
    """Thresholds for the recent/frequent tier, computed once per session."""
    top_third_recently_used: datetime = field(default=EPOCH)
    average_use_count: float = 0.0


@dataclass(frozen=True)
class CharacterInfo:
    """Row returned by the remote character lookup."""
    code: str
    description: str
