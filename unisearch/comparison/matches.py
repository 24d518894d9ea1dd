"""
Match ranking - Final ordering of search candidates.

Comparison pipeline (first non-EQUAL result wins):
  1. Pinned characters first
  2. Stronger text match first (no-op in browse mode)
  3. Recent-or-frequent tier first
  4. Usage order: recency, then use count
  5. Name, then codepoint
"""

from functools import cmp_to_key
from typing import Iterable

from unisearch.comparison.characters import compare_unicode_names, compare_usage
from unisearch.comparison.order import (
    Order,
    compare_booleans,
    compare_nullable,
    compare_numbers,
    inverse,
    parse_timestamp,
)
from unisearch.models import Character, CharacterMatch, TextMatch, UsageDisplayStatistics

DEFAULT_MATCH_SCORE = 0.0


def is_recently_used(character: Character, statistics: UsageDisplayStatistics) -> bool:
    if character.usage is None:
        return False
    last_used = parse_timestamp(character.usage.last_used)
    return last_used is not None and last_used >= statistics.top_third_recently_used


def is_frequently_used(character: Character, statistics: UsageDisplayStatistics) -> bool:
    if character.usage is None:
        return False
    return character.usage.use_count >= statistics.average_use_count


def is_boosted(character: Character, statistics: UsageDisplayStatistics) -> bool:
    """Whether the character lands in the recent-or-frequent tier."""
    return is_recently_used(character, statistics) or is_frequently_used(character, statistics)


def compare_pinned(left: Character, right: Character) -> Order:
    return compare_nullable(left.pin, right.pin, lambda l, r: Order.EQUAL)


def compare_match_scores(left: CharacterMatch, right: CharacterMatch) -> Order:
    return compare_nullable(left.score, right.score, lambda l, r: inverse(compare_numbers(l, r)))


def compare_character_matches(
    left: CharacterMatch,
    right: CharacterMatch,
    statistics: UsageDisplayStatistics,
) -> Order:
    """
    Compare two search candidates.

    Args:
        left: Left candidate
        right: Right candidate
        statistics: Recency cutoff and average use count for the tier step

    Returns:
        LESS if left should be listed before right
    """
    order = compare_pinned(left.character, right.character)
    if order != Order.EQUAL:
        return order

    order = compare_match_scores(left, right)
    if order != Order.EQUAL:
        return order

    order = inverse(compare_booleans(
        is_boosted(left.character, statistics),
        is_boosted(right.character, statistics),
    ))
    if order != Order.EQUAL:
        return order

    order = compare_usage(left.character, right.character)
    if order != Order.EQUAL:
        return order

    return compare_unicode_names(left.character, right.character)


def rank_and_order(
    candidates: Iterable[CharacterMatch],
    statistics: UsageDisplayStatistics,
) -> list[CharacterMatch]:
    """Sort candidates best first. Does not mutate the input."""
    return sorted(
        candidates,
        key=cmp_to_key(lambda l, r: compare_character_matches(l, r, statistics)),
    )


def _filled(match: TextMatch) -> TextMatch:
    if match.score is not None:
        return match
    return TextMatch(spans=match.spans, score=DEFAULT_MATCH_SCORE)


def fill_null_character_match_scores(match: CharacterMatch) -> CharacterMatch:
    """Replace null-match scores with DEFAULT_MATCH_SCORE. Apply after sorting."""
    return match.with_scores(name=_filled(match.name), codepoint=_filled(match.codepoint))
