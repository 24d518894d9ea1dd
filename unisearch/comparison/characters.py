"""
Character comparators - Usage-aware ordering of catalog characters.

Tracked characters (those with a usage record) come before untracked ones.
Among tracked characters, the most recently used come first, then the most
often used. Name order is the final tiebreak.
"""

from unisearch.comparison.order import (
    Order,
    compare_dates,
    compare_nullable,
    compare_numbers,
    inverse,
    parse_timestamp,
)
from unisearch.models import Character, UsageInfo


def compare_usage_tracked_characters(left: UsageInfo, right: UsageInfo) -> Order:
    """Most recent first, then most used first."""
    # Missing timestamps stay last; only present ones are inverted.
    last_used = compare_nullable(
        parse_timestamp(left.last_used),
        parse_timestamp(right.last_used),
        lambda l, r: inverse(compare_dates(l, r)),
    )

    if last_used != Order.EQUAL:
        return last_used

    return inverse(compare_numbers(left.use_count, right.use_count))


def compare_unicode_names(left: Character, right: Character) -> Order:
    """Ordinal comparison of names, then of codepoints."""
    for l, r in ((left.name, right.name), (left.codepoint, right.codepoint)):
        if l < r:
            return Order.LESS
        if l > r:
            return Order.GREATER
    return Order.EQUAL


def compare_usage(left: Character, right: Character) -> Order:
    """Tracked before untracked; tracked pairs by recency then frequency."""
    return compare_nullable(left.usage, right.usage, compare_usage_tracked_characters)


def compare_characters(left: Character, right: Character) -> Order:
    """Total order over characters: usage first, names as the tiebreak."""
    order = compare_usage(left, right)
    if order != Order.EQUAL:
        return order
    return compare_unicode_names(left, right)
