"""
Usage statistics - Thresholds for the recent/frequent ranking tier.

  top_third_recently_used: last_used of the 3rd most recent character,
                           epoch zero when fewer than 3 have timestamps
  average_use_count:       mean use_count over usage-tracked characters
"""

from datetime import datetime
from functools import cmp_to_key
from typing import Iterable

from unisearch.comparison.characters import compare_characters
from unisearch.comparison.order import parse_timestamp
from unisearch.models import EPOCH, Character, UsageDisplayStatistics

RECENT_RANK = 3


def most_recent_uses(characters: Iterable[Character]) -> list[datetime]:
    """Valid last_used timestamps, most recent first."""
    uses = []
    for character in characters:
        if character.usage is None:
            continue
        last_used = parse_timestamp(character.usage.last_used)
        if last_used is not None:
            uses.append(last_used)
    return sorted(uses, reverse=True)


def most_recently_used(characters: Iterable[Character]) -> list[Character]:
    """Usage-tracked characters, most recent first."""
    tracked = [c for c in characters if c.is_usage_tracked]
    return sorted(tracked, key=cmp_to_key(compare_characters))


def average_use_count(characters: Iterable[Character]) -> float:
    counts = [c.usage.use_count for c in characters if c.is_usage_tracked]
    if not counts:
        return 0.0
    return sum(counts) / len(counts)


def compute_usage_statistics(used_characters: Iterable[Character]) -> UsageDisplayStatistics:
    """Build the per-session ranking thresholds from the used characters."""
    used = list(used_characters)
    uses = most_recent_uses(used)
    cutoff = uses[RECENT_RANK - 1] if len(uses) >= RECENT_RANK else EPOCH

    return UsageDisplayStatistics(
        top_third_recently_used=cutoff,
        average_use_count=average_use_count(used),
    )
