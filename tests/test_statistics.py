"""
Tests for usage statistics: recency cutoff, average use count, recent lists.
"""

from conftest import char, day

from unisearch.models import EPOCH
from unisearch.search.statistics import (
    average_use_count,
    compute_usage_statistics,
    most_recent_uses,
    most_recently_used,
)


class TestMostRecentUses:
    def test_sorted_most_recent_first(self):
        characters = [
            char("a", "A", use_count=1, last_used=day(2)),
            char("b", "B", use_count=1, last_used=day(7)),
            char("c", "C", use_count=1, last_used=day(4)),
        ]
        assert most_recent_uses(characters) == [day(7), day(4), day(2)]

    def test_skips_untracked_and_invalid(self):
        characters = [
            char("a", "A"),
            char("b", "B", use_count=1, last_used="not a timestamp"),
            char("c", "C", use_count=1, last_used=day(3)),
        ]
        assert most_recent_uses(characters) == [day(3)]


class TestMostRecentlyUsed:
    def test_only_tracked_most_recent_first(self):
        characters = [
            char("a", "A", use_count=1, last_used=day(1)),
            char("b", "B"),
            char("c", "C", use_count=1, last_used=day(8)),
        ]
        assert [c.codepoint for c in most_recently_used(characters)] == ["c", "a"]


class TestAverageUseCount:
    def test_mean_over_tracked(self):
        characters = [
            char("a", "A", use_count=10, last_used=day(1)),
            char("b", "B", use_count=1, last_used=day(9)),
            char("c", "C"),
        ]
        assert average_use_count(characters) == 5.5

    def test_zero_when_nothing_tracked(self):
        assert average_use_count([char("a", "A")]) == 0.0
        assert average_use_count([]) == 0.0


class TestComputeUsageStatistics:
    def test_cutoff_is_third_most_recent(self):
        characters = [
            char(str(n), f"C{n}", use_count=1, last_used=day(n))
            for n in (1, 5, 3, 9, 7)
        ]
        assert compute_usage_statistics(characters).top_third_recently_used == day(5)

    def test_fewer_than_three_defaults_to_epoch(self):
        characters = [
            char("a", "A", use_count=1, last_used=day(1)),
            char("b", "B", use_count=1, last_used=day(2)),
        ]
        statistics = compute_usage_statistics(characters)
        assert statistics.top_third_recently_used == EPOCH
        assert statistics.average_use_count == 1.0

    def test_empty(self):
        statistics = compute_usage_statistics([])
        assert statistics.top_third_recently_used == EPOCH
        assert statistics.average_use_count == 0.0
