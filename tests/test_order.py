"""
Tests for the order primitives and timestamp parsing policy.
"""

import math
from datetime import datetime, timedelta, timezone
from functools import cmp_to_key

from unisearch.comparison.order import (
    Order,
    compare_booleans,
    compare_dates,
    compare_nullable,
    compare_numbers,
    inverse,
    parse_timestamp,
)


class TestInverse:
    def test_flips_less_and_greater(self):
        assert inverse(Order.LESS) == Order.GREATER
        assert inverse(Order.GREATER) == Order.LESS

    def test_keeps_equal(self):
        assert inverse(Order.EQUAL) == Order.EQUAL


class TestCompareNullable:
    def test_both_none_is_equal(self):
        assert compare_nullable(None, None, compare_numbers) == Order.EQUAL

    def test_present_sorts_before_absent(self):
        assert compare_nullable(1, None, compare_numbers) == Order.LESS
        assert compare_nullable(None, 1, compare_numbers) == Order.GREATER

    def test_delegates_when_both_present(self):
        assert compare_nullable(1, 2, compare_numbers) == Order.LESS
        assert compare_nullable(2, 1, lambda l, r: inverse(compare_numbers(l, r))) == Order.LESS

    def test_usable_as_sort_key(self):
        values = [3, None, 1, None, 2]
        ordered = sorted(values, key=cmp_to_key(lambda l, r: compare_nullable(l, r, compare_numbers)))
        assert ordered == [1, 2, 3, None, None]


class TestCompareNumbers:
    def test_ascending(self):
        assert compare_numbers(1, 2) == Order.LESS
        assert compare_numbers(2, 2) == Order.EQUAL
        assert compare_numbers(3, 2) == Order.GREATER

    def test_nan_sorts_last(self):
        assert compare_numbers(1.0, math.nan) == Order.LESS
        assert compare_numbers(math.nan, 1.0) == Order.GREATER
        assert compare_numbers(math.nan, math.nan) == Order.EQUAL


class TestCompareBooleans:
    def test_false_before_true(self):
        assert compare_booleans(False, True) == Order.LESS
        assert compare_booleans(True, True) == Order.EQUAL
        assert inverse(compare_booleans(True, False)) == Order.LESS


class TestParseTimestamp:
    def test_naive_datetime_is_utc(self):
        parsed = parse_timestamp(datetime(2024, 1, 2, 3, 4, 5))
        assert parsed == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_aware_datetime_is_converted(self):
        plus_two = timezone(timedelta(hours=2))
        parsed = parse_timestamp(datetime(2024, 1, 2, 12, tzinfo=plus_two))
        assert parsed == datetime(2024, 1, 2, 10, tzinfo=timezone.utc)

    def test_unix_seconds(self):
        assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert parse_timestamp("86400") == datetime(1970, 1, 2, tzinfo=timezone.utc)

    def test_iso_strings(self):
        assert parse_timestamp("2024-01-09T00:00:00Z") == datetime(2024, 1, 9, tzinfo=timezone.utc)
        assert parse_timestamp("2024-01-09") == datetime(2024, 1, 9, tzinfo=timezone.utc)

    def test_invalid_values_are_none(self):
        assert parse_timestamp(None) is None
        assert parse_timestamp("") is None
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(math.nan) is None
        assert parse_timestamp(True) is None
        assert parse_timestamp(object()) is None


class TestCompareDates:
    def test_ascending(self):
        assert compare_dates("2024-01-01", "2024-01-02") == Order.LESS

    def test_mixed_representations(self):
        assert compare_dates(0, "1970-01-01T00:00:00+00:00") == Order.EQUAL

    def test_invalid_sorts_last(self):
        assert compare_dates("2024-01-01", "garbage") == Order.LESS
        assert compare_dates("garbage", None) == Order.EQUAL
