"""
Order primitives - Three-valued comparison results and combinators.

Every comparator in Unisearch returns an Order. Because Order is an IntEnum
with values -1/0/1, any comparator can be handed to functools.cmp_to_key.

Absent-value policy:
  - None sorts after any present value (compare_nullable)
  - NaN numbers and unparseable timestamps count as absent
"""

import math
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class Order(IntEnum):
    """Result of comparing two values."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def inverse(order: Order) -> Order:
    """Flip LESS and GREATER, keep EQUAL."""
    return Order(-int(order))


def compare_nullable(
    left: Optional[T],
    right: Optional[T],
    compare_both_present: Callable[[T, T], Order],
) -> Order:
    """
    Compare two optional values, ranking present values ahead of absent ones.

    Args:
        left: Left value or None
        right: Right value or None
        compare_both_present: Comparator used when neither side is None

    Returns:
        EQUAL if both are None, LESS if only right is None,
        GREATER if only left is None, otherwise the delegate's result
    """
    if left is None and right is None:
        return Order.EQUAL
    if left is None:
        return Order.GREATER
    if right is None:
        return Order.LESS
    return compare_both_present(left, right)


def _ascending(left: Any, right: Any) -> Order:
    if left < right:
        return Order.LESS
    if left > right:
        return Order.GREATER
    return Order.EQUAL


def _present_number(value: Optional[float]) -> Optional[float]:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return None
    return value


def compare_numbers(left: Optional[float], right: Optional[float]) -> Order:
    """Ascending numeric comparison; None and NaN sort last."""
    return compare_nullable(_present_number(left), _present_number(right), _ascending)


def compare_booleans(left: bool, right: bool) -> Order:
    """False before True. Invert to put True first."""
    return _ascending(bool(left), bool(right))


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Normalize a timestamp to an aware UTC datetime.

    Accepts datetimes (naive ones are taken as UTC), unix seconds as int,
    float or numeric string, and ISO-8601 strings. Anything else, including
    NaN and out-of-range values, yields None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            try:
                return parse_timestamp(datetime.fromisoformat(text.replace("Z", "+00:00")))
            except ValueError:
                return None

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    return None


def compare_dates(left: Any, right: Any) -> Order:
    """Ascending date comparison; missing or invalid timestamps sort last."""
    return compare_nullable(parse_timestamp(left), parse_timestamp(right), _ascending)
