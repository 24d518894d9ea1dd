# Unisearch Comparison Package
"""
Comparators used to order characters and search matches.
"""

from .characters import compare_characters, compare_unicode_names, compare_usage_tracked_characters
from .matches import compare_character_matches, fill_null_character_match_scores, rank_and_order
from .order import Order, compare_dates, compare_nullable, compare_numbers, inverse

__all__ = [
    "Order",
    "inverse",
    "compare_nullable",
    "compare_numbers",
    "compare_dates",
    "compare_characters",
    "compare_unicode_names",
    "compare_usage_tracked_characters",
    "compare_character_matches",
    "rank_and_order",
    "fill_null_character_match_scores",
]
