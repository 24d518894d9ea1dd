"""
Search package - Query matching, usage statistics, and search sessions.
"""

from .cache import ReadCache
from .matching import match_against_query, matched_name_or_codepoint, to_hexadecimal, to_null_match
from .session import SearchSession
from .statistics import average_use_count, compute_usage_statistics, most_recent_uses, most_recently_used

__all__ = [
    "ReadCache",
    "SearchSession",
    "match_against_query",
    "matched_name_or_codepoint",
    "to_hexadecimal",
    "to_null_match",
    "average_use_count",
    "compute_usage_statistics",
    "most_recent_uses",
    "most_recently_used",
]
