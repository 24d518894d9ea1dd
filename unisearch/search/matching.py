"""
Query matching - Find where a query hits a character's name or codepoint.

Name matching: every whitespace-separated query token must appear
(case-insensitively) in the name. Codepoint matching: the query, minus an
optional "U+" or "0x" prefix, must appear in the hexadecimal codepoint.

Spans come from plain substring search. Scores come from rapidfuzz so that
exact and short names beat long names containing the same text.
"""

from typing import Optional

from rapidfuzz import fuzz
from rapidfuzz.utils import default_process

from unisearch.models import NO_TEXT_MATCH, Character, CharacterMatch, Span, TextMatch

CODEPOINT_PREFIXES = ("u+", "0x")


def to_hexadecimal(character: Character) -> str:
    """Upper-case hex codepoint, zero-padded to four digits (e.g. "2615")."""
    return "-".join(f"{ord(c):04X}" for c in character.codepoint)


def is_empty_query(query: Optional[str]) -> bool:
    return query is None or not query.strip()


def to_null_match(character: Character) -> CharacterMatch:
    """Browse-mode match: no spans, null scores."""
    return CharacterMatch(character=character)


def _merge_spans(spans: list[Span]) -> tuple[Span, ...]:
    merged: list[Span] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return tuple(merged)


def match_name(query: str, name: str) -> TextMatch:
    """Match all query tokens against the name."""
    haystack = name.lower()
    spans = []
    for token in query.lower().split():
        position = haystack.find(token)
        if position < 0:
            return NO_TEXT_MATCH
        spans.append((position, position + len(token)))

    if not spans:
        return NO_TEXT_MATCH

    score = fuzz.WRatio(query, name, processor=default_process)
    return TextMatch(spans=_merge_spans(spans), score=score)


def match_codepoint(query: str, hexadecimal: str) -> TextMatch:
    """Match the query against the hexadecimal codepoint."""
    needle = query.strip().lower()
    if needle.startswith(CODEPOINT_PREFIXES):
        needle = needle[2:]

    if not needle or any(c.isspace() for c in needle):
        return NO_TEXT_MATCH

    position = hexadecimal.lower().find(needle)
    if position < 0:
        return NO_TEXT_MATCH

    score = fuzz.ratio(needle, hexadecimal.lower())
    return TextMatch(spans=((position, position + len(needle)),), score=score)


def match_against_query(character: Character, query: Optional[str]) -> CharacterMatch:
    """
    Match one character against a search query.

    Args:
        character: Catalog character
        query: Search text; empty or blank means browse mode

    Returns:
        CharacterMatch. Use matched_name_or_codepoint() to decide whether
        the character belongs in the results.
    """
    if is_empty_query(query):
        return to_null_match(character)

    return CharacterMatch(
        character=character,
        name=match_name(query, character.name),
        codepoint=match_codepoint(query, to_hexadecimal(character)),
    )


def to_search_query_match(query: str):
    """Bind a query for use with map()."""
    return lambda character: match_against_query(character, query)


def matched_name_or_codepoint(match: CharacterMatch) -> bool:
    return match.name.matched or match.codepoint.matched
