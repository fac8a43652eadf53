"""Short-name validity heuristics used to gate fuzzy model matches.

These predicates encode naming conventions seen across provider catalogs
(``claude-4-sonnet`` ~ ``c4``, ``o3`` ~ ``o3-mini-high``). They are bundled in
:class:`ShortNameRules` so a caller can swap a rule without touching the
distance matcher.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

SEGMENT_SEPARATORS = re.compile(r"[-_.]")
PREFIX_SEPARATORS = ("-", "_")

NamePredicate = Callable[[str, str], bool]


def split_segments(name: str) -> list[str]:
    """Split a model name on ``-``, ``_`` and ``.``, dropping empty segments."""
    return [segment for segment in SEGMENT_SEPARATORS.split(name) if segment]


def starts_with_separated_prefix(name: str, prefix: str) -> bool:
    """Whether ``name`` starts with ``prefix`` followed by ``-`` or ``_``."""
    return any(name.startswith(prefix + separator) for separator in PREFIX_SEPARATORS)


def is_word_boundary_match(needle: str, haystack: str) -> bool:
    """Check whether ``needle`` appears in ``haystack`` as a standalone token.

    A token is bounded on both sides by the string edges or a
    non-alphanumeric character. Comparison is case-insensitive.
    """
    if not needle:
        return False

    needle = needle.lower()
    haystack = haystack.lower()
    start = haystack.find(needle)
    while start != -1:
        end = start + len(needle)
        left_ok = start == 0 or not haystack[start - 1].isalnum()
        right_ok = end == len(haystack) or not haystack[end].isalnum()
        if left_ok and right_ok:
            return True
        start = haystack.find(needle, start + 1)
    return False


def version_abbreviation(name: str) -> str:
    """Abbreviate a name to segment initials plus their version digits.

    ``claude-4-sonnet`` -> ``c4s``, ``gpt4-turbo`` -> ``g4t``.
    """
    parts: list[str] = []
    for segment in split_segments(name):
        for index, char in enumerate(segment):
            if char.isalnum():
                digits = "".join(c for c in segment[index + 1 :] if c.isdigit())
                parts.append(char + digits)
                break
    return "".join(parts)


def initials_abbreviation(name: str) -> str:
    """Abbreviate a name to the first character of each segment."""
    return "".join(segment[0] for segment in split_segments(name))


def _overlaps(left: str, right: str) -> bool:
    if not left or not right:
        return False
    return left == right or left in right or right in left


def is_version_related_match(long_name: str, short_candidate: str) -> bool:
    """Match a short name against the version abbreviation of a long name."""
    abbreviation = version_abbreviation(long_name).lower()
    return _overlaps(abbreviation, short_candidate.lower())


def is_reasonable_abbreviation(short_source: str, long_target: str) -> bool:
    """Match a short name against the segment initials of a long name."""
    abbreviation = initials_abbreviation(long_target).lower()
    return _overlaps(abbreviation, short_source.lower())


def is_valid_short_target_match(long_source: str, short_target: str) -> bool:
    """Whether a long source name may be redirected to a very short target."""
    return (
        is_word_boundary_match(short_target, long_source)
        or starts_with_separated_prefix(long_source, short_target)
        or is_version_related_match(long_source, short_target)
    )


def is_valid_short_source_match(short_source: str, long_target: str) -> bool:
    """Whether a very short source name may be redirected to a long target."""
    return (
        is_word_boundary_match(short_source, long_target)
        or starts_with_separated_prefix(long_target, short_source)
        or is_version_related_match(long_target, short_source)
        or is_reasonable_abbreviation(short_source, long_target)
    )


@dataclass(slots=True, frozen=True)
class ShortNameRules:
    """Pluggable predicates consulted by the structural and distance matchers."""

    word_boundary: NamePredicate = is_word_boundary_match
    short_target: NamePredicate = is_valid_short_target_match
    short_source: NamePredicate = is_valid_short_source_match


DEFAULT_RULES = ShortNameRules()
