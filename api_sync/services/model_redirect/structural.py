"""Exact, prefix and word-boundary matching for short model names."""

from __future__ import annotations

from collections.abc import Sequence

from api_sync.services.model_redirect.heuristics import (
    DEFAULT_RULES,
    ShortNameRules,
    starts_with_separated_prefix,
)
from api_sync.services.model_redirect.types import CandidateMatch, MatchOptions, MatchStage


def shortest(candidates: Sequence[str]) -> str | None:
    """Pick the shortest name, keeping the earliest one on ties."""
    if not candidates:
        return None
    return min(candidates, key=len)


class StructuralMatcher:
    """Match names like ``o3`` without falling back to substring hits.

    Tries, in order: exact equality, ``name-``/``name_`` prefix, then a
    standalone token inside the candidate. Short names are too ambiguous for
    plain containment (``o3`` is inside ``gpt-4o3-mini``).
    """

    def __init__(
        self,
        options: MatchOptions | None = None,
        rules: ShortNameRules = DEFAULT_RULES,
    ) -> None:
        self.options = options or MatchOptions()
        self.rules = rules

    def match(self, source: str, candidates: Sequence[str]) -> CandidateMatch | None:
        folded_source = self.options.fold(source)

        for candidate in candidates:
            if self.options.fold(candidate) == folded_source:
                return CandidateMatch(target=candidate, stage=MatchStage.EXACT)

        prefixed = [
            candidate
            for candidate in candidates
            if starts_with_separated_prefix(self.options.fold(candidate), folded_source)
        ]
        best = shortest(prefixed)
        if best is not None:
            return CandidateMatch(target=best, stage=MatchStage.PREFIX)

        bounded = [candidate for candidate in candidates if self.rules.word_boundary(source, candidate)]
        best = shortest(bounded)
        if best is not None:
            return CandidateMatch(target=best, stage=MatchStage.WORD_BOUNDARY)

        return None
