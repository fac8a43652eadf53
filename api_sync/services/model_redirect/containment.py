"""Shortest-containing-candidate matching for longer model names."""

from __future__ import annotations

from collections.abc import Sequence

from api_sync.services.model_redirect.structural import shortest
from api_sync.services.model_redirect.types import CandidateMatch, MatchOptions, MatchStage


class ContainmentMatcher:
    """Prefer the tightest candidate that embeds the whole source name.

    ``claude-4-sonnet`` resolves to ``claude-4-sonnet-20241120`` rather than a
    longer ``...-thinking`` variant.
    """

    def __init__(self, options: MatchOptions | None = None) -> None:
        self.options = options or MatchOptions()

    def match(self, source: str, candidates: Sequence[str]) -> CandidateMatch | None:
        folded_source = self.options.fold(source)
        containing = [
            candidate for candidate in candidates if folded_source in self.options.fold(candidate)
        ]
        best = shortest(containing)
        if best is None:
            return None
        return CandidateMatch(target=best, stage=MatchStage.CONTAINMENT)
