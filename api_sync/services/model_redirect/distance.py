"""Edit-distance fallback matching with short-name admissibility gating."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rapidfuzz.distance import Levenshtein

from api_sync.services.model_redirect.heuristics import DEFAULT_RULES, ShortNameRules
from api_sync.services.model_redirect.types import CandidateMatch, MatchOptions, MatchStage

logger = logging.getLogger(__name__)


def windowed_distance(source: str, candidate: str) -> int:
    """Minimum edit distance between ``source`` and any same-length window of ``candidate``.

    Candidates shorter than the source are compared whole. This tolerates
    trailing date/version suffixes such as ``gpt-4-0613``.
    """
    if len(candidate) < len(source):
        return Levenshtein.distance(source, candidate)

    width = len(source)
    best = width
    for start in range(len(candidate) - width + 1):
        best = min(best, Levenshtein.distance(source, candidate[start : start + width]))
        if best == 0:
            break
    return best


def acceptance_threshold(source: str) -> int:
    """Largest distance still accepted as a redirect for ``source``."""
    return len(source) // 2


class DistanceMatcher:
    """Pick the closest candidate by windowed edit distance."""

    def __init__(
        self,
        options: MatchOptions | None = None,
        rules: ShortNameRules = DEFAULT_RULES,
    ) -> None:
        self.options = options or MatchOptions()
        self.rules = rules

    def is_admissible(self, source: str, candidate: str) -> bool:
        """Apply length-asymmetry gating before a candidate is scored."""
        short_limit = self.options.short_name_max_length
        if len(candidate) <= short_limit and len(source) > 2 * len(candidate):
            return self.rules.short_target(source, candidate)
        if len(source) <= short_limit and len(candidate) > 3 * len(source):
            return self.rules.short_source(source, candidate)
        return True

    def match(self, source: str, candidates: Sequence[str]) -> CandidateMatch | None:
        folded_source = self.options.fold(source)
        best_candidate: str | None = None
        best_distance: int | None = None

        for candidate in candidates:
            folded_candidate = self.options.fold(candidate)
            if not self.is_admissible(folded_source, folded_candidate):
                logger.debug(
                    "Rejected inadmissible distance candidate",
                    extra={"source": source, "candidate": candidate},
                )
                continue

            distance = windowed_distance(folded_source, folded_candidate)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                best_candidate = candidate

        if best_candidate is None or best_distance is None:
            return None

        if best_distance > acceptance_threshold(source):
            logger.debug(
                "Closest candidate too far from source",
                extra={
                    "source": source,
                    "candidate": best_candidate,
                    "distance": best_distance,
                },
            )
            return None

        return CandidateMatch(
            target=best_candidate,
            stage=MatchStage.DISTANCE,
            distance=best_distance,
        )
