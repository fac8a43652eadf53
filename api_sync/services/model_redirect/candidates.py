"""Candidate filtering that keeps flagship models off cheaper siblings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from api_sync.services.model_redirect.types import MatchOptions

logger = logging.getLogger(__name__)


class CandidateFilter:
    """Drop downgrade candidates for a source model name.

    ``gpt-4o`` must never be redirected to ``gpt-4o-mini`` just because the
    names share a prefix.
    """

    def __init__(self, options: MatchOptions | None = None) -> None:
        self.options = options or MatchOptions()

    def is_downgrade(self, source: str, candidate: str) -> bool:
        folded_source = self.options.fold(source)
        folded_candidate = self.options.fold(candidate)
        return (
            folded_candidate.startswith(folded_source)
            and len(candidate) > len(source)
            and folded_candidate.endswith(
                tuple(self.options.fold(suffix) for suffix in self.options.downgrade_suffixes)
            )
        )

    def filter(self, source: str, candidates: Sequence[str]) -> list[str]:
        """Return candidates admissible for ``source``, in input order."""
        eligible: list[str] = []
        for candidate in candidates:
            if self.is_downgrade(source, candidate):
                logger.debug(
                    "Excluded downgrade candidate",
                    extra={"source": source, "candidate": candidate},
                )
                continue
            eligible.append(candidate)
        return eligible
