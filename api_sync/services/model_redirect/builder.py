"""Build standard -> actual model redirect tables for a channel."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from api_sync.config import settings
from api_sync.services.model_redirect.candidates import CandidateFilter
from api_sync.services.model_redirect.containment import ContainmentMatcher
from api_sync.services.model_redirect.distance import DistanceMatcher
from api_sync.services.model_redirect.heuristics import DEFAULT_RULES, ShortNameRules
from api_sync.services.model_redirect.structural import StructuralMatcher
from api_sync.services.model_redirect.types import (
    CandidateMatch,
    MappingResult,
    MatchOptions,
    MatchOutcome,
    ModelMatch,
)

logger = logging.getLogger(__name__)


def options_from_settings() -> MatchOptions:
    """Build matcher options from application settings."""
    return MatchOptions(
        case_sensitive=settings.model_redirect_case_sensitive,
        short_name_max_length=settings.model_redirect_short_name_max_length,
        downgrade_suffixes=tuple(settings.model_redirect_downgrade_suffixes),
    )


class MappingBuilder:
    """Resolve every standard model name against a channel's actual models.

    Names already served verbatim get no entry. The rest go through
    downgrade filtering, then structural (short names) or containment
    matching, then the edit-distance fallback.
    """

    def __init__(
        self,
        options: MatchOptions | None = None,
        rules: ShortNameRules = DEFAULT_RULES,
    ) -> None:
        self.options = options or MatchOptions()
        self.candidate_filter = CandidateFilter(self.options)
        self.structural = StructuralMatcher(self.options, rules)
        self.containment = ContainmentMatcher(self.options)
        self.distance = DistanceMatcher(self.options, rules)

    def find_best_match(self, source: str, actual_models: Sequence[str]) -> CandidateMatch | None:
        """Find the redirect target for one source name, if any."""
        candidates = self.candidate_filter.filter(source, actual_models)
        if not candidates:
            logger.warning(
                "No non-downgrade candidates for model",
                extra={"standard_model": source},
            )
            return None

        if self.options.is_short(source):
            match = self.structural.match(source, candidates)
        else:
            match = self.containment.match(source, candidates)
        if match is not None:
            return match

        return self.distance.match(source, candidates)

    def build(
        self,
        standard_models: Sequence[str] | None,
        actual_models: Sequence[str] | None,
    ) -> MappingResult:
        """Resolve all standard models, preserving their input order."""
        result = MappingResult()
        if not standard_models or not actual_models:
            return result

        available = set(actual_models)
        seen: set[str] = set()

        for standard_model in standard_models:
            if not standard_model or not standard_model.strip() or standard_model in seen:
                continue
            seen.add(standard_model)

            if standard_model in available:
                result.matches.append(
                    ModelMatch(standard_model=standard_model, outcome=MatchOutcome.EXACT)
                )
                continue

            match = self.find_best_match(standard_model, actual_models)
            if match is None:
                logger.warning(
                    "No redirect target found for model",
                    extra={"standard_model": standard_model},
                )
                result.matches.append(
                    ModelMatch(standard_model=standard_model, outcome=MatchOutcome.UNMATCHED)
                )
                continue

            logger.debug(
                "Resolved model redirect",
                extra={
                    "standard_model": standard_model,
                    "target": match.target,
                    "stage": match.stage.value,
                    "distance": match.distance,
                },
            )
            result.matches.append(
                ModelMatch(
                    standard_model=standard_model,
                    outcome=MatchOutcome.REDIRECTED,
                    target=match.target,
                    stage=match.stage,
                    distance=match.distance,
                )
            )

        logger.info(
            "Model mapping built",
            extra={
                "standard": len(result.matches),
                "exact": len(result.exact),
                "redirected": len(result.redirected),
                "unmatched": len(result.unmatched),
            },
        )
        return result


def generate_model_mapping(
    standard_models: Sequence[str] | None,
    actual_models: Sequence[str] | None,
    options: MatchOptions | None = None,
) -> dict[str, str]:
    """Return the flat redirect table for a channel's model list."""
    builder = MappingBuilder(options or options_from_settings())
    return builder.build(standard_models, actual_models).mapping
