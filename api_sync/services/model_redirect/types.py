"""Domain types for model redirect matching."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MatchOutcome(str, Enum):
    """Per standard model result of a mapping run."""

    EXACT = "exact"
    REDIRECTED = "redirected"
    UNMATCHED = "unmatched"


class MatchStage(str, Enum):
    """Matching phase that produced a redirect target."""

    EXACT = "exact"
    PREFIX = "prefix"
    WORD_BOUNDARY = "word_boundary"
    CONTAINMENT = "containment"
    DISTANCE = "distance"


DEFAULT_DOWNGRADE_SUFFIXES: tuple[str, ...] = ("-mini", "-nano", "-lite")
DEFAULT_SHORT_NAME_MAX_LENGTH = 3


@dataclass(slots=True, frozen=True)
class MatchOptions:
    """Tunables shared by every matching phase."""

    case_sensitive: bool = False
    short_name_max_length: int = DEFAULT_SHORT_NAME_MAX_LENGTH
    downgrade_suffixes: tuple[str, ...] = DEFAULT_DOWNGRADE_SUFFIXES

    def fold(self, value: str) -> str:
        """Apply the case policy to a name before comparison."""
        return value if self.case_sensitive else value.lower()

    def is_short(self, name: str) -> bool:
        return len(name) <= self.short_name_max_length


@dataclass(slots=True, frozen=True)
class CandidateMatch:
    """A single matcher hit for one source name."""

    target: str
    stage: MatchStage
    distance: int = 0


@dataclass(slots=True, frozen=True)
class ModelMatch:
    """Resolved outcome for a single standard model."""

    standard_model: str
    outcome: MatchOutcome
    target: str | None = None
    stage: MatchStage | None = None
    distance: int | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize match to JSON-compatible dict."""
        return {
            "standard_model": self.standard_model,
            "outcome": self.outcome.value,
            "target": self.target,
            "stage": self.stage.value if self.stage is not None else None,
            "distance": self.distance,
        }


@dataclass(slots=True)
class MappingResult:
    """Ordered tri-state result of one mapping run."""

    matches: list[ModelMatch] = field(default_factory=list)

    @property
    def mapping(self) -> dict[str, str]:
        """Flat standard -> actual table with redirects only."""
        return {
            match.standard_model: match.target
            for match in self.matches
            if match.outcome is MatchOutcome.REDIRECTED and match.target is not None
        }

    @property
    def exact(self) -> list[str]:
        return [m.standard_model for m in self.matches if m.outcome is MatchOutcome.EXACT]

    @property
    def redirected(self) -> list[str]:
        return [m.standard_model for m in self.matches if m.outcome is MatchOutcome.REDIRECTED]

    @property
    def unmatched(self) -> list[str]:
        return [m.standard_model for m in self.matches if m.outcome is MatchOutcome.UNMATCHED]

    def get(self, standard_model: str) -> ModelMatch | None:
        """Look up the match recorded for a standard model."""
        for match in self.matches:
            if match.standard_model == standard_model:
                return match
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize result payload."""
        return {
            "mapping": self.mapping,
            "summary": {
                "standard": len(self.matches),
                "exact": len(self.exact),
                "redirected": len(self.redirected),
                "unmatched": len(self.unmatched),
            },
            "matches": [match.to_dict() for match in self.matches],
        }
