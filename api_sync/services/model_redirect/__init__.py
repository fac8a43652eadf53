"""Standard -> actual model name redirect matching."""

from api_sync.services.model_redirect.builder import (
    MappingBuilder,
    generate_model_mapping,
    options_from_settings,
)
from api_sync.services.model_redirect.heuristics import DEFAULT_RULES, ShortNameRules
from api_sync.services.model_redirect.serialization import (
    dump_model_mapping,
    load_model_mapping,
    merge_model_mapping,
)
from api_sync.services.model_redirect.types import (
    MappingResult,
    MatchOptions,
    MatchOutcome,
    MatchStage,
    ModelMatch,
)

__all__ = [
    "DEFAULT_RULES",
    "MappingBuilder",
    "MappingResult",
    "MatchOptions",
    "MatchOutcome",
    "MatchStage",
    "ModelMatch",
    "ShortNameRules",
    "dump_model_mapping",
    "generate_model_mapping",
    "load_model_mapping",
    "merge_model_mapping",
    "options_from_settings",
]
