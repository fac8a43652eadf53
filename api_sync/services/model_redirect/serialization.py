"""Flat JSON codec for a channel's ``model_mapping`` field."""

from __future__ import annotations

import json
from collections.abc import Mapping

from api_sync.core.exceptions import ModelMappingFormatError


def dump_model_mapping(mapping: Mapping[str, str]) -> str:
    """Render a redirect table as the flat JSON object the gateway expects."""
    return json.dumps(dict(mapping), ensure_ascii=False)


def load_model_mapping(raw: str | None) -> dict[str, str]:
    """Parse an existing ``model_mapping`` value; blank means no redirects."""
    if raw is None or not raw.strip():
        return {}

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ModelMappingFormatError(str(exc)) from exc

    if not isinstance(payload, dict):
        raise ModelMappingFormatError("root must be a JSON object")

    mapping: dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            raise ModelMappingFormatError(f"value for {key!r} must be a string")
        mapping[key] = value
    return mapping


def merge_model_mapping(
    existing: Mapping[str, str] | None,
    generated: Mapping[str, str],
) -> dict[str, str]:
    """Overlay generated redirects on a channel's existing mapping."""
    merged = dict(existing or {})
    merged.update(generated)
    return merged
