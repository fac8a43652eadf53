"""Unit tests for the channel model_mapping JSON codec."""

import pytest

from api_sync.core.exceptions import ModelMappingFormatError
from api_sync.services.model_redirect import (
    dump_model_mapping,
    load_model_mapping,
    merge_model_mapping,
)


def test_dump_model_mapping_is_flat_json_in_insertion_order() -> None:
    payload = dump_model_mapping({"o3": "o3-turbo", "claude-4-sonnet": "claude-4-sonnet-20241120"})

    assert payload == '{"o3": "o3-turbo", "claude-4-sonnet": "claude-4-sonnet-20241120"}'


def test_dump_model_mapping_keeps_non_ascii() -> None:
    assert dump_model_mapping({"通义千问": "qwen-max"}) == '{"通义千问": "qwen-max"}'


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_load_model_mapping_treats_blank_as_empty(raw: str | None) -> None:
    assert load_model_mapping(raw) == {}


def test_load_model_mapping_parses_object() -> None:
    assert load_model_mapping('{"gpt-4o": "gpt-4o-2024-08-06"}') == {"gpt-4o": "gpt-4o-2024-08-06"}


@pytest.mark.parametrize(
    "raw",
    [
        "{not json",
        '["gpt-4o"]',
        '{"gpt-4o": 1}',
    ],
)
def test_load_model_mapping_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(ModelMappingFormatError):
        load_model_mapping(raw)


def test_merge_model_mapping_prefers_generated_entries() -> None:
    existing = {"gpt-4o": "manual-gpt-4o", "custom": "custom-target"}
    generated = {"gpt-4o": "gpt-4o-2024-08-06"}

    merged = merge_model_mapping(existing, generated)

    assert merged == {"gpt-4o": "gpt-4o-2024-08-06", "custom": "custom-target"}
    assert existing["gpt-4o"] == "manual-gpt-4o"
    assert merge_model_mapping(None, generated) == generated
