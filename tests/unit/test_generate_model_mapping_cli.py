"""Tests for the generate_model_mapping CLI helpers."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from api_sync.config import settings
from api_sync.core.exceptions import ModelListFormatError
from scripts import generate_model_mapping as cli


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "setup_logging", lambda: None)


def test_load_model_names_reads_openai_models_payload(tmp_path: Path) -> None:
    path = tmp_path / "models.json"
    path.write_text(
        json.dumps({"object": "list", "data": [{"id": "gpt-4o"}, {"id": "o3-turbo"}]}),
        encoding="utf-8",
    )

    assert cli.load_model_names(path) == ["gpt-4o", "o3-turbo"]


def test_load_model_names_reads_yaml_and_text(tmp_path: Path) -> None:
    yaml_path = tmp_path / "standard.yaml"
    yaml_path.write_text("models:\n  - gpt-4o\n  - o3\n", encoding="utf-8")
    text_path = tmp_path / "actual.txt"
    text_path.write_text("# upstream\ngpt-4o\n\n  o3-turbo  \n", encoding="utf-8")

    assert cli.load_model_names(yaml_path) == ["gpt-4o", "o3"]
    assert cli.load_model_names(text_path) == ["gpt-4o", "o3-turbo"]


@pytest.mark.parametrize(
    ("filename", "content"),
    [
        ("bad.json", "{oops"),
        ("bad.json", '{"object": "list"}'),
        ("bad.json", '["gpt-4o", 3]'),
        ("bad.yaml", "models: gpt-4o"),
    ],
)
def test_load_model_names_rejects_invalid_lists(
    tmp_path: Path,
    filename: str,
    content: str,
) -> None:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ModelListFormatError):
        cli.load_model_names(path)


def test_main_prints_mapping_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    standard_path = tmp_path / "standard.txt"
    standard_path.write_text("o3\ngpt-4o\nclaude-4-opus\n", encoding="utf-8")
    actual_path = tmp_path / "actual.json"
    actual_path.write_text('["o3-turbo", "gpt-4o", "gpt-4o-mini"]', encoding="utf-8")

    rc = cli.main(["--actual-path", str(actual_path), "--standard-path", str(standard_path)])

    captured = capsys.readouterr()
    assert rc == 0
    assert json.loads(captured.out) == {"o3": "o3-turbo"}
    assert "standard=3 exact=1 redirected=1 unmatched=1" in captured.err
    assert "unmatched: claude-4-opus" in captured.err


def test_main_uses_configured_standard_models(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    actual_path = tmp_path / "actual.txt"
    actual_path.write_text("o3-turbo\n", encoding="utf-8")
    original_standard = settings.standard_models

    try:
        settings.standard_models = ["o3", "o3"]
        rc = cli.main(["--actual-path", str(actual_path)])
    finally:
        settings.standard_models = original_standard

    assert rc == 0
    assert json.loads(capsys.readouterr().out) == {"o3": "o3-turbo"}


def test_main_writes_merged_mapping_to_output(tmp_path: Path) -> None:
    standard_path = tmp_path / "standard.txt"
    standard_path.write_text("o3\n", encoding="utf-8")
    actual_path = tmp_path / "actual.txt"
    actual_path.write_text("o3-turbo\n", encoding="utf-8")
    existing_path = tmp_path / "existing.json"
    existing_path.write_text('{"custom": "custom-target", "o3": "o3-old"}', encoding="utf-8")
    output_path = tmp_path / "out" / "mapping.json"

    rc = cli.main(
        [
            "--actual-path",
            str(actual_path),
            "--standard-path",
            str(standard_path),
            "--existing-mapping",
            str(existing_path),
            "--output",
            str(output_path),
        ]
    )

    assert rc == 0
    assert json.loads(output_path.read_text(encoding="utf-8")) == {
        "custom": "custom-target",
        "o3": "o3-turbo",
    }
    assert not output_path.with_suffix(".json.tmp").exists()


def test_main_report_includes_outcomes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    standard_path = tmp_path / "standard.txt"
    standard_path.write_text("gpt-4o\no3\n", encoding="utf-8")
    actual_path = tmp_path / "actual.txt"
    actual_path.write_text("gpt-4o\no3-turbo\n", encoding="utf-8")

    rc = cli.main(
        ["--actual-path", str(actual_path), "--standard-path", str(standard_path), "--report"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert rc == 0
    assert payload["summary"]["exact"] == 1
    assert [match["outcome"] for match in payload["matches"]] == ["exact", "redirected"]


def test_main_returns_error_for_missing_file(
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    rc = cli.main(["--actual-path", str(tmp_path / "missing.json")])

    assert rc == 1
    assert "Failed to load model lists" in capsys.readouterr().err
