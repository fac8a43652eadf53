"""Generate a channel model_mapping from standard and advertised model lists."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml

from api_sync.config import settings
from api_sync.core.exceptions import ApiSyncError, ModelListFormatError
from api_sync.core.logging import setup_logging
from api_sync.services.model_redirect import (
    MappingBuilder,
    MappingResult,
    dump_model_mapping,
    load_model_mapping,
    merge_model_mapping,
    options_from_settings,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--actual-path",
        required=True,
        help="Models advertised by the channel (JSON, YAML, or one name per line)",
    )
    parser.add_argument(
        "--standard-path",
        help="Standard model names (default: STANDARD_MODELS setting)",
    )
    parser.add_argument(
        "--existing-mapping",
        help="Existing model_mapping JSON to merge generated redirects into",
    )
    parser.add_argument(
        "--output",
        help="Write the mapping JSON here instead of stdout",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print the per-model exact/redirected/unmatched report",
    )
    return parser.parse_args(argv)


def _resolve(path_value: str) -> Path:
    path = Path(path_value)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def _names_from_payload(payload: Any, source: str) -> list[str]:
    if isinstance(payload, dict):
        # OpenAI-compatible /v1/models response or {"models": [...]}
        if isinstance(payload.get("data"), list):
            payload = [
                item.get("id") if isinstance(item, dict) else item
                for item in payload["data"]
            ]
        elif isinstance(payload.get("models"), list):
            payload = payload["models"]
        else:
            raise ModelListFormatError(source, "expected a 'data' or 'models' list")

    if not isinstance(payload, list):
        raise ModelListFormatError(source, "expected a list of model names")

    names: list[str] = []
    for item in payload:
        if not isinstance(item, str) or not item.strip():
            raise ModelListFormatError(source, f"invalid model name: {item!r}")
        names.append(item.strip())
    return names


def load_model_names(path: Path) -> list[str]:
    """Load a model name list from JSON, YAML, or a plain text file."""
    source = str(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ModelListFormatError(source, str(exc)) from exc

    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ModelListFormatError(source, str(exc)) from exc
        return _names_from_payload(payload, source)

    if suffix in (".yaml", ".yml"):
        try:
            payload = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ModelListFormatError(source, str(exc)) from exc
        return _names_from_payload(payload or [], source)

    return [
        line.strip()
        for line in text.splitlines()
        if line.strip() and not line.strip().startswith("#")
    ]


def write_mapping_atomically(output_path: Path, payload: str) -> None:
    """Persist mapping JSON atomically (write temp + rename)."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = output_path.with_suffix(output_path.suffix + ".tmp")
    tmp_path.write_text(payload + "\n", encoding="utf-8")
    tmp_path.replace(output_path)


def summarize(result: MappingResult) -> str:
    return (
        "Model mapping generated: "
        f"standard={len(result.matches)} exact={len(result.exact)} "
        f"redirected={len(result.redirected)} unmatched={len(result.unmatched)}"
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    args = parse_args(argv)
    setup_logging()

    try:
        actual_models = load_model_names(_resolve(args.actual_path))
        if args.standard_path:
            standard_models = load_model_names(_resolve(args.standard_path))
        else:
            standard_models = settings.get_standard_models()

        existing: dict[str, str] = {}
        if args.existing_mapping:
            existing_path = _resolve(args.existing_mapping)
            try:
                existing = load_model_mapping(existing_path.read_text(encoding="utf-8"))
            except OSError as exc:
                raise ModelListFormatError(str(existing_path), str(exc)) from exc
    except ApiSyncError as exc:
        print(f"Failed to load model lists: {exc.message}", file=sys.stderr)
        return 1

    result = MappingBuilder(options_from_settings()).build(standard_models, actual_models)
    mapping = merge_model_mapping(existing, result.mapping)

    if args.report:
        payload = json.dumps({**result.to_dict(), "mapping": mapping}, indent=2, ensure_ascii=False)
    else:
        payload = dump_model_mapping(mapping)

    if args.output:
        write_mapping_atomically(_resolve(args.output), payload)
    else:
        print(payload)

    print(summarize(result), file=sys.stderr)
    for standard_model in result.unmatched:
        print(f"  - unmatched: {standard_model}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
