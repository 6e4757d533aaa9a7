"""Input/output helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TextIO

import yaml
from pydantic import ValidationError

from json_convert.errors import ConfigError, InputNotFoundError, JsonParseError, OutputWriteError
from json_convert.models.convert_options import ConvertOptions
from json_convert.models.dataset import Dataset


logger = logging.getLogger(__name__)


def reject_constant(name: str) -> None:
    # NaN, Infinity and -Infinity are not JSON.
    raise JsonParseError(f"failed to decode JSON data: invalid literal {name}")


def load_dataset(path: Path) -> Dataset:
    if not path.is_file():
        raise InputNotFoundError(str(path))

    try:
        raw = json.loads(path.read_text(encoding="utf-8"), parse_constant=reject_constant)
    except json.JSONDecodeError as exc:
        raise JsonParseError(f"failed to decode JSON data: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise JsonParseError(f"failed to open JSON file: {exc}") from exc

    if not isinstance(raw, list):
        raise JsonParseError(
            f"failed to decode JSON data: expected an array of objects, got {type(raw).__name__}"
        )
    try:
        dataset = Dataset(source_path=str(path), records=raw)
    except ValidationError as exc:
        raise JsonParseError(
            f"failed to decode JSON data: every array element must be an object ({exc.error_count()} invalid)"
        ) from exc

    logger.info("Loaded %d records from %s", len(dataset.records), path)
    return dataset


def load_options(path: Path, overrides: dict[str, object] | None = None) -> ConvertOptions:
    """
    Reads a YAML mapping of ConvertOptions fields; `overrides` wins over file values.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")
    merged = {**raw, **(overrides or {})}
    return build_options(merged)


def build_options(values: dict[str, object]) -> ConvertOptions:
    try:
        return ConvertOptions.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid options: {exc}") from exc


def default_output_path(input_path: Path, format_id: str) -> Path:
    return input_path.with_suffix(f".{format_id}")


def open_output(path: Path) -> TextIO:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.open("w", encoding="utf-8", newline="")
    except OSError as exc:
        raise OutputWriteError(f"failed to create output file {path}: {exc}") from exc
