import json
from pathlib import Path

import pytest

from json_convert.errors import ConfigError, InputNotFoundError, JsonParseError, OutputWriteError
from json_convert.io_utils import build_options, default_output_path, load_dataset, load_options, open_output


def write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_dataset_keeps_order_and_types(tmp_path: Path) -> None:
    path = tmp_path / "in.json"
    path.write_text('[{"b": 1, "a": 2.0, "c": {"z": null, "y": [true]}}]', encoding="utf-8")

    dataset = load_dataset(path)

    assert dataset.source_path == str(path)
    assert dataset.records == [{"b": 1, "a": 2.0, "c": {"z": None, "y": [True]}}]
    assert list(dataset.records[0]) == ["b", "a", "c"]
    assert isinstance(dataset.records[0]["b"], int)
    assert isinstance(dataset.records[0]["a"], float)


def test_load_dataset_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputNotFoundError) as excinfo:
        load_dataset(tmp_path / "missing.json")

    assert isinstance(excinfo.value, FileNotFoundError)


def test_load_dataset_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(JsonParseError):
        load_dataset(path)


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_load_dataset_rejects_non_json_constants(tmp_path: Path, literal: str) -> None:
    path = tmp_path / "constant.json"
    path.write_text(f'[{{"a": {literal}}}]', encoding="utf-8")

    with pytest.raises(JsonParseError) as excinfo:
        load_dataset(path)

    assert literal in str(excinfo.value)


@pytest.mark.parametrize("payload", [{"a": 1}, "text", 3, [1, 2], [{"a": 1}, ["nested"]]])
def test_load_dataset_rejects_non_object_arrays(tmp_path: Path, payload: object) -> None:
    path = write_json(tmp_path / "shape.json", payload)

    with pytest.raises(JsonParseError):
        load_dataset(path)


def test_load_dataset_accepts_empty_array(tmp_path: Path) -> None:
    path = write_json(tmp_path / "empty.json", [])

    assert load_dataset(path).records == []


def test_default_output_path_replaces_extension() -> None:
    assert default_output_path(Path("data/people.json"), "md") == Path("data/people.md")
    assert default_output_path(Path("people"), "csv") == Path("people.csv")
    assert default_output_path(Path("archive.2024.json"), "sql") == Path("archive.2024.sql")


def test_load_options_merges_overrides(tmp_path: Path) -> None:
    config = tmp_path / "convert.yaml"
    config.write_text("format: SQL\ntable_name: people\nflatten: true\n", encoding="utf-8")

    options = load_options(config, {"table_name": "staff"})

    assert options.format == "sql"
    assert options.table_name == "staff"
    assert options.flatten is True
    assert options.sort_keys is False


def test_load_options_empty_file(tmp_path: Path) -> None:
    config = tmp_path / "empty.yaml"
    config.write_text("", encoding="utf-8")

    assert load_options(config).format == "csv"


@pytest.mark.parametrize(
    "content",
    [
        "- a\n- b\n",
        "format: [unclosed\n",
        "delimiter: ';;'\n",
        "table: people\n",
    ],
)
def test_load_options_invalid(tmp_path: Path, content: str) -> None:
    config = tmp_path / "bad.yaml"
    config.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_options(config)


def test_load_options_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_options(tmp_path / "nope.yaml")


def test_build_options_rejects_bad_types() -> None:
    with pytest.raises(ConfigError):
        build_options({"flatten": "maybe"})


def test_open_output_creates_parent(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "out.txt"

    with open_output(target) as stream:
        stream.write("ok")

    assert target.read_text(encoding="utf-8") == "ok"


def test_open_output_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(OutputWriteError):
        open_output(blocker / "out.txt")


@pytest.mark.parametrize("delimiter", ['"', "\n", "\r"])
def test_build_options_rejects_unsafe_delimiters(delimiter: str) -> None:
    with pytest.raises(ConfigError):
        build_options({"delimiter": delimiter})
