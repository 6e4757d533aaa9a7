"""Format writers keyed by output format identifier."""

from __future__ import annotations

import io
from typing import Any, Mapping, Sequence, TextIO

from json_convert.errors import UnsupportedFormatError
from json_convert.models.convert_options import ConvertOptions
from json_convert.writers.base import RecordWriter, TabularWriter
from json_convert.writers.csv_writer import CsvWriter
from json_convert.writers.markdown_writer import MarkdownWriter
from json_convert.writers.sql_writer import SqlWriter
from json_convert.writers.txt_writer import TxtWriter
from json_convert.writers.yaml_writer import YamlWriter

WRITERS: dict[str, type[RecordWriter]] = {
    writer.format_id: writer for writer in (CsvWriter, TxtWriter, MarkdownWriter, SqlWriter, YamlWriter)
}

SUPPORTED_FORMATS: list[str] = list(WRITERS)


def get_writer(format_id: str) -> type[RecordWriter]:
    writer = WRITERS.get(format_id)
    if writer is None:
        raise UnsupportedFormatError(format_id, SUPPORTED_FORMATS)
    return writer


def render(
    records: Sequence[Mapping[str, Any]],
    stream: TextIO,
    options: ConvertOptions | None = None,
) -> None:
    options = options or ConvertOptions()
    writer = get_writer(options.format)(options)
    writer.render(records, stream)


def render_to_string(records: Sequence[Mapping[str, Any]], options: ConvertOptions | None = None) -> str:
    buffer = io.StringIO()
    render(records, buffer, options)
    return buffer.getvalue()


__all__ = [
    "CsvWriter",
    "MarkdownWriter",
    "RecordWriter",
    "SUPPORTED_FORMATS",
    "SqlWriter",
    "TabularWriter",
    "TxtWriter",
    "WRITERS",
    "YamlWriter",
    "get_writer",
    "render",
    "render_to_string",
]
