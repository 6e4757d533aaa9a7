"""Pipe table output."""

from __future__ import annotations

from typing import Sequence, TextIO

from json_convert.writers.base import Record, TabularWriter


def markdown_row(cells: Sequence[str]) -> str:
    # Pipes inside cells are written as-is.
    return "| " + " | ".join(cells) + " |"


class MarkdownWriter(TabularWriter):
    format_id = "md"

    def write(self, records: Sequence[Record], stream: TextIO) -> None:
        headers = self.headers(records)
        lines = [markdown_row(headers), markdown_row(["---"] * len(headers))]
        lines.extend(markdown_row(self.row(record, headers)) for record in records)
        stream.write("\n".join(lines) + "\n")
