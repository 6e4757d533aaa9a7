"""SQL INSERT statement output."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence, TextIO

from json_convert.writers.base import Record, TabularWriter

DEFAULT_TABLE_NAME = "records"
IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def derive_table_name(path: Path | str) -> str:
    """
    Builds a table name from a file's base name: "sales-2024.json" -> "sales_2024".
    """
    stem = Path(path).stem
    name = re.sub(r"\W+", "_", stem).strip("_")
    if not name:
        return DEFAULT_TABLE_NAME
    if name[0].isdigit():
        return f"t_{name}"
    return name


def quote_identifier(name: str) -> str:
    if IDENTIFIER_RE.match(name):
        return name
    return '"' + name.replace('"', '""') + '"'


def quote_literal(text: str) -> str:
    return "'" + text.replace("'", "''") + "'"


class SqlWriter(TabularWriter):
    format_id = "sql"

    @property
    def table_name(self) -> str:
        return self.options.table_name or DEFAULT_TABLE_NAME

    def write(self, records: Sequence[Record], stream: TextIO) -> None:
        headers = self.headers(records)
        table = quote_identifier(self.table_name)
        columns = ", ".join(quote_identifier(header) for header in headers)
        for record in records:
            values = ", ".join(quote_literal(cell) for cell in self.row(record, headers))
            stream.write(f"INSERT INTO {table} ({columns}) VALUES ({values});\n")
