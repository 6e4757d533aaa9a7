"""Plain `key: value` text output."""

from __future__ import annotations

from typing import Sequence, TextIO

from json_convert.display import to_display_string
from json_convert.writers.base import Record, RecordWriter


class TxtWriter(RecordWriter):
    format_id = "txt"

    def write(self, records: Sequence[Record], stream: TextIO) -> None:
        # Each record lists its own keys; there is no shared header.
        for record in records:
            for key in self.keys_of(record):
                stream.write(f"{key}: {to_display_string(record[key])}\n")
            stream.write("\n")
