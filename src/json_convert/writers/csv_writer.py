"""Delimited text output."""

from __future__ import annotations

import csv
from typing import Sequence, TextIO

from json_convert.writers.base import Record, TabularWriter


class CsvWriter(TabularWriter):
    format_id = "csv"

    def write(self, records: Sequence[Record], stream: TextIO) -> None:
        headers = self.headers(records)
        writer = csv.writer(stream, delimiter=self.options.delimiter, lineterminator="\n")
        writer.writerow(headers)
        for record in records:
            writer.writerow(self.row(record, headers))
