"""Base classes shared by the format writers."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, TextIO

from json_convert.display import ABSENT, to_display_string
from json_convert.errors import EmptyInputError
from json_convert.flattener import flatten_records
from json_convert.models.convert_options import ConvertOptions


logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


def path_sort_key(key: str) -> tuple[tuple[int, int | str], ...]:
    """Orders dotted paths segment by segment, numeric segments by value: "tags.2" < "tags.10"."""
    return tuple((0, int(part)) if part.isdecimal() else (1, part) for part in key.split("."))


class RecordWriter:
    format_id: str = ""
    requires_records: bool = True
    # yaml keeps nested structure even when flattening is requested.
    accepts_flat_records: bool = True

    def __init__(self, options: ConvertOptions | None = None) -> None:
        self.options: ConvertOptions = options or ConvertOptions(format=self.format_id)

    def check(self, records: Sequence[Record]) -> None:
        if self.requires_records and not records:
            raise EmptyInputError(self.format_id)

    def prepare(self, records: Sequence[Record]) -> Sequence[Record]:
        if self.options.flatten and self.accepts_flat_records:
            logger.debug("Flattening %d records for %s output", len(records), self.format_id)
            return flatten_records(records)
        return records

    def render(self, records: Sequence[Record], stream: TextIO) -> None:
        self.check(records)
        self.write(self.prepare(records), stream)

    def write(self, records: Sequence[Record], stream: TextIO) -> None:
        raise NotImplementedError("RecordWriter.write must be implemented by subclasses.")

    def keys_of(self, record: Record) -> list[str]:
        keys = list(record.keys())
        return sorted(keys, key=path_sort_key) if self.options.sort_keys else keys


class TabularWriter(RecordWriter):
    """Writer whose columns come from the first record only."""

    def headers(self, records: Sequence[Record]) -> list[str]:
        headers = self.keys_of(records[0])
        known = set(headers)
        for index, record in enumerate(records[1:], start=1):
            dropped = [key for key in record if key not in known]
            if dropped:
                logger.debug("Record %d has fields outside the header set: %s", index, dropped)
        return headers

    def row(self, record: Record, headers: Sequence[str]) -> list[str]:
        return [to_display_string(record[key]) if key in record else ABSENT for key in headers]
