"""YAML output of the unflattened records."""

from __future__ import annotations

from typing import Sequence, TextIO

import yaml

from json_convert.writers.base import Record, RecordWriter


class YamlWriter(RecordWriter):
    format_id = "yaml"
    requires_records = False
    accepts_flat_records = False

    def write(self, records: Sequence[Record], stream: TextIO) -> None:
        yaml.safe_dump(
            [dict(record) for record in records],
            stream,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=self.options.sort_keys,
        )
