"""Collapse nested JSON records into dotted-path flat records."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, MutableMapping


def flatten_into(record: Mapping[str, Any], prefix: str, output: MutableMapping[str, Any]) -> None:
    """
    Writes every leaf of `record` into `output` under its dotted path.
    Sequence elements are keyed by their index, so `{"c": [10]}` becomes `{"c.0": 10}`.
    """
    for key, value in record.items():
        full_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            flatten_into(value, full_key, output)
        elif isinstance(value, list):
            for index, item in enumerate(value):
                flatten_into({str(index): item}, full_key, output)
        else:
            output[full_key] = value


def flatten_record(record: Mapping[str, Any]) -> dict[str, Any]:
    flat: dict[str, Any] = {}
    flatten_into(record, "", flat)
    return flat


def flatten_records(records: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    return [flatten_record(record) for record in records]
