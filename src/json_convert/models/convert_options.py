"""Pydantic model for conversion settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

# A delimiter equal to one of these makes csv output unreadable.
FORBIDDEN_DELIMITERS = {'"', "\r", "\n"}


class ConvertOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: str = "csv"  # "csv", "txt", "md", "sql" or "yaml"
    table_name: str | None = None
    flatten: bool = False
    sort_keys: bool = False
    delimiter: str = ","

    @field_validator("format")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("delimiter")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("delimiter must be a single character")
        if value in FORBIDDEN_DELIMITERS:
            raise ValueError("delimiter must not be a quote or line break")
        return value
