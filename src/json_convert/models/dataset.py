"""Pydantic model for a parsed input document."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class Dataset(BaseModel):
    source_path: str
    records: list[dict[str, Any]]
