"""Value to display string conversion shared by the text writers."""

from __future__ import annotations

import json
from typing import Any

# Rendered for JSON null and for header keys a record does not have.
ABSENT = ""


def to_display_string(value: Any) -> str:
    if value is None:
        return ABSENT
    # bool before int: True is an int in Python.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)
