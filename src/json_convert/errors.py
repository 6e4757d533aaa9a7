"""Exceptions raised while converting JSON records."""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every error reported by the converter."""


class InputNotFoundError(ConversionError, FileNotFoundError):
    def __init__(self, path: str) -> None:
        super().__init__(f"The file '{path}' does not exist. Please check the -f file path.")
        self.path = path


class JsonParseError(ConversionError, ValueError):
    pass


class UnsupportedFormatError(ConversionError, ValueError):
    def __init__(self, format_id: str, supported: list[str]) -> None:
        super().__init__(
            f"Unsupported output type '{format_id}'. Supported types are: {', '.join(supported)}"
        )
        self.format_id = format_id


class EmptyInputError(ConversionError, ValueError):
    def __init__(self, format_id: str) -> None:
        super().__init__(f"no data to write to {format_id.upper()}")
        self.format_id = format_id


class OutputWriteError(ConversionError, OSError):
    pass


class ConfigError(ConversionError, ValueError):
    pass
