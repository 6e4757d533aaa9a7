"""Public package exports."""

from json_convert.converter import Converter
from json_convert.flattener import flatten_into, flatten_record, flatten_records
from json_convert.models import ConvertOptions, Dataset
from json_convert.writers import SUPPORTED_FORMATS, get_writer, render, render_to_string

__all__ = [
    "ConvertOptions",
    "Converter",
    "Dataset",
    "SUPPORTED_FORMATS",
    "flatten_into",
    "flatten_record",
    "flatten_records",
    "get_writer",
    "render",
    "render_to_string",
]
