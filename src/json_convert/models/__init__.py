"""Model types for conversion configuration and input."""

from json_convert.models.convert_options import ConvertOptions
from json_convert.models.dataset import Dataset

__all__ = [
    "ConvertOptions",
    "Dataset",
]
