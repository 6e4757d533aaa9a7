"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from json_convert.converter import Converter
from json_convert.errors import ConversionError
from json_convert.io_utils import build_options, load_options
from json_convert.models.convert_options import ConvertOptions
from json_convert.writers import SUPPORTED_FORMATS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-convert",
        description="Convert a JSON array of objects to csv, txt, md, sql or yaml.",
    )
    parser.add_argument("-f", "--file", type=str, help="Path to the JSON file")
    parser.add_argument(
        "-s",
        "--format",
        type=str,
        default=None,
        help=f"Output type: {', '.join(SUPPORTED_FORMATS)} (default: csv)",
    )
    parser.add_argument("-o", "--output", type=str, help="Path to the output file (optional)")
    parser.add_argument("--table", type=str, help="Table name for sql output (default: input file name)")
    parser.add_argument("--delimiter", type=str, help="Field delimiter for csv output")
    parser.add_argument(
        "--flatten",
        action="store_true",
        default=None,
        help="Expand nested objects and arrays into dotted columns",
    )
    parser.add_argument("--sort-keys", action="store_true", default=None, help="Sort keys alphabetically")
    parser.add_argument("--config", type=str, help="YAML file with conversion options")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def resolve_options(args: argparse.Namespace) -> ConvertOptions:
    # Only flags given on the command line override the config file.
    overrides = {
        key: value
        for key, value in {
            "format": args.format,
            "table_name": args.table,
            "delimiter": args.delimiter,
            "flatten": args.flatten,
            "sort_keys": args.sort_keys,
        }.items()
        if value is not None
    }
    if args.config:
        return load_options(Path(args.config), overrides)
    return build_options(overrides)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if not args.file:
        print("Error: Please specify the JSON file using -f")
        parser.print_usage()
        return 1

    try:
        options = resolve_options(args)
        converter = Converter(options)
        output_path = Path(args.output) if args.output else None
        written = converter.convert(Path(args.file), output_path)
    except ConversionError as exc:
        print(f"Error: {exc}")
        return 1

    print(f"Conversion successful. Output file: {written}")
    return 0
