"""Runs one JSON to text conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from json_convert.errors import OutputWriteError
from json_convert.io_utils import default_output_path, load_dataset, open_output
from json_convert.models.convert_options import ConvertOptions
from json_convert.writers import get_writer
from json_convert.writers.sql_writer import derive_table_name


logger = logging.getLogger(__name__)


class Converter:
    def __init__(self, options: ConvertOptions | None = None) -> None:
        self.options: ConvertOptions = options or ConvertOptions()

    def resolve_output_path(self, input_path: Path, output_path: Path | None = None) -> Path:
        if output_path is not None:
            return output_path
        return default_output_path(input_path, self.options.format)

    def convert(self, input_path: Path, output_path: Path | None = None) -> Path:
        """
        Converts `input_path` and returns the written path.
        Nothing is created on disk unless the input loads and the writer accepts it.
        """
        writer_cls = get_writer(self.options.format)
        dataset = load_dataset(input_path)

        options = self.options
        if options.format == "sql" and not options.table_name:
            options = options.model_copy(update={"table_name": derive_table_name(input_path)})
            logger.debug("Using derived table name %s", options.table_name)

        writer = writer_cls(options)
        writer.check(dataset.records)

        target = self.resolve_output_path(input_path, output_path)
        # Closing flushes buffered output, so write errors can surface there too.
        try:
            with open_output(target) as stream:
                writer.render(dataset.records, stream)
        except OutputWriteError:
            raise
        except OSError as exc:
            raise OutputWriteError(f"failed to write {options.format} output to {target}: {exc}") from exc

        logger.info("Wrote %d records to %s", len(dataset.records), target)
        return target
