"""Streaming CSV splitter."""

import csv
import logging
from collections.abc import Iterator
from pathlib import Path

from csv_splitter.config import SplitConfig
from csv_splitter.split.errors import (
    EmptyInputError,
    HeaderReadError,
    InputOpenError,
    RecordReadError,
    RecordWriteError,
)
from csv_splitter.split.part import WRITE_ERRORS, PartWriter
from csv_splitter.split.reader import is_empty_record, iter_records, open_records
from csv_splitter.split.types import ENCODING_ERRORS, Header, Record, SplitStats

logger = logging.getLogger(__name__)

# Errors the csv reader raises for malformed or undecodable input.
PARSE_ERRORS = (csv.Error, UnicodeDecodeError)


class CsvSplitter:
    """
    Split one CSV file into parts of at most `max_records` data records.

    Every part starts with the input header. Construction performs no I/O;
    build a new instance for each run.
    """

    def __init__(self, config: SplitConfig):
        self._config = config
        self._part_index = 1
        self._part_count = 0
        self._parts: PartWriter | None = None

    @property
    def config(self) -> SplitConfig:
        return self._config

    def split(self) -> SplitStats:
        """
        Run the split.

        Returns:
            Statistics for the run, including the created part paths.

        Raises:
            SplitError: On the first I/O or parse failure. Parts written
                before the failure are left on disk.
        """
        config = self._config
        stats = SplitStats()

        try:
            handle = open(  # noqa: SIM115
                config.input_path,
                newline="",
                encoding=config.encoding,
                errors=ENCODING_ERRORS,
                buffering=config.buffer_size,
            )
        except OSError as err:
            raise InputOpenError(config.input_path) from err

        with handle:
            records = iter_records(open_records(handle, config.delimiter))
            header = self._read_header(records)

            logger.info(
                "Starting to split CSV file: %s (limit=%d, delimiter=%r)",
                config.input_path,
                config.max_records,
                config.delimiter,
            )

            self._parts = PartWriter(
                Path(config.output_dir),
                config.output_prefix,
                config.delimiter,
                config.buffer_size,
                config.encoding,
            )
            try:
                self._open_next_part(header, stats)

                while True:
                    try:
                        record = next(records, None)
                    except PARSE_ERRORS as err:
                        raise RecordReadError(stats.records_read + 2) from err
                    if record is None:
                        break

                    if len(record) != len(header):
                        raise RecordReadError(
                            stats.records_read + 2,
                            f"wrong number of fields: expected {len(header)}, got {len(record)}",
                        )

                    stats.records_read += 1

                    if config.skip_empty and is_empty_record(record):
                        stats.empty_records += 1
                        continue

                    if self._part_count >= config.max_records:
                        logger.debug(
                            "Part %d full after %d records, rotating",
                            self._part_index - 1,
                            self._part_count,
                        )
                        self._open_next_part(header, stats)

                    try:
                        self._parts.write(record)
                    except WRITE_ERRORS as err:
                        raise RecordWriteError(stats.records_read + 1) from err
                    self._part_count += 1
                    stats.records_written += 1

                try:
                    self._parts.close()
                except OSError as err:
                    raise RecordWriteError(stats.records_read + 1) from err
            finally:
                self._parts.close()

        logger.info(
            "Processed %d total records into %d files (%d empty records skipped)",
            stats.records_read,
            stats.parts_created,
            stats.empty_records,
        )
        return stats

    def _read_header(self, records: Iterator[Record]) -> Header:
        try:
            header = next(records, None)
        except PARSE_ERRORS as err:
            raise HeaderReadError(self._config.input_path) from err

        if header is None:
            raise EmptyInputError(self._config.input_path)
        return tuple(header)

    def _open_next_part(self, header: Header, stats: SplitStats) -> None:
        """Close the current part and start the next one with the header."""
        try:
            path = self._parts.open(self._part_index, header)
        except OSError as err:
            # Flushing the previous part failed while rotating.
            raise RecordWriteError(stats.records_read + 1) from err

        self._part_index += 1
        self._part_count = 0
        stats.parts_created += 1
        stats.output_paths.append(path)
