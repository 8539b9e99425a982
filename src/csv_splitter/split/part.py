"""Output part handle used by the splitter engine."""

import csv
import logging
from pathlib import Path
from typing import TextIO

from csv_splitter.split.errors import HeaderWriteError, OutputCreateError
from csv_splitter.split.types import (
    ENCODING_ERRORS,
    LINE_TERMINATOR,
    PART_EXTENSION,
    Header,
    Record,
    RowWriter,
)

logger = logging.getLogger(__name__)

# Failures a csv writer can raise while writing one row.
WRITE_ERRORS = (OSError, csv.Error, UnicodeEncodeError)

# Fields starting with these lose them when read back with leading-space trimming.
LEADING_WHITESPACE = (" ", "\t")


class PartWriter:
    """Owns the single open output part; at most one handle is open at a time."""

    def __init__(
        self,
        output_dir: Path,
        prefix: str,
        delimiter: str,
        buffer_size: int,
        encoding: str,
    ):
        self._output_dir = output_dir
        self._prefix = prefix
        self._delimiter = delimiter
        self._buffer_size = buffer_size
        self._encoding = encoding
        self._handle: TextIO | None = None
        self._writer: RowWriter | None = None
        self._quoted_writer: RowWriter | None = None
        self._path: Path | None = None

    @property
    def path(self) -> Path | None:
        """Path of the open part, or None when nothing is open."""
        return self._path

    def get_path(self, index: int) -> Path:
        return self._output_dir / f"{self._prefix}_{index}.{PART_EXTENSION}"

    def open(self, index: int, header: Header) -> Path:
        """Close any open part, then create part `index` and write the header."""
        self.close()

        path = self.get_path(index)
        try:
            handle = open(  # noqa: SIM115
                path,
                "w",
                newline="",
                encoding=self._encoding,
                errors=ENCODING_ERRORS,
                buffering=self._buffer_size,
            )
        except OSError as err:
            raise OutputCreateError(path) from err

        self._handle = handle
        self._path = path
        self._writer = csv.writer(
            handle,
            delimiter=self._delimiter,
            lineterminator=LINE_TERMINATOR,
            quoting=csv.QUOTE_MINIMAL,
        )
        self._quoted_writer = csv.writer(
            handle,
            delimiter=self._delimiter,
            lineterminator=LINE_TERMINATOR,
            quoting=csv.QUOTE_ALL,
        )

        try:
            self._write_row(header)
        except WRITE_ERRORS as err:
            self.close()
            raise HeaderWriteError(path) from err

        logger.info("Created output file: %s", path)
        return path

    def write(self, record: Record) -> None:
        """Write one record to the open part."""
        self._write_row(record)

    def _write_row(self, row: Header | Record) -> None:
        # A row with a leading-whitespace field is written fully quoted.
        if any(field.startswith(LEADING_WHITESPACE) for field in row):
            self._quoted_writer.writerow(row)
        else:
            self._writer.writerow(row)

    def close(self) -> None:
        """Flush and close the open part. Does nothing if none is open."""
        handle = self._handle
        self._handle = None
        self._writer = None
        self._quoted_writer = None
        self._path = None
        if handle is not None:
            handle.close()
