"""Record reading helpers for the splitter engine."""

import csv
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from csv_splitter.split.types import Record

# Lift the default 128KB cap so large text fields and lenient quote runs parse.
try:
    csv.field_size_limit(sys.maxsize)
except OverflowError:
    csv.field_size_limit(2**31 - 1)  # maximum for a signed 32-bit C long on Windows


def open_records(handle: TextIO, delimiter: str) -> Iterator[Record]:
    """
    Build a CSV reader over an open text handle.

    Quotes are parsed leniently and leading whitespace in fields is trimmed.
    """
    return csv.reader(
        handle,
        delimiter=delimiter,
        strict=False,
        skipinitialspace=True,
    )


def iter_records(rows: Iterable[Record]) -> Iterator[Record]:
    """Yield records, dropping physically blank lines (zero-field rows)."""
    for row in rows:
        if row:
            yield row


def is_empty_record(record: Record) -> bool:
    """Return True if every field in the record is the empty string."""
    return all(field == "" for field in record)
