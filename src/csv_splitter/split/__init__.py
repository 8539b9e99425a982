"""Streaming CSV splitter engine."""

from csv_splitter.split.errors import (
    EmptyInputError,
    HeaderReadError,
    HeaderWriteError,
    InputOpenError,
    OutputCreateError,
    RecordReadError,
    RecordWriteError,
    SplitError,
)
from csv_splitter.split.part import PartWriter
from csv_splitter.split.splitter import CsvSplitter
from csv_splitter.split.types import SplitStats

__all__ = [
    "CsvSplitter",
    "EmptyInputError",
    "HeaderReadError",
    "HeaderWriteError",
    "InputOpenError",
    "OutputCreateError",
    "PartWriter",
    "RecordReadError",
    "RecordWriteError",
    "SplitError",
    "SplitStats",
]
