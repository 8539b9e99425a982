"""Shared types and defaults for the splitter engine."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

type Header = tuple[str, ...]
type Record = list[str]

# Part files are named {prefix}_{index}.csv.
PART_EXTENSION = "csv"

# Written after every output record.
LINE_TERMINATOR = "\n"

# Error handler that round-trips undecodable bytes between input and output.
ENCODING_ERRORS = "surrogateescape"


class RowWriter(Protocol):
    """The part of a csv writer object the part writer relies on."""

    def writerow(self, row: Iterable[Any], /) -> Any: ...


@dataclass
class SplitStats:
    """Statistics from a CsvSplitter.split() run."""

    parts_created: int = 0
    records_read: int = 0
    empty_records: int = 0
    records_written: int = 0
    output_paths: list[Path] = field(default_factory=list)
