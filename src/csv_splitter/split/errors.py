"""Errors raised by the splitter engine.

Every error is raised from the underlying I/O or parse failure, so the
original cause stays available as ``__cause__``.
"""

from pathlib import Path


class SplitError(Exception):
    """Base class for failures during a split run."""


class InputOpenError(SplitError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"failed to open input CSV file '{path}'")


class EmptyInputError(SplitError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__("input file is empty")


class HeaderReadError(SplitError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"failed to read header from '{path}'")


class RecordReadError(SplitError):
    def __init__(self, line: int, reason: str | None = None):
        self.line = line
        self.reason = reason
        message = f"error reading record at line {line}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)


class OutputCreateError(SplitError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"failed to create output file '{path}'")


class HeaderWriteError(SplitError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"failed to write header to file '{path}'")


class RecordWriteError(SplitError):
    def __init__(self, line: int):
        self.line = line
        super().__init__(f"error writing record at line {line}")
