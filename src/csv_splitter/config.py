"""Split configuration and its validation."""

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_PREFIX = "output"
DEFAULT_OUTPUT_DIR = "."
DEFAULT_MAX_RECORDS = 10000
DEFAULT_DELIMITER = ","
DEFAULT_ENCODING = "utf-8"

# 64KB buffer for input and output handles.
DEFAULT_BUFFER_SIZE = 64 * 1024

# Characters the csv reader cannot split on.
INVALID_DELIMITERS = frozenset({'"', "\r", "\n", "\0"})


class ConfigError(ValueError):
    """Raised when a configuration is rejected before splitting starts."""


@dataclass(frozen=True, slots=True)
class SplitConfig:
    """Read-only settings for one split run."""

    input_path: str
    output_prefix: str = DEFAULT_OUTPUT_PREFIX
    output_dir: str = DEFAULT_OUTPUT_DIR
    max_records: int = DEFAULT_MAX_RECORDS
    buffer_size: int = DEFAULT_BUFFER_SIZE
    skip_empty: bool = True
    delimiter: str = DEFAULT_DELIMITER
    verbose: bool = False
    encoding: str = DEFAULT_ENCODING


def parse_delimiter(value: str) -> str:
    """
    Return the delimiter to use for a user-supplied string.

    Anything other than a single usable character falls back to a comma.
    """
    if is_valid_delimiter(value):
        return value

    logger.warning("Delimiter %r is not a usable character, using %r", value, DEFAULT_DELIMITER)
    return DEFAULT_DELIMITER


def is_valid_delimiter(value: str) -> bool:
    return len(value) == 1 and value not in INVALID_DELIMITERS


def validate_config(config: SplitConfig) -> None:
    """
    Check a configuration and prepare the output directory.

    Raises:
        ConfigError: If the input is missing, a size setting is not positive,
            the delimiter is unusable, or the output directory cannot be created.
    """
    if not config.input_path:
        raise ConfigError("input file path is required")

    if config.max_records <= 0:
        raise ConfigError("limit must be greater than 0")

    if config.buffer_size <= 0:
        raise ConfigError("buffer size must be greater than 0")

    if not is_valid_delimiter(config.delimiter):
        raise ConfigError(f"invalid delimiter: {config.delimiter!r}")

    if not Path(config.input_path).exists():
        raise ConfigError(f"input file does not exist: {config.input_path}")

    try:
        Path(config.output_dir).mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise ConfigError(f"failed to create output directory: {err}") from err
