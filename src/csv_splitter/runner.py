import logging
import time

from csv_splitter.config import SplitConfig, validate_config
from csv_splitter.split import CsvSplitter, SplitStats

logger = logging.getLogger(__name__)


def split(config: SplitConfig) -> SplitStats:
    """
    Validate the configuration and split the input file.

    Raises:
        ConfigError: If the configuration is rejected.
        SplitError: If the split fails part-way.
    """
    total_start = time.perf_counter()

    validate_config(config)

    splitter = CsvSplitter(config)
    stats = splitter.split()

    total_time = time.perf_counter() - total_start
    logger.info(
        "Done: %d files, %d records written in %.2fs",
        stats.parts_created,
        stats.records_written,
        total_time,
    )
    return stats


def describe_error(err: BaseException) -> str:
    """Format an error together with the failure it was raised from."""
    if err.__cause__ is not None:
        return f"{err}: {err.__cause__}"
    return str(err)


def main_split(config: SplitConfig) -> SplitStats:
    """Main entry point that prints a summary to stdout in verbose mode."""
    stats = split(config)

    if config.verbose:
        print(f"Splitting completed successfully. Created {stats.parts_created} files.")
        print(f"Processed {stats.records_read} total records")

    return stats
