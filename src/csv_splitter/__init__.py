"""CSV Splitter - Split large CSV files into header-preserving parts."""

from csv_splitter.config import SplitConfig
from csv_splitter.runner import main_split, split

__all__ = ["SplitConfig", "split", "main_split"]
