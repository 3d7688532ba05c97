"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import (
    DiffGenerator,
    DiffTooLargeError,
    backtrace,
    build_table,
    compute_diff,
    split_lines,
)

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "DiffTooLargeError",
    "backtrace",
    "build_table",
    "compute_diff",
    "split_lines",
]
