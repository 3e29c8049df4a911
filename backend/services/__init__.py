"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .line_diff import diff_lines, split_lines
from .diff_generator import DiffGenerator
from .storage import UploadStorage, get_storage
from .csv_reader import build_view, read_csv_rows
from .archive_analyzer import (
    analyze_extracted_archive,
    compare_transaction_files,
    extract_zip,
)

__all__ = [
    "ConfigManager",
    "diff_lines",
    "split_lines",
    "DiffGenerator",
    "UploadStorage",
    "get_storage",
    "build_view",
    "read_csv_rows",
    "analyze_extracted_archive",
    "compare_transaction_files",
    "extract_zip",
]
