"""Models module - Pydantic data models"""

from .diff import DiffKind, DiffLine, DiffRecord, TextComparison
from .file_compare import FileCompareResult, FileUploadResponse
from .csv_viewer import CSVUploadResponse, CSVViewResult
from .archive import (
    ArchiveCompareResult,
    ArchiveUploadResponse,
    TransactionComparison,
    TransactionFile,
    TransactionFileType,
    TransactionInfo,
)

__all__ = [
    # Diff models
    "DiffKind",
    "DiffLine",
    "DiffRecord",
    "TextComparison",
    # File compare models
    "FileCompareResult",
    "FileUploadResponse",
    # CSV models
    "CSVUploadResponse",
    "CSVViewResult",
    # Archive models
    "ArchiveCompareResult",
    "ArchiveUploadResponse",
    "TransactionComparison",
    "TransactionFile",
    "TransactionFileType",
    "TransactionInfo",
]
