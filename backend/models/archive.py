"""Archive compare data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from .diff import DiffLine


class TransactionFileType(str, Enum):
    """Side of a transaction pair, taken from the file name prefix"""

    BABY = "baby"
    CANDY = "candy"


class TransactionFile(BaseModel):
    """A transaction file found in an extracted archive"""

    directory: str  # relative to the extraction root, "." for the root
    file_name: str
    file_path: str
    type: TransactionFileType


class TransactionInfo(BaseModel):
    """All files sharing one transaction ID"""

    id: str
    directories: list[str] = []  # in order of first appearance
    files: list[TransactionFile] = []


class TransactionComparison(BaseModel):
    """Diff of the baby and candy files of one transaction in one directory"""

    transaction_id: str
    directory: str
    baby_file: str
    candy_file: str
    baby_content: str
    candy_content: str
    diff_html: str
    diff_lines: list[DiffLine]


class ArchiveUploadResponse(BaseModel):
    """Response after saving and extracting an archive"""

    message: str
    archive_file: str
    extract_dir: str
    directories: list[str]
    transactions: list[TransactionInfo]


class ArchiveCompareResult(BaseModel):
    """Comparison of every transaction pair in an extracted archive"""

    archive_name: str
    directories: list[str]
    transactions: list[TransactionInfo]
    comparisons: list[TransactionComparison]
