"""File compare data models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffLine


class FileUploadResponse(BaseModel):
    """Response after saving the two files to compare"""

    message: str
    files: list[str]


class FileCompareResult(BaseModel):
    """Comparison of two uploaded files"""

    file1_name: str
    file2_name: str
    file1_content: str
    file2_content: str
    diff_html: str
    lines1: list[str]
    lines2: list[str]
    diff_lines: list[DiffLine]
