"""CSV viewer data models"""

from __future__ import annotations

from pydantic import BaseModel


class CSVUploadResponse(BaseModel):
    """Response after saving an uploaded CSV file"""

    message: str
    file: str
    filename: str


class CSVViewResult(BaseModel):
    """Parsed CSV content"""

    file_name: str
    headers: list[str]
    rows: list[list[str]]  # data rows, header excluded
    total_rows: int
    total_columns: int
    preview_rows: list[list[str]]  # header included
