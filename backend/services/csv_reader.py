"""
CSV Reader - Parse uploaded CSV files for the viewer
"""

from __future__ import annotations

import csv
from pathlib import Path

from models.csv_viewer import CSVViewResult


def read_csv_rows(path: str | Path) -> list[list[str]]:
    """Read every record; all records must have as many fields as the first"""
    rows: list[list[str]] = []
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        for record in reader:
            # Blank lines are not records
            if not record:
                continue
            if rows and len(record) != len(rows[0]):
                raise csv.Error(f"record on line {reader.line_num}: wrong number of fields")
            rows.append(record)
    return rows


def build_view(
    path: str | Path,
    rows: list[list[str]],
    preview: bool = False,
    preview_rows: int = 10,
) -> CSVViewResult:
    """Split header from data and pick the rows to display"""
    if not rows:
        raise ValueError("CSV file is empty")

    headers = rows[0]
    data_rows = rows[1:]

    if preview:
        displayed = [headers, *data_rows[:preview_rows]]
    else:
        displayed = rows

    return CSVViewResult(
        file_name=Path(path).name,
        headers=headers,
        rows=data_rows,
        total_rows=len(data_rows),
        total_columns=len(headers),
        preview_rows=displayed,
    )
