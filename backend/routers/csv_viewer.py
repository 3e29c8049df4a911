"""CSV viewer API endpoints"""

from __future__ import annotations

import csv
from pathlib import Path

from fastapi import APIRouter, File, HTTPException, UploadFile

from models.csv_viewer import CSVUploadResponse, CSVViewResult
from services.config_manager import ConfigManager
from services.csv_reader import build_view, read_csv_rows
from services.storage import CSV, get_storage

router = APIRouter()


@router.post("/upload", response_model=CSVUploadResponse)
async def upload_csv(file: UploadFile | None = File(None)) -> CSVUploadResponse:
    """Save an uploaded CSV file"""
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="failed to retrieve uploaded file")

    if Path(file.filename).suffix != ".csv":
        raise HTTPException(status_code=400, detail="please upload a CSV file")

    data = await file.read()
    try:
        path = get_storage().save_upload(CSV, file.filename, data)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"failed to save file: {e}")

    return CSVUploadResponse(
        message="CSV file uploaded successfully",
        file=str(path),
        filename=file.filename,
    )


@router.get("/view", response_model=CSVViewResult)
async def view_csv(file: str = "", preview: str = "false") -> CSVViewResult:
    """Return the parsed CSV, or the header plus the first rows when previewing"""
    if not file:
        raise HTTPException(status_code=400, detail="missing file path parameter")

    try:
        rows = read_csv_rows(file)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"failed to open file: {e}")
    except (csv.Error, UnicodeDecodeError) as e:
        raise HTTPException(status_code=500, detail=f"failed to read CSV file: {e}")

    if not rows:
        raise HTTPException(status_code=400, detail="CSV file is empty")

    config = ConfigManager.get_instance().get_config()
    preview_rows = int(config.get("csv", {}).get("preview_rows", 10))

    return build_view(file, rows, preview=preview == "true", preview_rows=preview_rows)
