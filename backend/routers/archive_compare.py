"""Archive compare API endpoints"""

from __future__ import annotations

import time
import zipfile
from pathlib import Path

from fastapi import APIRouter, File, HTTPException, UploadFile

from models.archive import ArchiveCompareResult, ArchiveUploadResponse
from services.archive_analyzer import (
    analyze_extracted_archive,
    compare_transaction_files,
    extract_zip,
)
from services.diff_generator import DiffGenerator
from services.storage import ARCHIVE_COMPARE, get_storage

router = APIRouter()
diff_generator = DiffGenerator()


@router.post("/upload", response_model=ArchiveUploadResponse)
async def upload_archive(file: UploadFile | None = File(None)) -> ArchiveUploadResponse:
    """Save a ZIP archive, extract it and list its transactions"""
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="failed to retrieve uploaded file")

    if Path(file.filename).suffix != ".zip":
        raise HTTPException(status_code=400, detail="please upload a ZIP archive")

    storage = get_storage()
    data = await file.read()
    timestamp = time.time_ns()
    try:
        archive_path = storage.save_upload(ARCHIVE_COMPARE, file.filename, data, timestamp=timestamp)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"failed to save file: {e}")

    extract_dir = storage.category_dir(ARCHIVE_COMPARE) / f"extracted_{timestamp}"
    try:
        extract_zip(archive_path, extract_dir)
    except (OSError, zipfile.BadZipFile) as e:
        raise HTTPException(status_code=500, detail=f"failed to extract archive: {e}")
    print(f"[ArchiveCompare] Extracted {archive_path} to {extract_dir}")

    try:
        directories, transactions = analyze_extracted_archive(extract_dir)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"failed to analyze archive structure: {e}")

    return ArchiveUploadResponse(
        message="archive uploaded and extracted successfully",
        archive_file=str(archive_path),
        extract_dir=str(extract_dir),
        directories=directories,
        transactions=transactions,
    )


@router.get("/compare", response_model=ArchiveCompareResult)
async def compare_archive(extract_dir: str = "") -> ArchiveCompareResult:
    """Compare every baby/candy pair of an extracted archive"""
    if not extract_dir:
        raise HTTPException(status_code=400, detail="missing extract directory parameter")

    try:
        directories, transactions = analyze_extracted_archive(extract_dir)
    except OSError as e:
        raise HTTPException(status_code=500, detail=f"failed to analyze archive structure: {e}")

    comparisons = compare_transaction_files(transactions, diff_generator)

    return ArchiveCompareResult(
        archive_name=Path(extract_dir).name,
        directories=directories,
        transactions=transactions,
        comparisons=comparisons,
    )
