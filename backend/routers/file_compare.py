"""File compare API endpoints"""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, File, HTTPException, UploadFile

from models.file_compare import FileCompareResult, FileUploadResponse
from services.diff_generator import DiffGenerator
from services.storage import FILE_COMPARE, get_storage

router = APIRouter()
diff_generator = DiffGenerator()


@router.post("/upload", response_model=FileUploadResponse)
async def upload_files(files: list[UploadFile] | None = File(None)) -> FileUploadResponse:
    """Save the two files to compare"""
    if not files:
        raise HTTPException(status_code=400, detail="failed to retrieve uploaded files")
    if len(files) != 2:
        raise HTTPException(status_code=400, detail="upload exactly two files to compare")

    storage = get_storage()
    saved_files = []
    for i, upload in enumerate(files):
        data = await upload.read()
        try:
            path = storage.save_upload(FILE_COMPARE, upload.filename or "upload", data, offset=i)
        except OSError as e:
            raise HTTPException(status_code=500, detail=f"failed to save file: {e}")
        saved_files.append(str(path))

    return FileUploadResponse(message="files uploaded successfully", files=saved_files)


@router.get("/compare", response_model=FileCompareResult)
async def compare_files(file1: str = "", file2: str = "") -> FileCompareResult:
    """Compare two previously uploaded files"""
    if not file1 or not file2:
        raise HTTPException(status_code=400, detail="missing file path parameter")

    storage = get_storage()
    contents = []
    for label, path in (("file1", file1), ("file2", file2)):
        try:
            contents.append(storage.read_text(path))
        except OSError as e:
            raise HTTPException(status_code=500, detail=f"failed to read {label}: {e}")

    comparison = diff_generator.compare_texts(contents[0], contents[1])

    return FileCompareResult(
        file1_name=Path(file1).name,
        file2_name=Path(file2).name,
        file1_content=contents[0],
        file2_content=contents[1],
        diff_html=comparison.diff_html,
        lines1=comparison.lines1,
        lines2=comparison.lines2,
        diff_lines=comparison.diff_lines,
    )
