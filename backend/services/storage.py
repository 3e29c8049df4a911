"""
Upload Storage - Disk layout for uploaded and extracted files
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any

from services.config_manager import ConfigManager

FILE_COMPARE = "file-compare"
CSV = "csv"
ARCHIVE_COMPARE = "archive-compare"

CATEGORIES = (FILE_COMPARE, CSV, ARCHIVE_COMPARE)


class UploadStorage:
    """Save uploads under a per-tool directory with unique names"""

    def __init__(self, config: dict[str, Any]):
        storage = config.get("storage", {})
        self.upload_dir = Path(storage.get("upload_dir", "uploads"))
        self.temp_dir = Path(storage.get("temp_dir", "temp"))

    def category_dir(self, category: str) -> Path:
        if category not in CATEGORIES:
            raise ValueError(f"Unknown upload category: {category}")
        return self.upload_dir / category

    def ensure_directories(self) -> list[Path]:
        """Create the upload tree and temp directory"""
        dirs = [self.upload_dir, *(self.category_dir(c) for c in CATEGORIES), self.temp_dir]

        print("[Storage] Creating required directories...")
        for directory in dirs:
            directory.mkdir(parents=True, exist_ok=True)
            print(f"[Storage] Created directory: {directory}")
        return dirs

    def unique_name(self, filename: str, offset: int = 0, timestamp: int | None = None) -> str:
        """Prefix a nanosecond timestamp, dropping any client-side path"""
        if timestamp is None:
            timestamp = time.time_ns()
        return f"{timestamp + offset}_{Path(filename).name}"

    def save_upload(
        self,
        category: str,
        filename: str,
        data: bytes,
        offset: int = 0,
        timestamp: int | None = None,
    ) -> Path:
        """Write uploaded bytes and return the saved path"""
        target_dir = self.category_dir(category)
        target_dir.mkdir(parents=True, exist_ok=True)

        path = target_dir / self.unique_name(filename, offset, timestamp)
        path.write_bytes(data)
        print(f"[Storage] Saved {filename} ({len(data)} bytes) to {path}")
        return path

    @staticmethod
    def read_text(path: str | Path) -> str:
        """Read a whole file as text, replacing undecodable bytes"""
        return Path(path).read_bytes().decode("utf-8", errors="replace")


def get_storage() -> UploadStorage:
    """Storage bound to the current configuration"""
    return UploadStorage(ConfigManager.get_instance().get_config())
