"""Routers module - FastAPI route handlers"""

from . import archive_compare, config, csv_viewer, file_compare

__all__ = ["archive_compare", "config", "csv_viewer", "file_compare"]
