"""Data models for file-inventory."""

from file_inventory.models.record import FileRecord, FileStat

__all__ = [
    "FileRecord",
    "FileStat",
]
