"""
FileInventory - directory metadata inventory.

This package lists the regular files of a directory, collects their size,
MIME type, extension and timestamps, reads EXIF metadata from images and
writes everything to a JSON document.

Usage:
    from file_inventory import scan_directory, write_document
    from pathlib import Path

    records = scan_directory(Path("/photos/2025/01/01"))
    write_document(records, Path("/photos/2025/01/01"))
"""

from file_inventory.__version__ import __version__
from file_inventory.models import FileRecord, FileStat
from file_inventory.scanner import (
    build_record,
    classify_file,
    extract_exif_tags,
    read_file_metadata,
    records_to_dataframe,
    scan_directory,
)
from file_inventory.writer import DEFAULT_OUTPUT_FILENAME, serialize_records, write_document

__all__ = [
    "__version__",
    # Models
    "FileRecord",
    "FileStat",
    # Scanner
    "build_record",
    "classify_file",
    "extract_exif_tags",
    "read_file_metadata",
    "records_to_dataframe",
    "scan_directory",
    # Writer
    "DEFAULT_OUTPUT_FILENAME",
    "serialize_records",
    "write_document",
]
