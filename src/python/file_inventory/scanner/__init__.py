"""Scanner module for collecting file metadata from a directory."""

from file_inventory.scanner.classify import classify_file, get_extension, mime_category
from file_inventory.scanner.directory import build_record, records_to_dataframe, scan_directory
from file_inventory.scanner.exif import extract_exif_tags
from file_inventory.scanner.metadata import read_file_metadata

__all__ = [
    "build_record",
    "classify_file",
    "extract_exif_tags",
    "get_extension",
    "mime_category",
    "read_file_metadata",
    "records_to_dataframe",
    "scan_directory",
]
