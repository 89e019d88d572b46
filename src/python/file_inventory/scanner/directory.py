"""
Directory scanning for building file records.

This module lists the regular files of a single directory (no recursion),
collects their metadata and returns one FileRecord per file. Results can be
converted to a pandas DataFrame for easy analysis.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from file_inventory.models.record import FileRecord, FileStat
from file_inventory.scanner.classify import classify_file, mime_category
from file_inventory.scanner.exif import extract_exif_tags
from file_inventory.scanner.metadata import read_file_metadata

logger = logging.getLogger(__name__)


def scan_directory(directory: Union[str, Path]) -> List[FileRecord]:
    """
    Scan a directory and build a FileRecord for each regular file.

    Sub-directories, symlinks and special files are skipped. EXIF metadata is
    only read for files whose MIME type is in the "image" category.

    Args:
        directory: Directory to scan

    Returns:
        List of FileRecords in directory iteration order

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
        OSError: If the directory cannot be listed or a file cannot be stat'ed

    Example:
        >>> records = scan_directory(Path("/photos/2025/01/01"))
        >>> print(f"Found {len(records)} files")
    """
    directory = Path(directory)

    if not directory.exists():
        raise FileNotFoundError(f"Directory not found: {directory}")

    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    records = []

    for path in directory.iterdir():
        if path.is_symlink() or not path.is_file():
            logger.debug("Skipping non-regular entry: %s", path)
            continue

        stat = read_file_metadata(path)
        mime_type, extension = classify_file(path)

        exif_data = None
        if mime_category(mime_type) == "image":
            exif_data = extract_exif_tags(path)

        records.append(build_record(path, stat, mime_type, extension, exif_data))
        logger.debug("Scanned %s (%s, %d bytes)", path.name, mime_type, stat.size)

    logger.info("Scanned %d files in %s", len(records), directory)
    return records


def build_record(
    path: Path,
    stat: FileStat,
    mime_type: str,
    extension: str,
    exif_data: Optional[Dict[str, str]] = None,
) -> FileRecord:
    """
    Combine per-file information into a FileRecord.

    Args:
        path: Path of the scanned file
        stat: Size and timestamps from read_file_metadata()
        mime_type: MIME type from classify_file()
        extension: Extension from classify_file()
        exif_data: Tags from extract_exif_tags(), or None

    Returns:
        The assembled FileRecord
    """
    return FileRecord(
        file_name=_lossy(path.name),
        file_size=stat.size,
        mime_type=mime_type,
        file_extension=_lossy(extension),
        path=_lossy(str(path)),
        created_time=stat.created_time,
        modified_time=stat.modified_time,
        accessed_time=stat.accessed_time,
        exif_data=exif_data,
    )


def _lossy(name: str) -> str:
    """
    Make a file name safe for UTF-8 output.

    Bytes that are not valid UTF-8 (kept as surrogates by the OS layer) are
    replaced with U+FFFD.
    """
    return os.fsencode(name).decode("utf-8", errors="replace")


def records_to_dataframe(records: List[FileRecord]) -> pd.DataFrame:
    """
    Convert a list of FileRecords to a pandas DataFrame.

    Args:
        records: List of FileRecord objects

    Returns:
        DataFrame with one row per FileRecord
    """
    if not records:
        return pd.DataFrame()

    data = [record.to_dict() for record in records]
    return pd.DataFrame(data)
