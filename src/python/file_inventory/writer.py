"""
Writing scan results to disk.

The whole document is serialized and encoded before the output file is
opened, so a serialization error never leaves a truncated file behind.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Union

from file_inventory.models.record import FileRecord

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_FILENAME = "file_data.json"


def serialize_records(records: Iterable[FileRecord], indent: int = 2) -> str:
    """
    Serialize records as a pretty-printed JSON array.

    Args:
        records: FileRecords to serialize
        indent: Number of spaces per indentation level

    Returns:
        The JSON document as a string
    """
    return json.dumps(
        [record.to_dict() for record in records],
        indent=indent,
        ensure_ascii=False,
    )


def write_document(
    records: Iterable[FileRecord],
    directory: Union[str, Path],
    filename: str = DEFAULT_OUTPUT_FILENAME,
    indent: int = 2,
) -> Path:
    """
    Write records to a JSON file inside a directory.

    Any existing file with the same name is overwritten.

    Args:
        records: FileRecords to write
        directory: Directory to write into
        filename: Name of the output file
        indent: Number of spaces per indentation level

    Returns:
        Path to the written file

    Raises:
        OSError: If the file cannot be written
        TypeError, ValueError: If the records cannot be serialized
            (UnicodeEncodeError included); the output file is left untouched
    """
    document = serialize_records(records, indent=indent).encode("utf-8")
    output_path = Path(directory) / filename

    with open(output_path, "wb") as f:
        f.write(document)

    logger.info("Wrote %s", output_path)
    return output_path
