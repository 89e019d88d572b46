"""
FileRecord and FileStat models.

A FileRecord describes one regular file found while scanning a directory.
It is built once per scan and never mutated afterwards.

These models are designed to:
- Serialize directly to the JSON document written by the scanner
- Work seamlessly with pandas DataFrames
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class FileStat:
    """
    Filesystem attributes of a single file.

    Attributes:
        size: Size of the file in bytes
        created_time: Creation time (Unix epoch seconds), None if unsupported
        modified_time: Last modification time (Unix epoch seconds)
        accessed_time: Last access time (Unix epoch seconds)
    """
    size: int
    created_time: Optional[int] = None
    modified_time: Optional[int] = None
    accessed_time: Optional[int] = None


@dataclass(frozen=True)
class FileRecord:
    """
    Metadata collected for one scanned file.

    Attributes:
        file_name: Base name of the entry
        file_size: Size of the file in bytes
        mime_type: MIME type guessed from the file name
        file_extension: Extension without the leading dot (may be empty)
        path: Path of the file as resolved at scan time
        created_time: Creation time (Unix epoch seconds) or None
        modified_time: Modification time (Unix epoch seconds) or None
        accessed_time: Access time (Unix epoch seconds) or None
        exif_data: EXIF tag name -> value mapping. Only set for image files;
                   None when the file is not an image or could not be read.
    """
    file_name: str
    file_size: int
    mime_type: str
    file_extension: str
    path: str
    created_time: Optional[int] = None
    modified_time: Optional[int] = None
    accessed_time: Optional[int] = None
    exif_data: Optional[Dict[str, str]] = None

    @property
    def is_image(self) -> bool:
        """Check if the record's MIME type is in the image category."""
        return self.mime_type.split("/", 1)[0] == "image"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary. Missing values map to None."""
        return {
            "file_name": self.file_name,
            "file_size": self.file_size,
            "mime_type": self.mime_type,
            "file_extension": self.file_extension,
            "path": self.path,
            "created_time": self.created_time,
            "modified_time": self.modified_time,
            "accessed_time": self.accessed_time,
            "exif_data": dict(self.exif_data) if self.exif_data is not None else None,
        }
