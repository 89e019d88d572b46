"""
MIME type classification from file names.

Classification is a table lookup on the file extension; file contents are
never inspected. The standard ``mimetypes`` table is consulted first, then a
small table of camera RAW and HEIF types that it does not always know about.
"""

import mimetypes
import os
from pathlib import Path
from typing import Tuple, Union

DEFAULT_MIME_TYPE = "application/octet-stream"

# Camera RAW formats (read with exifread rather than Pillow)
RAW_MIME_TYPES = {
    "cr2": "image/x-canon-cr2",
    "cr3": "image/x-canon-cr3",
    "nef": "image/x-nikon-nef",
    "arw": "image/x-sony-arw",
    "dng": "image/x-adobe-dng",
    "raf": "image/x-fuji-raf",
    "orf": "image/x-olympus-orf",
    "rw2": "image/x-panasonic-rw2",
}

HEIF_MIME_TYPES = {
    "heic": "image/heic",
    "heif": "image/heif",
}

_EXTRA_MIME_TYPES = {**RAW_MIME_TYPES, **HEIF_MIME_TYPES}

# Compressed files are reported by their compression, e.g. "a.tar.gz" is gzip
ENCODING_MIME_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "compress": "application/x-compress",
    "br": "application/x-brotli",
}


def classify_file(file_path: Union[str, Path]) -> Tuple[str, str]:
    """
    Guess the MIME type and extension of a file from its name.

    Args:
        file_path: Filename or path (the file does not need to exist)

    Returns:
        Tuple of (mime_type, file_extension)
        - mime_type: e.g. "image/jpeg"; "application/octet-stream" if unknown
        - file_extension: extension without the dot, or "" if there is none

    Examples:
        >>> classify_file("photo.jpg")
        ('image/jpeg', 'jpg')
        >>> classify_file("IMG_1234.CR2")
        ('image/x-canon-cr2', 'CR2')
        >>> classify_file("backup.tar.gz")
        ('application/gzip', 'gz')
        >>> classify_file("Makefile")
        ('application/octet-stream', '')
    """
    file_name = Path(file_path).name
    extension = get_extension(file_name)

    # guess_type() parses its argument as a URL; "." keeps "scheme:" names a plain path
    mime_type, encoding = mimetypes.guess_type(os.path.join(".", file_name), strict=False)
    if encoding:
        mime_type = ENCODING_MIME_TYPES.get(encoding, DEFAULT_MIME_TYPE)
    if mime_type is None and extension:
        mime_type = _EXTRA_MIME_TYPES.get(extension.lower())

    return mime_type or DEFAULT_MIME_TYPE, extension


def get_extension(file_name: str) -> str:
    """
    Get the final extension of a file name, without the leading dot.

    Dotfiles such as ".bashrc" have no extension.

    Args:
        file_name: The file name to analyze

    Returns:
        The extension with its original case, or "" if there is none
    """
    stem, dot, extension = file_name.rpartition(".")
    if not dot or not stem:
        return ""
    return extension


def mime_category(mime_type: str) -> str:
    """Return the top-level type of a MIME type ("image" for "image/png")."""
    return mime_type.split("/", 1)[0].lower()


def is_raw_extension(extension: str) -> bool:
    """Check if an extension belongs to a camera RAW format."""
    return extension.lower() in RAW_MIME_TYPES


def is_heif_extension(extension: str) -> bool:
    """Check if an extension belongs to a HEIC/HEIF image."""
    return extension.lower() in HEIF_MIME_TYPES
