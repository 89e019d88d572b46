"""
EXIF metadata extraction for image files.

This module reads the embedded EXIF block of an image and returns it as a
flat mapping of tag name to string value:
- RAW files (CR2, NEF, DNG, etc.) and HEIC/HEIF: Uses exifread library
- Standard formats (JPEG, PNG, TIFF, WebP): Uses Pillow/PIL library

Extraction never raises. A file that cannot be opened or parsed yields None;
an image that opens but carries no EXIF block yields an empty mapping.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import exifread
from PIL import Image
from PIL.ExifTags import GPSTAGS, IFD, TAGS

from file_inventory.scanner.classify import get_extension, is_heif_extension, is_raw_extension

logger = logging.getLogger(__name__)

# IFD0 entries that only hold offsets to the sub-IFDs read below
_POINTER_TAGS = {"ExifOffset", "GPSInfo", "InteropOffset"}

# exifread keys from these groups describe the embedded thumbnail, not the image
_SKIPPED_EXIFREAD_GROUPS = {"Thumbnail", "JPEGThumbnail", "TIFFThumbnail"}


def extract_exif_tags(file_path: Union[str, Path]) -> Optional[Dict[str, str]]:
    """
    Extract EXIF tags from an image file.

    Args:
        file_path: Path to the image file

    Returns:
        Mapping of tag name to value (e.g. {"Make": "Canon"}), an empty
        mapping if the image has no EXIF data, or None if extraction fails

    Example:
        >>> tags = extract_exif_tags(Path("photo.jpg"))
        >>> if tags:
        ...     print(f"Camera: {tags.get('Make')} {tags.get('Model')}")
    """
    file_path = Path(file_path)
    extension = get_extension(file_path.name)

    try:
        if is_raw_extension(extension) or is_heif_extension(extension):
            return _extract_with_exifread(file_path)
        return _extract_with_pillow(file_path)
    except Exception as e:
        logger.warning("Failed to extract EXIF from %s: %s", file_path, e)
        return None


def _extract_with_pillow(file_path: Path) -> Dict[str, str]:
    """
    Read the base, Exif and GPS IFDs with Pillow.

    Tag ids without a known name are dropped.
    """
    tags: Dict[str, str] = {}

    with Image.open(file_path) as img:
        exif = img.getexif()

        for tag_id, value in exif.items():
            name = TAGS.get(tag_id)
            if name and name not in _POINTER_TAGS:
                _add_tag(tags, name, value)

        for ifd, names in ((IFD.Exif, TAGS), (IFD.GPSInfo, GPSTAGS)):
            for tag_id, value in exif.get_ifd(ifd).items():
                name = names.get(tag_id)
                if name and name not in _POINTER_TAGS:
                    _add_tag(tags, name, value)

    if not tags:
        logger.debug("No EXIF data found in %s", file_path)

    return tags


def _extract_with_exifread(file_path: Path) -> Dict[str, str]:
    """
    Read EXIF tags with exifread.

    exifread keys look like "Image Make" or "EXIF DateTimeOriginal"; the
    group prefix is split off at the first space.
    """
    tags: Dict[str, str] = {}

    with open(file_path, "rb") as f:
        raw_tags = exifread.process_file(f, details=False)

    for key, value in raw_tags.items():
        group, sep, name = key.partition(" ")
        if group in _SKIPPED_EXIFREAD_GROUPS or not sep or not name:
            continue
        _add_tag(tags, name, value)

    if not tags:
        logger.debug("No EXIF data found in %s", file_path)

    return tags


def _add_tag(tags: Dict[str, str], name: str, value: Any) -> None:
    """Store a tag as a string, keeping the first value seen for a name."""
    if name in tags:
        return
    tags[name] = _clean_value(value)


def _clean_value(value: Any) -> str:
    """
    Convert an EXIF value to a string.

    Bytes are decoded and characters UTF-8 cannot encode are replaced;
    trailing nulls and surrounding whitespace are removed.
    """
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    value = str(value).encode("utf-8", errors="replace").decode("utf-8")
    return value.strip().rstrip("\x00").strip()
