"""
Filesystem metadata for scanned files.

Timestamps are reported as whole seconds since the Unix epoch. A timestamp
the platform cannot report (e.g. creation time on most Linux filesystems)
is returned as None instead of failing the read.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from file_inventory.models.record import FileStat

logger = logging.getLogger(__name__)


def read_file_metadata(file_path: Union[str, Path]) -> FileStat:
    """
    Read size and timestamps for a file.

    Args:
        file_path: Path to the file

    Returns:
        FileStat with the size and the three (optional) timestamps

    Raises:
        OSError: If the file cannot be stat'ed (vanished, permission denied, ...)
    """
    stats = os.stat(file_path)

    return FileStat(
        size=stats.st_size,
        created_time=_epoch_seconds(getattr(stats, "st_birthtime", None)),
        modified_time=_epoch_seconds(stats.st_mtime),
        accessed_time=_epoch_seconds(stats.st_atime),
    )


def _epoch_seconds(value: Optional[float]) -> Optional[int]:
    """Truncate a stat timestamp to whole seconds; pre-epoch values are dropped."""
    if value is None:
        return None
    if value < 0:
        logger.debug("Ignoring pre-epoch timestamp %s", value)
        return None
    return int(value)
