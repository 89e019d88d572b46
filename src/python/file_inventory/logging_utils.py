"""
Logging utilities for file-inventory.

Example:
    >>> from file_inventory.logging_utils import setup_logging
    >>> setup_logging("INFO")
    >>> import logging
    >>> logger = logging.getLogger(__name__)
    >>> logger.info("Scan started")
"""

import logging
import sys
from typing import Optional, Union


def setup_logging(
    level: Union[str, int] = logging.WARNING,
    format_string: Optional[str] = None,
) -> None:
    """Set up logging configuration for the application.

    Log records go to stderr so that stdout only carries the confirmation
    message.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages

    Example:
        >>> setup_logging('DEBUG')
        >>> setup_logging(logging.INFO)  # Numeric level
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(console_handler)

    # Set level for third-party libraries to reduce noise
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('exifread').setLevel(logging.ERROR)
