"""
Command-line interface for file-inventory.

Scans the current working directory and writes file_data.json into it.

Usage:
    # Scan the current directory
    file-inventory

    # Same, with debug logging and an explicit config file
    file-inventory --verbose --config ~/inventory.yaml
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from file_inventory.__version__ import __version__
from file_inventory.config import get_indent, get_log_level, get_output_filename, load_config
from file_inventory.logging_utils import setup_logging
from file_inventory.scanner import scan_directory
from file_inventory.writer import write_document

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="file-inventory",
        description="Write size, type, timestamps and EXIF data of every file "
                    "in the current directory to a JSON document.",
    )
    parser.add_argument("--config", "-c", type=Path, help="Configuration file path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run a scan of the working directory. Returns the process exit code."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        log_level = "DEBUG" if args.verbose else get_log_level(config)
        output_filename = get_output_filename(config)
        indent = get_indent(config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(log_level)

    try:
        directory = Path.cwd()
        records = scan_directory(directory)
        write_document(records, directory, filename=output_filename, indent=indent)
    except (OSError, TypeError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1

    print(f"File data has been written to {output_filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
