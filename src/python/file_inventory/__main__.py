"""Allow running the scanner with ``python -m file_inventory``."""

import sys

from file_inventory.cli import main

sys.exit(main())
