"""Version information for file-inventory."""

__version__ = "0.1.0"
