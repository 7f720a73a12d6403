"""Move the files of one extension into a folder named after it."""

__version__ = "0.1.0"
