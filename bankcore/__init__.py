"""String, validation, record-file and console helpers for a bank management system."""

__version__ = "0.1.0"

__all__ = ["big_number", "console", "records", "strings", "validators"]