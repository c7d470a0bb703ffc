"""In-memory record models for Aimee."""

from aimee.models.log_entry import LogEntry, LogEntryType
from aimee.models.wine import DEFAULT_WINE_TYPE, WineRecord

__all__ = [
    "DEFAULT_WINE_TYPE",
    "LogEntry",
    "LogEntryType",
    "WineRecord",
]
