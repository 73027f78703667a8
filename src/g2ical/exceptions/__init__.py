"""Custom exceptions for G2iCal."""

from g2ical.exceptions.errors import (
    CalendarExportError,
    ExportFailure,
    DataSourceError,
    NoEventsLoadedError,
)

__all__ = [
    "CalendarExportError",
    "ExportFailure",
    "DataSourceError",
    "NoEventsLoadedError",
]
