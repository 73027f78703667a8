"""Exception hierarchy for G2iCal."""

from typing import Optional


class CalendarExportError(Exception):
    """Base class for errors raised by G2iCal."""


class ExportFailure(CalendarExportError):
    """Writing the calendar file failed.

    The underlying ``OSError`` is chained as ``__cause__`` and kept on
    ``cause``. The destination file is left as it was before the attempt.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Failed to export iCal to file: {path}"
        if cause is not None:
            message = f"{message} ({cause})"
        super().__init__(message)


class DataSourceError(CalendarExportError):
    """The calendar data source could not list events."""

    def __init__(self, calendar_id: str, cause: Optional[BaseException] = None):
        self.calendar_id = calendar_id
        self.cause = cause
        message = f"Could not load events for calendar '{calendar_id}'"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class NoEventsLoadedError(CalendarExportError):
    """An export was requested before any events were loaded."""

    def __init__(self):
        super().__init__("No events loaded to export.")
