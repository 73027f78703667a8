"""
G2iCal - Calendar to iCalendar Exporter

Maps events fetched from a remote calendar service into normalized records
and writes them as an RFC 5545 .ics file.
"""

__version__ = "2.0.0"

# Public API - import commonly used components
from g2ical.config.settings import DateRange, ExportConfig
from g2ical.exceptions.errors import (
    CalendarExportError,
    DataSourceError,
    ExportFailure,
    NoEventsLoadedError,
)
from g2ical.core.event_model import EventRecord, MappingAnomaly
from g2ical.core.event_mapper import map_event, map_events
from g2ical.core.ics_serializer import CalendarDocument, export_calendar, export_to_file, render
from g2ical.core.export_session import ExportSession, LoadResult
from g2ical.ui.display_rows import DisplayRow, to_display_rows

__all__ = [
    # Version
    "__version__",
    # Config
    "DateRange",
    "ExportConfig",
    # Exceptions
    "CalendarExportError",
    "DataSourceError",
    "ExportFailure",
    "NoEventsLoadedError",
    # Core
    "EventRecord",
    "MappingAnomaly",
    "map_event",
    "map_events",
    "CalendarDocument",
    "export_calendar",
    "export_to_file",
    "render",
    "ExportSession",
    "LoadResult",
    # Presentation
    "DisplayRow",
    "to_display_rows",
]
