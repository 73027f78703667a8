"""Core export logic for G2iCal."""

from g2ical.core.event_model import EventRecord, MappingAnomaly, MappingResult
from g2ical.core.event_mapper import map_event, map_events
from g2ical.core.ics_serializer import (
    CalendarDocument,
    export_calendar,
    export_to_file,
    fold_line,
    render,
)
from g2ical.core.data_source import CalendarDataSource, JsonFileDataSource

__all__ = [
    "EventRecord",
    "MappingAnomaly",
    "MappingResult",
    "map_event",
    "map_events",
    "CalendarDocument",
    "export_calendar",
    "export_to_file",
    "fold_line",
    "render",
    "CalendarDataSource",
    "JsonFileDataSource",
]
