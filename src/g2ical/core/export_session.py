"""Load-then-export workflow between a data source and the presentation layer.

The session holds the records of the last load so the user can review them
before exporting. It never touches UI state; it returns display rows and
status strings and raises package exceptions for the caller to present.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from g2ical.config.constants import STATUS_EXPORTED, STATUS_LOADED
from g2ical.config.settings import DateRange, ExportConfig
from g2ical.core.data_source import CalendarDataSource
from g2ical.core.event_mapper import map_events
from g2ical.core.event_model import EventRecord, MappingAnomaly
from g2ical.core.ics_serializer import export_calendar
from g2ical.exceptions.errors import DataSourceError, NoEventsLoadedError
from g2ical.ui.display_rows import DisplayRow, to_display_rows

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """What the presentation layer needs after a load."""

    rows: List[DisplayRow]
    status: str
    anomalies: List[MappingAnomaly] = field(default_factory=list)


class ExportSession:
    """Loads events from a data source and exports them with a given config."""

    def __init__(self, source: CalendarDataSource, config: Optional[ExportConfig] = None):
        self.source = source
        self.config = config or ExportConfig()
        self._records: Optional[List[EventRecord]] = None

    @property
    def records(self) -> List[EventRecord]:
        return list(self._records or [])

    @property
    def has_events(self) -> bool:
        return self._records is not None

    def load(self, calendar_id: str, date_range: DateRange) -> LoadResult:
        """Fetch and map events of ``calendar_id`` within ``date_range``.

        Raises:
            DataSourceError: If the data source fails; previously loaded
                records are discarded.
        """
        try:
            raw_events = self.source.list_events(calendar_id, date_range)
        except Exception as exc:
            self._records = None
            logger.error("Failed to load events for %s: %s", calendar_id, exc)
            raise DataSourceError(calendar_id, exc) from exc

        mapped = map_events(raw_events, self.config.timezone)
        self._records = mapped.records
        if mapped.anomalies:
            logger.warning("%d mapping anomalies while loading %s",
                           len(mapped.anomalies), calendar_id)

        return LoadResult(
            rows=to_display_rows(mapped.records, self.config.timezone),
            status=STATUS_LOADED.format(count=len(mapped.records)),
            anomalies=mapped.anomalies,
        )

    def export(self, config: Optional[ExportConfig] = None) -> str:
        """Write the loaded events and return the status message.

        Raises:
            NoEventsLoadedError: If nothing has been loaded yet.
            ExportFailure: If the file could not be written.
        """
        if self._records is None:
            raise NoEventsLoadedError()
        target_config = config or self.config
        export_calendar(self._records, target_config)
        return STATUS_EXPORTED.format(path=target_config.full_export_path)

    def reset(self) -> None:
        self._records = None
