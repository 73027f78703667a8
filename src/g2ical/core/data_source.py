"""Calendar data sources consumed by the export session."""

import json
import logging
from datetime import date, time, timedelta
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Tuple, Union

from dateutil import parser as dateutil_parser

from g2ical.config.settings import DateRange

logger = logging.getLogger(__name__)


class CalendarDataSource(Protocol):
    """Anything that can list raw events of one calendar within a date range."""

    def list_events(self, calendar_id: str, date_range: DateRange) -> List[Dict]:
        ...


class JsonFileDataSource:
    """Offline data source backed by a dump of the remote events listing.

    The file may hold a listing response (``{"items": [...]}``), a bare list
    of events, or an object mapping calendar ids to either of those.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def list_events(self, calendar_id: str, date_range: DateRange) -> List[Dict]:
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        items = _extract_items(payload, calendar_id)
        selected = [item for item in items if _overlaps(item, date_range)]
        logger.debug(
            "Selected %d of %d events from %s for calendar %s",
            len(selected), len(items), self.path, calendar_id,
        )
        return selected


def _extract_items(payload, calendar_id: Optional[str]) -> List:
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, Mapping):
        raise ValueError(f"Unsupported events payload of type {type(payload).__name__}")
    if "items" in payload:
        return list(payload.get("items") or [])
    if calendar_id and calendar_id in payload:
        return _extract_items(payload[calendar_id], None)
    raise ValueError(f"No events found for calendar '{calendar_id}'")


def _overlaps(item, date_range: DateRange) -> bool:
    """True if the event overlaps the range, like the service's timeMin/timeMax query.

    End values are exclusive: an all-day event ending on the first day of the
    range, or a timed event ending at its midnight, does not overlap it.
    Undated items are kept.
    """
    if not isinstance(item, Mapping):
        return True
    start = _bound(item.get("start"))
    if start is None:
        return True
    start_day = start[0]
    end = _bound(item.get("end"))
    if end is None:
        last_day = start_day
    else:
        end_day, exclusive = end
        if exclusive and end_day > date.min:
            end_day -= timedelta(days=1)
        last_day = max(start_day, end_day)
    return start_day <= date_range.end and last_day >= date_range.start


def _bound(value) -> Optional[Tuple[date, bool]]:
    """Day of a start/end value and whether that day is excluded."""
    if isinstance(value, Mapping):
        value = value.get("dateTime") or value.get("date")
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = dateutil_parser.isoparse(value)
    except (ValueError, OverflowError):
        return None
    return parsed.date(), parsed.time() == time.min
