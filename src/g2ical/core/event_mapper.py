"""Mapping of raw calendar-service events into EventRecords.

Raw events follow the remote service's event resource shape::

    {
        "summary": "Team sync",
        "location": "Room 4",
        "description": "Weekly",
        "start": {"dateTime": "2024-03-15T09:00:00+01:00", "timeZone": "Europe/Berlin"},
        "end": {"dateTime": "2024-03-15T10:00:00+01:00"},
    }

All-day events carry ``{"date": "2024-03-15"}`` instead of ``dateTime``.
Those resolve to 00:00 in the export's configured time zone; the exclusive
end date of an all-day event resolves the same way.

Mapping never raises. Missing text fields become empty strings and missing
or unparseable times are patched up and reported as MappingAnomaly entries,
so one malformed upstream event cannot abort an export batch.
"""

import logging
import re
from datetime import date, datetime
from typing import Iterable, List, Mapping, Optional

import pytz
from dateutil import parser as dateutil_parser

from g2ical.config.constants import DEFAULT_TIMEZONE
from g2ical.core.event_model import EventRecord, MappingAnomaly, MappingResult
from g2ical.core.timezone_utils import attach_timezone, resolve_timezone, start_of_day, to_utc

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def map_events(raw_events: Iterable, tz: Optional[str] = DEFAULT_TIMEZONE) -> MappingResult:
    """Map a batch of raw events, preserving their order.

    Args:
        raw_events: Raw event mappings as returned by the data source.
        tz: Export time zone used for all-day and floating times.

    Returns:
        MappingResult with one record per input item and any anomalies.
    """
    export_tz, _ = resolve_timezone(tz, "export time zone")
    result = MappingResult()
    for index, raw in enumerate(raw_events or []):
        result.records.append(_map_one(raw, export_tz, index, result.anomalies))
    return result


def map_event(
    raw,
    tz: Optional[str] = DEFAULT_TIMEZONE,
    anomalies: Optional[List[MappingAnomaly]] = None,
    index: int = 0,
) -> EventRecord:
    """Map a single raw event into an EventRecord.

    Args:
        raw: The raw event mapping; any field may be missing.
        tz: Export time zone used for all-day and floating times.
        anomalies: Optional list that receives any MappingAnomaly found.
        index: Position of the event in its batch, for anomaly reports.

    Returns:
        The normalized EventRecord.
    """
    export_tz, _ = resolve_timezone(tz, "export time zone")
    return _map_one(raw, export_tz, index, anomalies if anomalies is not None else [])


def _map_one(raw, export_tz, index: int, anomalies: List[MappingAnomaly]) -> EventRecord:
    if not isinstance(raw, Mapping):
        _note(anomalies, index, "event", f"expected a mapping, got {type(raw).__name__}")
        return EventRecord(summary="", start=EPOCH, end=EPOCH)

    start = _resolve_time(raw, "start", export_tz, index, anomalies)
    end = _resolve_time(raw, "end", export_tz, index, anomalies)

    if start is None and end is None:
        _note(anomalies, index, "start", "no usable start or end time, using the Unix epoch")
        start = end = EPOCH
    elif start is None:
        _note(anomalies, index, "start", "no usable start time, using the end time")
        start = end
    elif end is None:
        _note(anomalies, index, "end", "no usable end time, using the start time")
        end = start

    return EventRecord(
        summary=_text(raw, "summary", index, anomalies),
        start=start,
        end=end,
        location=_text(raw, "location", index, anomalies),
        description=_text(raw, "description", index, anomalies),
    )


def _resolve_time(raw: Mapping, key: str, export_tz, index: int,
                  anomalies: List[MappingAnomaly]) -> Optional[datetime]:
    """Resolve raw[key] to an aware datetime, or None when absent or unusable.

    A usable time must also convert to UTC, so every returned value can be
    serialized.
    """
    value = raw.get(key)
    event_tz_name = None
    all_day = False

    if isinstance(value, Mapping):
        event_tz_name = value.get("timeZone")
        if value.get("dateTime"):
            value = value.get("dateTime")
        else:
            value = value.get("date")
            all_day = True

    if value is None or value == "":
        return None

    try:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = start_of_day(value, export_tz)
        else:
            text = str(value).strip()
            if all_day or _DATE_ONLY.match(text):
                parsed = start_of_day(dateutil_parser.isoparse(text).date(), export_tz)
            else:
                parsed = dateutil_parser.isoparse(text)

        if parsed.tzinfo is None:
            zone = export_tz
            if event_tz_name:
                zone, warning = resolve_timezone(str(event_tz_name), raw.get("summary"))
                if warning:
                    _note(anomalies, index, key, warning)
            parsed = attach_timezone(zone, parsed)
        to_utc(parsed)
    except (ValueError, OverflowError) as exc:
        _note(anomalies, index, key, f"unusable time {value!r} ({exc})")
        return None
    return parsed


def _text(raw: Mapping, key: str, index: int, anomalies: List[MappingAnomaly]) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        _note(anomalies, index, key, f"expected text, got {type(value).__name__}")
        value = str(value)
    # Lone surrogates (valid in JSON, not in UTF-8) are replaced
    cleaned = value.encode("utf-8", "replace").decode("utf-8")
    if cleaned != value:
        _note(anomalies, index, key, "text is not valid UTF-8, replaced bad characters")
    return cleaned


def _note(anomalies: List[MappingAnomaly], index: int, field: str, message: str) -> None:
    anomaly = MappingAnomaly(index=index, field=field, message=message)
    logger.warning("Mapping anomaly in %s", anomaly)
    anomalies.append(anomaly)
