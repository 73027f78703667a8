"""Typed table rows for the event list shown to the user."""

from dataclasses import astuple, dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from g2ical.config.constants import DEFAULT_TIMEZONE, DISPLAY_DATETIME_FORMAT
from g2ical.core.event_model import EventRecord
from g2ical.core.timezone_utils import resolve_timezone


@dataclass(frozen=True)
class DisplayRow:
    """One row of the event table: Name, Start, End, Location, Description."""

    title: str
    start: str
    end: str
    location: str
    description: str

    def as_tuple(self) -> Tuple[str, ...]:
        return astuple(self)


def to_display_rows(records: Iterable[EventRecord],
                    tz: Optional[str] = DEFAULT_TIMEZONE) -> List[DisplayRow]:
    """Build display rows with times shown in ``tz``.

    Args:
        records: Mapped event records.
        tz: Time zone the user reads times in.

    Returns:
        One DisplayRow per record, in the same order.
    """
    display_tz, _ = resolve_timezone(tz, "display time zone")
    rows = []
    for record in records:
        rows.append(DisplayRow(
            title=record.summary,
            start=_format(record.start, display_tz),
            end=_format(record.end, display_tz),
            location=record.location,
            description=record.description,
        ))
    return rows


def _format(value: datetime, display_tz) -> str:
    try:
        return value.astimezone(display_tz).strftime(DISPLAY_DATETIME_FORMAT)
    except OverflowError:
        # Near datetime.max the display zone can be out of range; show the stored wall time
        return value.strftime(DISPLAY_DATETIME_FORMAT)
