from datetime import datetime, timedelta

import pytz

from g2ical.config.constants import DISPLAY_COLUMNS
from g2ical.core.event_model import EventRecord
from g2ical.ui.display_rows import DisplayRow, to_display_rows


def test_rows_are_formatted_in_display_zone() -> None:
    start = datetime(2024, 3, 15, 8, 0, tzinfo=pytz.utc)
    record = EventRecord(
        summary="Team sync",
        start=start,
        end=start + timedelta(minutes=45),
        location="Room 4",
        description="Weekly",
    )

    rows = to_display_rows([record], tz="Europe/Berlin")

    assert rows == [DisplayRow("Team sync", "2024-03-15 09:00", "2024-03-15 09:45", "Room 4", "Weekly")]


def test_rows_keep_order_and_empty_fields() -> None:
    start = datetime(2024, 3, 15, 8, 0, tzinfo=pytz.utc)
    records = [
        EventRecord(summary="b", start=start, end=start),
        EventRecord(summary="", start=start, end=start),
        EventRecord(summary="a", start=start, end=start),
    ]

    rows = to_display_rows(records, tz="UTC")

    assert [row.title for row in rows] == ["b", "", "a"]
    assert rows[1].as_tuple() == ("", "2024-03-15 08:00", "2024-03-15 08:00", "", "")
    assert len(rows[0].as_tuple()) == len(DISPLAY_COLUMNS)


def test_no_records_gives_no_rows() -> None:
    assert to_display_rows([], tz="UTC") == []


def test_times_beyond_the_display_zone_range_keep_stored_time() -> None:
    start = datetime(9999, 12, 31, 23, 0, tzinfo=pytz.utc)
    record = EventRecord(summary="Last hour", start=start, end=start)

    rows = to_display_rows([record], tz="Asia/Tokyo")

    assert rows[0].start == "9999-12-31 23:00"
