import os
import stat
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import pytz

import g2ical.core.ics_serializer as ics_serializer
from g2ical.config.settings import ExportConfig
from g2ical.core.event_model import EventRecord
from g2ical.core.ics_serializer import export_calendar, export_to_file, render
from g2ical.exceptions.errors import ExportFailure


@pytest.fixture
def records() -> list:
    start = datetime(2024, 3, 15, 9, 0, tzinfo=pytz.utc)
    return [
        EventRecord(summary="Standup", start=start, end=start + timedelta(minutes=15)),
        EventRecord(summary="Lunch", start=start + timedelta(hours=3),
                    end=start + timedelta(hours=4), location="Canteen"),
    ]


def test_export_writes_rendered_bytes(tmp_path: Path, records: list) -> None:
    document = render(records)

    target = export_to_file(document, str(tmp_path), "calendar.ics")

    assert target == tmp_path / "calendar.ics"
    assert target.read_bytes() == document.encode("utf-8")
    assert b"\r\nEND:VCALENDAR\r\n" in target.read_bytes()
    assert sorted(os.listdir(tmp_path)) == ["calendar.ics"]


def test_export_overwrites_existing_file(tmp_path: Path, records: list) -> None:
    existing = tmp_path / "calendar.ics"
    existing.write_text("old content that is much longer than nothing" * 100, encoding="utf-8")

    export_to_file(render(records), str(tmp_path), "calendar.ics")

    assert existing.read_bytes() == render(records).encode("utf-8")


def test_export_to_missing_directory_fails(tmp_path: Path, records: list) -> None:
    missing = tmp_path / "does-not-exist"

    with pytest.raises(ExportFailure) as excinfo:
        export_to_file(render(records), str(missing), "calendar.ics")

    assert isinstance(excinfo.value.__cause__, OSError)
    assert excinfo.value.cause is excinfo.value.__cause__
    assert excinfo.value.path == f"{missing}/calendar.ics"
    assert not missing.exists()


def test_failed_replace_keeps_previous_file(tmp_path: Path, records: list,
                                            monkeypatch: pytest.MonkeyPatch) -> None:
    existing = tmp_path / "calendar.ics"
    existing.write_bytes(b"previous")

    def failing_replace(src, dst):
        raise PermissionError(13, "Permission denied", str(dst))

    monkeypatch.setattr(ics_serializer.os, "replace", failing_replace)

    with pytest.raises(ExportFailure):
        export_to_file(render(records), str(tmp_path), "calendar.ics")

    assert existing.read_bytes() == b"previous"
    assert sorted(os.listdir(tmp_path)) == ["calendar.ics"]


def test_export_calendar_uses_config(tmp_path: Path, records: list) -> None:
    config = ExportConfig(file_name="team.ics", directory=str(tmp_path), product_name="Team Export")

    target = export_calendar(records, config)

    assert target == tmp_path / "team.ics"
    assert target.read_bytes() == render(records, product_name="Team Export").encode("utf-8")


def test_unencodable_document_fails_without_creating_file(tmp_path: Path) -> None:
    with pytest.raises(ExportFailure) as excinfo:
        export_to_file("BEGIN:VCALENDAR\r\nbad \ud800\r\n", str(tmp_path), "calendar.ics")

    assert isinstance(excinfo.value.__cause__, UnicodeEncodeError)
    assert os.listdir(tmp_path) == []


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_export_keeps_mode_of_existing_file(tmp_path: Path, records: list) -> None:
    existing = tmp_path / "calendar.ics"
    existing.write_bytes(b"previous")
    existing.chmod(0o600)

    export_to_file(render(records), str(tmp_path), "calendar.ics")

    assert stat.S_IMODE(existing.stat().st_mode) == 0o600


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_new_export_is_readable_by_others(tmp_path: Path, records: list) -> None:
    target = export_to_file(render(records), str(tmp_path), "calendar.ics")

    assert stat.S_IMODE(target.stat().st_mode) == 0o644
