import json
from pathlib import Path

import pytest

from g2ical.__main__ import main
from g2ical.config.constants import DIRECTORY_ENV_VAR, FILE_NAME_ENV_VAR, TIMEZONE_ENV_VAR
import g2ical.storage.settings_storage as settings_storage

EVENTS = {
    "items": [
        {
            "summary": "Standup",
            "start": {"dateTime": "2024-03-15T09:00:00Z"},
            "end": {"dateTime": "2024-03-15T09:15:00Z"},
        },
        {
            "summary": "Holiday",
            "start": {"date": "2024-03-20"},
            "end": {"date": "2024-03-21"},
        },
    ]
}


@pytest.fixture
def dump(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # Keep the real per-user settings out of the tests
    monkeypatch.setattr(settings_storage.sys, "platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in (FILE_NAME_ENV_VAR, DIRECTORY_ENV_VAR, TIMEZONE_ENV_VAR):
        monkeypatch.delenv(var, raising=False)

    path = tmp_path / "events.json"
    path.write_text(json.dumps(EVENTS), encoding="utf-8")
    return path


def test_cli_exports_file(dump: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    code = main([
        str(dump), "--from", "2024-03-01", "--to", "2024-03-31",
        "--directory", str(tmp_path), "--file-name", "out.ics", "--timezone", "UTC",
    ])

    assert code == 0
    text = (tmp_path / "out.ics").read_text(encoding="utf-8")
    assert "DTSTART:20240320T000000Z" in text
    out = capsys.readouterr().out
    assert "Loaded 2 events successfully" in out
    assert "Standup\t2024-03-15 09:00\t2024-03-15 09:15" in out


def test_cli_reports_missing_directory(dump: Path, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    code = main([
        str(dump), "--from", "2024-03-01", "--to", "2024-03-31",
        "--directory", str(tmp_path / "missing"), "--timezone", "UTC",
    ])

    assert code == 1
    assert "Failed to export events" in capsys.readouterr().err


def test_cli_rejects_bad_dates(dump: Path) -> None:
    assert main([str(dump), "--from", "yesterday", "--to", "2024-03-31"]) == 2


def test_cli_saves_settings(dump: Path, tmp_path: Path) -> None:
    code = main([
        str(dump), "--from", "2024-03-01", "--to", "2024-03-31",
        "--directory", str(tmp_path), "--timezone", "UTC", "--save-settings",
    ])

    assert code == 0
    assert settings_storage.load_export_config().directory == str(tmp_path)
