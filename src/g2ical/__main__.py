"""Entry point for running g2ical as a module.

Usage: python -m g2ical EVENTS_JSON --from 2024-03-01 --to 2024-03-31
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from dateutil import parser as dateutil_parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="g2ical",
        description="Export calendar events from an events listing dump to an .ics file.",
    )
    parser.add_argument("events_json", help="JSON dump of the calendar's events listing")
    parser.add_argument("--from", dest="from_date", required=True, help="first day (YYYY-MM-DD)")
    parser.add_argument("--to", dest="to_date", required=True, help="last day (YYYY-MM-DD)")
    parser.add_argument("--calendar-id", default="primary", help="calendar to export (default: primary)")
    parser.add_argument("--directory", help="target directory (default: from settings)")
    parser.add_argument("--file-name", help="target file name (default: from settings)")
    parser.add_argument("--timezone", help="zone for all-day events and display (default: from settings)")
    parser.add_argument("--save-settings", action="store_true",
                        help="remember directory, file name and time zone")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = build_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    from g2ical.config.settings import DateRange
    from g2ical.core.data_source import JsonFileDataSource
    from g2ical.core.export_session import ExportSession
    from g2ical.exceptions.errors import CalendarExportError
    from g2ical.storage.settings_storage import load_export_config, save_export_config
    from g2ical.ui.error_messages import get_user_friendly_error

    try:
        date_range = DateRange(
            start=dateutil_parser.isoparse(args.from_date).date(),
            end=dateutil_parser.isoparse(args.to_date).date(),
        )
    except ValueError as e:
        print(f"Invalid date: {e}", file=sys.stderr)
        return 2

    config = load_export_config()
    overrides = {
        "directory": args.directory,
        "file_name": args.file_name,
        "timezone": args.timezone,
    }
    config = replace(config, **{k: v for k, v in overrides.items() if v})

    if args.save_settings:
        save_export_config(config)

    session = ExportSession(JsonFileDataSource(args.events_json), config)
    try:
        result = session.load(args.calendar_id, date_range)
        for row in result.rows:
            print("\t".join(row.as_tuple()))
        print(result.status)
        print(session.export())
    except CalendarExportError as e:
        print(get_user_friendly_error(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
