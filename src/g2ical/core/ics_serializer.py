"""Rendering of EventRecords into an iCalendar document and writing it to disk.

The document is assembled line by line, then every physical line is folded
at 75 characters and terminated with CRLF regardless of the host platform.

Folding counts characters, not octets, and knows nothing about escape
sequences: a fold may land between a backslash and the character it escapes,
or inside a character that encodes to several UTF-8 bytes. Importers that
unfold by RFC 5545 rules reassemble the value correctly; fold positions are
kept stable for consumers that compare output byte for byte.
"""

import errno
import logging
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

from icalendar import vDatetime, vText

from g2ical.config.constants import (
    DEFAULT_PRODUCT_NAME,
    FOLD_CONTINUATION_LENGTH,
    FOLD_CONTINUATION_PREFIX,
    FOLD_LINE_LENGTH,
    ICS_LINE_ENDING,
    ICS_PRODID_TEMPLATE,
    ICS_VERSION,
)
from g2ical.config.settings import ExportConfig
from g2ical.core.event_model import EventRecord
from g2ical.core.timezone_utils import to_utc
from g2ical.exceptions.errors import ExportFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalendarDocument:
    """An ordered, immutable batch of events plus envelope metadata."""

    events: Tuple[EventRecord, ...] = ()
    product_name: str = DEFAULT_PRODUCT_NAME

    @classmethod
    def from_records(cls, records: Iterable[EventRecord],
                     product_name: str = DEFAULT_PRODUCT_NAME) -> "CalendarDocument":
        return cls(events=tuple(records), product_name=product_name)

    def content_lines(self) -> List[str]:
        """Unfolded content lines, without terminators."""
        lines = [
            "BEGIN:VCALENDAR",
            f"VERSION:{ICS_VERSION}",
            "PRODID:" + ICS_PRODID_TEMPLATE.format(product_name=self.product_name),
        ]
        for event in self.events:
            lines.extend(_event_lines(event))
        lines.append("END:VCALENDAR")
        return lines

    def to_ical(self) -> str:
        """Render the folded, CRLF-terminated document text."""
        out = []
        for line in self.content_lines():
            for segment in fold_line(line):
                out.append(segment)
                out.append(ICS_LINE_ENDING)
        return "".join(out)


def render(records: Iterable[EventRecord], product_name: str = DEFAULT_PRODUCT_NAME) -> str:
    """Render records into a complete iCalendar document.

    Args:
        records: Event records, emitted in the given order.
        product_name: Name placed in the PRODID line.

    Returns:
        Document text with CRLF line endings and folded lines.
    """
    return CalendarDocument.from_records(records, product_name).to_ical()


def fold_line(line: str) -> List[str]:
    """Split one content line into its folded physical lines.

    The first segment holds up to 75 characters; each continuation segment
    is a single space followed by up to 74 characters.
    """
    if len(line) <= FOLD_LINE_LENGTH:
        return [line]

    segments = [line[:FOLD_LINE_LENGTH]]
    remaining = line[FOLD_LINE_LENGTH:]
    while remaining:
        segments.append(FOLD_CONTINUATION_PREFIX + remaining[:FOLD_CONTINUATION_LENGTH])
        remaining = remaining[FOLD_CONTINUATION_LENGTH:]
    return segments


def export_to_file(document: str, directory: str, file_name: str) -> Path:
    """Write rendered document text to ``directory/file_name``.

    The text goes to a temporary file in the target directory which then
    replaces the destination, so a failed write leaves any previous file
    untouched. An existing file keeps its permission bits.

    Args:
        document: Rendered document text.
        directory: Existing, writable target directory.
        file_name: Name of the file to create or overwrite.

    Returns:
        Path of the written file.

    Raises:
        ExportFailure: If the directory is missing or not writable, the text
            cannot be encoded, or any other I/O error occurs.
    """
    target = Path(directory) / file_name
    display_path = f"{directory}/{file_name}"
    tmp_path = None

    try:
        data = document.encode("utf-8")
        if not Path(directory).is_dir():
            raise FileNotFoundError(errno.ENOENT, "No such directory", str(directory))
        mode = _target_mode(target)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".g2ical-", suffix=".tmp")
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        if mode is not None:
            os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
        tmp_path = None
    except (OSError, UnicodeError) as exc:
        logger.error("Failed to export calendar to %s: %s", display_path, exc)
        raise ExportFailure(display_path, exc) from exc
    finally:
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp_path)

    logger.info("Exported %d bytes to %s", len(data), target)
    return target


def export_calendar(records: Iterable[EventRecord], config: ExportConfig) -> Path:
    """Render records and write them where ``config`` points."""
    document = render(records, product_name=config.product_name)
    return export_to_file(document, config.directory, config.file_name)


def _event_lines(event: EventRecord) -> List[str]:
    lines = ["BEGIN:VEVENT"]
    if event.summary:
        lines.append(f"SUMMARY:{_escape(event.summary)}")
    lines.append(f"DTSTART:{_format_timestamp(event)}")
    lines.append(f"DTEND:{_format_timestamp(event, end=True)}")
    if event.location:
        lines.append(f"LOCATION:{_escape(event.location)}")
    if event.description:
        lines.append(f"DESCRIPTION:{_escape(event.description)}")
    lines.append("END:VEVENT")
    return lines


def _escape(text: str) -> str:
    # Bare CRs would otherwise survive escaping and break the CRLF framing
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    # vText encodes to UTF-8; unpaired surrogates become "?"
    text = text.encode("utf-8", "replace").decode("utf-8")
    return vText(text).to_ical().decode("utf-8")


def _format_timestamp(event: EventRecord, end: bool = False) -> str:
    value = event.end if end else event.start
    return vDatetime(to_utc(value)).to_ical().decode("utf-8")


def _target_mode(target: Path):
    """Permission bits for the written file; None where modes do not apply."""
    if os.name != "posix":
        return None
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        # mkstemp creates owner-only files; new exports are meant to be shared
        return 0o644
