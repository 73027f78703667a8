"""Timezone resolution and localization utilities."""

import logging
from datetime import date, datetime, time
from typing import Optional, Tuple

import pytz
import tzlocal
from dateutil import tz as du_tz

from g2ical.config.constants import ABBR_TO_TZ, DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)


def resolve_timezone(tz_str: Optional[str], context: Optional[str] = None) -> Tuple[object, Optional[str]]:
    """Resolve a timezone string to a timezone object.

    Args:
        tz_str: The timezone string (e.g., "EST", "Europe/Berlin", "local").
        context: Optional label (event title, setting name) for warning messages.

    Returns:
        Tuple of (timezone_object, warning_message or None).
    """
    tz_str_raw = tz_str or DEFAULT_TIMEZONE
    tz_upper = tz_str_raw.upper()
    warning = None

    if tz_upper == "LOCAL":
        # User's system zone (DST aware)
        local_tz_obj = tzlocal.get_localzone()
        tz_name = getattr(local_tz_obj, "zone", None) or getattr(local_tz_obj, "key", str(local_tz_obj))
    else:
        tz_name = ABBR_TO_TZ.get(tz_upper, tz_str_raw)

    try:
        resolved = pytz.timezone(tz_name)
    except (pytz.UnknownTimeZoneError, ValueError):
        # dateutil also understands POSIX-style and fixed-offset strings
        resolved = _gettz(tz_name)
        if resolved is None:
            resolved = pytz.utc
            where = f" for '{context}'" if context else ""
            warning = f"Couldn't resolve timezone '{tz_str_raw}'{where} - using UTC."
            logger.warning(warning)

    return resolved, warning


def _gettz(tz_name: str):
    """dateutil lookup that treats unreadable zone files as unknown zones."""
    try:
        return du_tz.gettz(tz_name)
    except (ValueError, OSError) as e:
        logger.debug("dateutil could not load timezone %r: %s", tz_name, e)
        return None


def attach_timezone(tzobj, naive_dt: datetime) -> datetime:
    """Return timezone-aware datetime, using proper DST rules where possible.

    Args:
        tzobj: The timezone object (pytz or dateutil).
        naive_dt: A naive datetime to attach the timezone to.

    Returns:
        A timezone-aware datetime.
    """
    if hasattr(tzobj, "localize"):
        try:
            return tzobj.localize(naive_dt, is_dst=None)
        except (pytz.AmbiguousTimeError, pytz.NonExistentTimeError):
            # Ambiguous or skipped wall time: take the DST reading
            return tzobj.localize(naive_dt, is_dst=True)
    return naive_dt.replace(tzinfo=tzobj)


def start_of_day(day: date, tzobj) -> datetime:
    """Midnight at the beginning of ``day`` in ``tzobj``."""
    return attach_timezone(tzobj, datetime.combine(day, time.min))


def to_utc(value: datetime) -> datetime:
    """Convert an aware datetime to UTC; naive values are read as system local time."""
    return value.astimezone(pytz.utc)
