"""Presentation-layer adapters: display rows and status text."""

from g2ical.ui.display_rows import DisplayRow, to_display_rows
from g2ical.ui.error_messages import format_error_for_status, get_user_friendly_error

__all__ = [
    "DisplayRow",
    "to_display_rows",
    "format_error_for_status",
    "get_user_friendly_error",
]
