"""Centralized constants for G2iCal.

Envelope values, export defaults and the status strings handed to the
presentation layer live here so the core modules never hardcode them.
"""

import os

# ICS calendar constants
ICS_VERSION = "2.0"
DEFAULT_PRODUCT_NAME = "My Calendar iCal Exporter"
ICS_PRODID_TEMPLATE = "-//{product_name}//EN"
ICS_LINE_ENDING = "\r\n"

# Line folding (RFC 5545 section 3.1)
FOLD_LINE_LENGTH = 75
FOLD_CONTINUATION_LENGTH = 74
FOLD_CONTINUATION_PREFIX = " "

# Export defaults
DEFAULT_FILE_NAME = "calendar_export.ics"
DEFAULT_EXPORT_DIRECTORY = os.path.join(os.path.expanduser("~"), "Downloads")
DEFAULT_TIMEZONE = "local"

# Settings storage
APP_DIR_NAME = "G2iCal"
SETTINGS_FILE_NAME = "settings.env"
FILE_NAME_ENV_VAR = "G2ICAL_EXPORT_FILE_NAME"
DIRECTORY_ENV_VAR = "G2ICAL_EXPORT_DIRECTORY"
TIMEZONE_ENV_VAR = "G2ICAL_TIMEZONE"

# Display table
DISPLAY_DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DISPLAY_COLUMNS = ("Name", "Start", "End", "Location", "Description")

# Status callback messages
STATUS_LOADED = "Loaded {count} events successfully"
STATUS_EXPORTED = "Exported events to {path} successfully!"
STATUS_LOAD_FAILED = "Failed to load events: {error}"
STATUS_EXPORT_FAILED = "Failed to export events: {error}"
STATUS_NO_EVENTS = "No events loaded to export."

# Timezone abbreviation to IANA zone mapping
# Maps common (and DST) abbreviations to canonical IANA zones that understand DST
ABBR_TO_TZ = {
    # North America
    "EST": "America/New_York",
    "EDT": "America/New_York",
    "CST": "America/Chicago",
    "CDT": "America/Chicago",
    "MST": "America/Denver",
    "MDT": "America/Denver",
    "PST": "America/Los_Angeles",
    "PDT": "America/Los_Angeles",
    # United Kingdom / Europe
    "GMT": "Europe/London",
    "BST": "Europe/London",
    "CET": "Europe/Paris",
    "CEST": "Europe/Paris",
    "EET": "Europe/Athens",
    "EEST": "Europe/Athens",
    # Australia
    "AEST": "Australia/Sydney",
    "AEDT": "Australia/Sydney",
    # Asia
    "IST": "Asia/Kolkata",
}
