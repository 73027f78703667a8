"""Configuration module for G2iCal."""

from g2ical.config.settings import DateRange, ExportConfig
from g2ical.config.constants import (
    DEFAULT_FILE_NAME,
    DEFAULT_EXPORT_DIRECTORY,
    DEFAULT_PRODUCT_NAME,
    DEFAULT_TIMEZONE,
    ICS_VERSION,
    FOLD_LINE_LENGTH,
)

__all__ = [
    "DateRange",
    "ExportConfig",
    "DEFAULT_FILE_NAME",
    "DEFAULT_EXPORT_DIRECTORY",
    "DEFAULT_PRODUCT_NAME",
    "DEFAULT_TIMEZONE",
    "ICS_VERSION",
    "FOLD_LINE_LENGTH",
]
