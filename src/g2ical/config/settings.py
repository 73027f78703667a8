"""Export configuration values passed explicitly into export calls."""

from dataclasses import dataclass
from datetime import date

from g2ical.config.constants import (
    DEFAULT_EXPORT_DIRECTORY,
    DEFAULT_FILE_NAME,
    DEFAULT_PRODUCT_NAME,
    DEFAULT_TIMEZONE,
)


def _clean(value, default: str) -> str:
    if value is None:
        return default
    value = str(value).strip()
    return value or default


@dataclass
class ExportConfig:
    """Where and how an export is written.

    Blank values fall back to the defaults so a half-filled settings file
    still yields a usable target.
    """

    file_name: str = DEFAULT_FILE_NAME
    directory: str = DEFAULT_EXPORT_DIRECTORY
    timezone: str = DEFAULT_TIMEZONE
    product_name: str = DEFAULT_PRODUCT_NAME

    def __post_init__(self):
        self.file_name = _clean(self.file_name, DEFAULT_FILE_NAME)
        self.directory = _clean(self.directory, DEFAULT_EXPORT_DIRECTORY)
        self.timezone = _clean(self.timezone, DEFAULT_TIMEZONE)
        self.product_name = _clean(self.product_name, DEFAULT_PRODUCT_NAME)

    @property
    def full_export_path(self) -> str:
        """Directory and file name joined with a forward slash, as shown to users."""
        return f"{self.directory}/{self.file_name}"


@dataclass(frozen=True)
class DateRange:
    """Inclusive date range, validated by the caller."""

    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

