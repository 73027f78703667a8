"""User-friendly error message handling."""

import errno

from g2ical.config.constants import STATUS_EXPORT_FAILED, STATUS_LOAD_FAILED
from g2ical.exceptions.errors import (
    DataSourceError,
    ExportFailure,
    NoEventsLoadedError,
)


# Messages for common I/O causes of a failed export
OS_ERROR_MESSAGES = {
    errno.ENOENT: "the target folder does not exist",
    errno.ENOTDIR: "the target folder does not exist",
    errno.EACCES: "permission denied",
    errno.EPERM: "permission denied",
    errno.ENOSPC: "the disk is full",
    errno.EROFS: "the target folder is read-only",
}


def get_user_friendly_error(error: Exception) -> str:
    """Convert an exception to a user-friendly error message.

    Args:
        error: The exception to convert.

    Returns:
        A user-friendly error message string.
    """
    if isinstance(error, NoEventsLoadedError):
        return str(error)

    if isinstance(error, ExportFailure):
        reason = _describe_cause(error.cause)
        return STATUS_EXPORT_FAILED.format(error=f"could not write {error.path} ({reason})")

    if isinstance(error, DataSourceError):
        reason = str(error.cause) if error.cause is not None else "unknown error"
        return STATUS_LOAD_FAILED.format(error=reason)

    return f"An error occurred: {error}"


def format_error_for_status(error: Exception) -> str:
    """Format an error for display in the status bar.

    Args:
        error: The exception to format.

    Returns:
        A short status message.
    """
    friendly = get_user_friendly_error(error)
    # Truncate for status bar
    if len(friendly) > 100:
        return friendly[:97] + "..."
    return friendly


def _describe_cause(cause) -> str:
    if isinstance(cause, OSError) and cause.errno in OS_ERROR_MESSAGES:
        return OS_ERROR_MESSAGES[cause.errno]
    if cause is not None:
        return str(cause)
    return "unknown error"
