"""Persistence of export settings in a per-user .env file."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values, set_key

from g2ical.config.constants import (
    APP_DIR_NAME,
    DIRECTORY_ENV_VAR,
    FILE_NAME_ENV_VAR,
    SETTINGS_FILE_NAME,
    TIMEZONE_ENV_VAR,
)
from g2ical.config.settings import ExportConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def get_user_config_dir() -> Path:
    """Return a per-user config directory that works across platforms.

    Returns:
        Path to the user's config directory for this application.
    """
    if sys.platform.startswith("win"):
        base_str = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA")
        base = Path(base_str) if base_str else (Path.home() / "AppData" / "Roaming")
        return base / APP_DIR_NAME

    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_DIR_NAME

    # Linux and other Unix-like systems
    base_str = os.environ.get("XDG_CONFIG_HOME")
    base = Path(base_str) if base_str else (Path.home() / ".config")
    return base / APP_DIR_NAME


def get_settings_file_path() -> Path:
    return get_user_config_dir() / SETTINGS_FILE_NAME


def load_export_config(path: Optional[PathLike] = None) -> ExportConfig:
    """Load export settings, falling back to defaults.

    Process environment variables override values from the settings file.
    A missing or unreadable file is not an error.

    Args:
        path: Settings file to read (defaults to the per-user location).

    Returns:
        The resolved ExportConfig.
    """
    settings_path = Path(path) if path is not None else get_settings_file_path()
    values = {}
    if settings_path.exists():
        try:
            values = dotenv_values(settings_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Error loading settings from %s, using defaults: %s", settings_path, e)

    def pick(var: str) -> Optional[str]:
        return os.environ.get(var) or values.get(var)

    return ExportConfig(
        file_name=pick(FILE_NAME_ENV_VAR),
        directory=pick(DIRECTORY_ENV_VAR),
        timezone=pick(TIMEZONE_ENV_VAR),
    )


def save_export_config(config: ExportConfig, path: Optional[PathLike] = None) -> Path:
    """Write export settings to the settings file.

    Args:
        config: Settings to store.
        path: Settings file to write (defaults to the per-user location).

    Returns:
        Path of the settings file.

    Raises:
        OSError: If the file cannot be written.
    """
    settings_path = Path(path) if path is not None else get_settings_file_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.touch(exist_ok=True)
    harden_file_permissions(settings_path)

    set_key(str(settings_path), FILE_NAME_ENV_VAR, config.file_name)
    set_key(str(settings_path), DIRECTORY_ENV_VAR, config.directory)
    set_key(str(settings_path), TIMEZONE_ENV_VAR, config.timezone)
    logger.debug("Saved export settings to %s", settings_path)
    return settings_path


def harden_file_permissions(path: Path) -> None:
    """Best-effort: restrict permissions to the current user on POSIX.

    Args:
        path: Path to the file to secure.
    """
    if os.name != "posix":
        return
    try:
        path.chmod(0o600)
    except OSError as e:
        logger.warning("Could not tighten permissions on %s: %s", path, e)
