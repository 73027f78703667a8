"""Settings storage for G2iCal."""

from g2ical.storage.settings_storage import (
    get_user_config_dir,
    get_settings_file_path,
    load_export_config,
    save_export_config,
)

__all__ = [
    "get_user_config_dir",
    "get_settings_file_path",
    "load_export_config",
    "save_export_config",
]
