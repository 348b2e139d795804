"""
------------------------------------------------------------------------------
Project:        Zahlschein2QR
File:           core/config.py
Version:        1.0.0
Description:    Manages application configuration using QSettings. Standardizes
                paths for configuration and data across different platforms
                (XDG standards on Linux).
------------------------------------------------------------------------------
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from PyQt6.QtCore import QSettings, QStandardPaths


class AppConfig:
    """
    Manages application configuration using QSettings.
    Singleton-like usage via class methods or single instance.
    """

    # Keys (Simple names, groups handled in methods)
    KEY_LOG_LEVEL: str = "log_level"
    KEY_LOG_COMPONENTS: str = "log_components"
    KEY_QR_BOX_SIZE: str = "box_size"
    KEY_QR_BORDER: str = "border"
    KEY_EXPORT_DIR: str = "export_dir"

    # Defaults
    DEFAULT_LOG_LEVEL: str = "WARNING"
    DEFAULT_QR_BOX_SIZE: int = 10
    DEFAULT_QR_BORDER: int = 4

    APP_ID: str = "zahlschein2qr"
    _active_profile: Optional[str] = None

    def __init__(self, profile: Optional[str] = None) -> None:
        """
        Initializes the configuration manager.

        Args:
            profile: Optional profile name (e.g. 'dev', 'test').
                    If provided, all paths and settings are isolated (e.g. zahlschein2qr-dev).
        """
        # If no profile provided, use the last active one
        if profile is None:
            profile = AppConfig._active_profile
        else:
            AppConfig._active_profile = profile

        self.profile = profile
        self.active_id = self.APP_ID
        if profile:
            self.active_id = f"{self.APP_ID}-{profile}"

        self.settings = QSettings(self.active_id, self.active_id)

    def get_config_dir(self) -> Path:
        """
        Returns the path to the application configuration directory.
        Forces a flat structure: ~/.config/zahlschein2qr[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.ConfigLocation)
        config_dir = Path(base_path) / self.active_id
        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_data_dir(self) -> Path:
        """
        Returns the path to the application data directory.
        Forces a flat structure: ~/.local/share/zahlschein2qr[-profile]/
        """
        base_path = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.GenericDataLocation)
        data_dir = Path(base_path) / self.active_id
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def _get_setting(self, group: str, key: str, default: Any = None) -> Any:
        """
        Helper to retrieve a setting value from a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            default: The default value if not found.

        Returns:
            The retrieved value or default.
        """
        if group:
            self.settings.beginGroup(group)
        val = self.settings.value(key, default)
        if group:
            self.settings.endGroup()
        return val

    def _set_setting(self, group: str, key: str, value: Any) -> None:
        """
        Helper to save a setting value into a specific group.

        Args:
            group: The configuration group name.
            key: The setting key.
            value: The value to save.
        """
        if isinstance(value, str):
            value = value.strip()

        if group:
            self.settings.beginGroup(group)
        self.settings.setValue(key, value)
        if group:
            self.settings.endGroup()

    def _get_int(self, group: str, key: str, default: int) -> int:
        """Reads an integer setting, falling back to the default on garbage."""
        try:
            return int(self._get_setting(group, key, default))
        except (TypeError, ValueError):
            return default

    def get_qr_box_size(self) -> int:
        """
        Retrieves the pixel size of a single QR module.

        Returns:
            The box size in pixels.
        """
        return max(1, self._get_int("QRCode", self.KEY_QR_BOX_SIZE, self.DEFAULT_QR_BOX_SIZE))

    def set_qr_box_size(self, size: int) -> None:
        """
        Saves the pixel size of a single QR module.

        Args:
            size: The box size in pixels.
        """
        self._set_setting("QRCode", self.KEY_QR_BOX_SIZE, int(size))

    def get_qr_border(self) -> int:
        """Retrieves the quiet zone width (in modules) around the code."""
        return max(0, self._get_int("QRCode", self.KEY_QR_BORDER, self.DEFAULT_QR_BORDER))

    def set_qr_border(self, border: int) -> None:
        """Saves the quiet zone width (in modules) around the code."""
        self._set_setting("QRCode", self.KEY_QR_BORDER, int(border))

    def get_export_dir(self) -> str:
        """
        Retrieves the directory of the last saved payment code image.

        Returns:
            The directory path string, empty if nothing was saved yet.
        """
        return str(self._get_setting("Storage", self.KEY_EXPORT_DIR, ""))

    def set_export_dir(self, path: str) -> None:
        """
        Saves the directory of the last saved payment code image.

        Args:
            path: The directory path string.
        """
        self._set_setting("Storage", self.KEY_EXPORT_DIR, path)

    def get_log_level(self) -> str:
        """Retrieves the global log level."""
        return str(self._get_setting("Logging", self.KEY_LOG_LEVEL, self.DEFAULT_LOG_LEVEL))

    def set_log_level(self, level: str) -> None:
        """Saves the global log level."""
        self._set_setting("Logging", self.KEY_LOG_LEVEL, level.upper())

    def get_log_components(self) -> Dict[str, str]:
        """Retrieves a dictionary of component-specific log levels."""
        raw = str(self._get_setting("Logging", self.KEY_LOG_COMPONENTS, "{}"))
        try:
            components = json.loads(raw)
        except json.JSONDecodeError:
            return {}
        return components if isinstance(components, dict) else {}

    def set_log_components(self, components: Dict[str, str]) -> None:
        """Saves a dictionary of component-specific log levels."""
        self._set_setting("Logging", self.KEY_LOG_COMPONENTS, json.dumps(components))

    def get_log_file_path(self) -> Path:
        """Returns the absolute path to the log file."""
        return self.get_data_dir() / "app.log"
