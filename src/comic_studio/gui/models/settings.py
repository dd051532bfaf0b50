"""
Settings persistence model for the studio GUI.

Stores the generation API key preferences ({useCustomKey, apiKey}) and a
few UI values in a JSON file. Any malformed data results in graceful
fallback to defaults.
"""
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

# Environment variables consulted when no custom key is in use, in order
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")


@dataclass(frozen=True)
class ApiSettings:
    use_custom_key: bool = False
    api_key: str = ""

    def to_dict(self) -> Dict[str, object]:
        return {"useCustomKey": self.use_custom_key, "apiKey": self.api_key}

    @classmethod
    def from_dict(cls, data: object) -> "ApiSettings":
        if not isinstance(data, dict):
            return cls()
        api_key = data.get("apiKey", "")
        return cls(
            use_custom_key=bool(data.get("useCustomKey", False)),
            api_key=api_key if isinstance(api_key, str) else "",
        )


def resolve_api_key(settings: ApiSettings, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Pick the API key the generation client should use.

    The custom key wins when enabled and non-blank; otherwise the first
    non-empty environment variable from API_KEY_ENV_VARS is used.
    """
    if settings.use_custom_key and settings.api_key.strip():
        return settings.api_key.strip()
    env = os.environ if environ is None else environ
    for name in API_KEY_ENV_VARS:
        value = env.get(name)
        if value:
            return value
    return None


class SettingsStore(QObject):
    """Lightweight JSON-backed store for persisting GUI preferences."""

    apiSettingsChanged = Signal(object)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                loaded = json.loads(self.path.read_text(encoding="utf-8"))
                self.data = loaded if isinstance(loaded, dict) else {}
            except json.JSONDecodeError as e:
                self._load_error = f"Settings file is corrupted:\n{e}"
                self.data = {}
            except OSError as e:
                self._load_error = f"Failed to read settings:\n{e}"
                self.data = {}

        if "version" not in self.data:
            self.data["version"] = self.CURRENT_VERSION

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def check_load_error(self) -> bool:
        """
        Check if there was an error loading settings and prompt user to reset.

        Returns True if app should continue, False if app should exit.
        Call this after QApplication is created.
        """
        if not self._load_error:
            return True

        from PySide6.QtWidgets import QMessageBox

        msg = QMessageBox()
        msg.setIcon(QMessageBox.Icon.Warning)
        msg.setWindowTitle("Settings Error")
        msg.setText("Your studio settings file could not be loaded.")
        msg.setInformativeText(
            f"{self._load_error}\n\n"
            "Would you like to reset settings to defaults and continue?"
        )
        msg.setStandardButtons(
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        msg.setDefaultButton(QMessageBox.StandardButton.Yes)

        if msg.exec() == QMessageBox.StandardButton.Yes:
            self._save()
            self._load_error = None
            return True
        return False

    def get_api_settings(self) -> ApiSettings:
        return ApiSettings.from_dict(self._get_dict().get("api"))

    def set_api_settings(self, settings: ApiSettings) -> None:
        self._get_dict()["api"] = settings.to_dict()
        self._save()
        self.apiSettingsChanged.emit(settings)

    def get_export_dir(self) -> Optional[str]:
        value = self._get_dict().get("export_dir")
        return value if isinstance(value, str) else None

    def set_export_dir(self, value: str) -> None:
        self._get_dict()["export_dir"] = value
        self._save()

    def get_window_geometry(self) -> Optional[str]:
        """Get window geometry, validating it's a hex string."""
        value = self._get_dict().get("window_geometry")
        if not isinstance(value, str):
            return None
        try:
            bytes.fromhex(value)
        except ValueError:
            logger.warning("Invalid window geometry in settings, ignoring")
            return None
        return value

    def set_window_geometry(self, geometry: str) -> None:
        self._get_dict()["window_geometry"] = geometry
        self._save()

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _save(self) -> None:
        """Safely write settings with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp_path = self.path.with_suffix('.tmp')
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save settings: {e}")
            if temp_path:
                try:
                    if temp_path.exists():
                        temp_path.unlink()
                except OSError:
                    pass
