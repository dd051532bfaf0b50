"""
API key settings dialog.

Lets the user opt into their own generation API key instead of the one
provided by the environment.
"""
from PySide6.QtWidgets import (
    QCheckBox, QDialog, QDialogButtonBox, QLabel, QLineEdit, QVBoxLayout
)

from comic_studio.gui.models.settings import ApiSettings


class SettingsDialog(QDialog):
    """Modal editor for ApiSettings."""

    def __init__(self, settings: ApiSettings, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(380)
        self._setup_ui(settings)

    def _setup_ui(self, settings: ApiSettings):
        layout = QVBoxLayout(self)
        layout.setSpacing(12)
        layout.setContentsMargins(20, 20, 20, 20)

        info = QLabel(
            "By default the studio uses the API key from the environment. "
            "Enable a custom key to use your own."
        )
        info.setWordWrap(True)
        layout.addWidget(info)

        self.custom_key_check = QCheckBox("Use custom API key")
        self.custom_key_check.setChecked(settings.use_custom_key)
        self.custom_key_check.toggled.connect(self._sync_enabled)
        layout.addWidget(self.custom_key_check)

        self.api_key_edit = QLineEdit(settings.api_key)
        self.api_key_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self.api_key_edit.setPlaceholderText("Enter API key")
        layout.addWidget(self.api_key_edit)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self._sync_enabled(settings.use_custom_key)

    def _sync_enabled(self, checked: bool):
        self.api_key_edit.setEnabled(checked)

    def settings(self) -> ApiSettings:
        """Current dialog values."""
        return ApiSettings(
            use_custom_key=self.custom_key_check.isChecked(),
            api_key=self.api_key_edit.text().strip(),
        )
