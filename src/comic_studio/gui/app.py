"""
Entry point for the Comic Studio PySide6 GUI.
"""
import logging
import sys


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from comic_studio.gui.main_window import PageLayoutWindow
    from comic_studio.gui.models.settings import SettingsStore
    from comic_studio.gui.styles.theme import GLOBAL_STYLESHEET
    from comic_studio.gui.utils.paths import get_settings_path

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Comic Studio")
    app.setApplicationDisplayName("Comic Studio")
    app.setOrganizationName("Comic Studio")

    settings = SettingsStore(get_settings_path())

    # Check for malformed settings and prompt user to reset if needed
    if not settings.check_load_error():
        sys.exit(1)

    app.setStyleSheet(GLOBAL_STYLESHEET)

    window = PageLayoutWindow(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
