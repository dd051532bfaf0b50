"""
Theme definitions for the Comic Studio GUI.
"""


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#3b82f6"
    PRIMARY_BLUE_HOVER = "#60a5fa"

    # Backgrounds
    BACKGROUND = "#18181b"
    SURFACE = "#27272a"
    HOVER = "#3f3f46"
    DISABLED_BG = "#1f1f23"

    # Page
    PAGE = "#ffffff"
    PLACEHOLDER_BG = "#e4e4e7"
    PLACEHOLDER_TEXT = "#a1a1aa"
    PANEL_OUTLINE = "#4b5563"
    SELECTION_OUTLINE = "#3b82f6"
    HANDLE_BORDER = "#ffffff"

    # Text
    TEXT_PRIMARY = "#f1f5f9"
    TEXT_SECONDARY = "#94a3b8"

    # Status
    ERROR = "#ef4444"
    WARNING = "#f59e0b"
    INFO = "#38bdf8"


GLOBAL_STYLESHEET = f"""
QMainWindow, QWidget {{
    background-color: {Colors.BACKGROUND};
    color: {Colors.TEXT_PRIMARY};
}}
QGroupBox {{
    border: 1px solid {Colors.HOVER};
    border-radius: 10px;
    margin-top: 14px;
    padding: 8px;
    font-weight: 600;
}}
QGroupBox::title {{
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 4px;
}}
QPushButton {{
    background-color: {Colors.SURFACE};
    border: none;
    border-radius: 8px;
    padding: 6px 10px;
}}
QPushButton:hover {{
    background-color: {Colors.HOVER};
}}
QPushButton:disabled {{
    background-color: {Colors.DISABLED_BG};
    color: {Colors.TEXT_SECONDARY};
}}
QPushButton#primaryButton {{
    background-color: {Colors.PRIMARY_BLUE};
    font-weight: 600;
    padding: 10px;
}}
QPushButton#primaryButton:hover {{
    background-color: {Colors.PRIMARY_BLUE_HOVER};
}}
QListWidget {{
    background-color: {Colors.SURFACE};
    border-radius: 8px;
}}
"""
