"""PySide6 desktop front end for the page layout studio."""
