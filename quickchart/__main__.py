"""
Entry point for the QuickChart Data Dashboard.

Usage:
    python -m quickchart [FILE]
"""

import logging
import os
import sys
import traceback

logger = logging.getLogger("quickchart")


def _check_dependencies():
    """Verify required packages are installed."""
    missing = []
    for module, package in (
        ("PySide6", "PySide6"),
        ("matplotlib", "matplotlib"),
        ("numpy", "numpy"),
        ("pandas", "pandas"),
        ("openpyxl", "openpyxl"),
        ("xlrd", "xlrd"),
    ):
        try:
            __import__(module)
        except ImportError:
            missing.append(package)

    if missing:
        print(
            f"Missing required packages: {', '.join(missing)}\n"
            f"Install with: pip install {' '.join(missing)}",
            file=sys.stderr,
        )
        sys.exit(1)


def _configure_logging():
    level = logging.DEBUG if os.environ.get("QUICKCHART_DEBUG") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.captureWarnings(True)


def _exception_hook(exc_type, exc_value, exc_tb):
    """Global exception handler to prevent silent crashes."""
    msg = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
    logger.error("Unhandled exception:\n%s", msg)

    from PySide6.QtWidgets import QMessageBox, QApplication
    if QApplication.instance() is not None:
        QMessageBox.critical(
            None, "Unhandled Error",
            f"An unexpected error occurred:\n\n"
            f"{exc_type.__name__}: {exc_value}\n\n"
            f"See console for full traceback.",
        )


def main():
    """Launch the QuickChart Data Dashboard GUI."""
    _configure_logging()
    _check_dependencies()

    # Set exception hook before anything else
    sys.excepthook = _exception_hook

    # Configure matplotlib backend before importing Qt widgets
    os.environ.setdefault("QT_API", "pyside6")
    import matplotlib
    matplotlib.use('QtAgg')

    from PySide6.QtWidgets import QApplication
    from PySide6.QtGui import QFont, QFontDatabase

    from .constants import FONT_FAMILIES
    from .theme import get_dark_stylesheet
    from .gui_main import MainWindow

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    font = QFont()
    for family in FONT_FAMILIES:
        if QFontDatabase.hasFamily(family):
            font.setFamily(family)
            break
    font.setPointSize(10)
    app.setFont(font)

    app.setStyleSheet(get_dark_stylesheet())

    window = MainWindow()
    window.show()

    args = [a for a in app.arguments()[1:] if not a.startswith('-')]
    if args:
        window.open_file(os.path.abspath(args[0]))

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
