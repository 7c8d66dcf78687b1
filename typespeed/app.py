"""Application entry point and setup for the typing speed trainer."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from typespeed.core.config import load_settings
from typespeed.core.session import SessionController
from typespeed.core.ticker import QtTicker
from typespeed.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def run() -> None:
    """Load settings, build the controller and window, and start the event loop."""
    configure_logging()
    settings = load_settings()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("TypeSpeed")
    app.setApplicationDisplayName(settings.window_title)

    ticker = QtTicker(parent=app)
    controller = SessionController(ticker=ticker, settings=settings)
    window = MainWindow(controller=controller, settings=settings)
    window.show()

    try:
        exit_code = app.exec()
    finally:
        controller.close()
    sys.exit(exit_code)
