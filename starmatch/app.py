"""Application entry point and setup for Star Match."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from starmatch.core.session import RoundSession
from starmatch.core.settings import load_settings
from starmatch.ui.main_window import MainWindow
from starmatch.ui.timer import QtTickScheduler


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings, build the session and start the first round."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Star Match")
    app.setApplicationDisplayName("Star Match")

    settings = load_settings()
    logging.info(
        "Loaded settings: %ds rounds, %dms ticks, seed=%s",
        settings.round_seconds,
        settings.tick_interval_ms,
        settings.seed,
    )

    session = RoundSession(settings=settings, scheduler=QtTickScheduler(app))
    window = MainWindow(session)
    session.start_new_round()
    window.show()

    sys.exit(app.exec())
