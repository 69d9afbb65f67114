from __future__ import annotations

from PySide6.QtWidgets import QMainWindow

from starmatch.core.session import RoundSession
from starmatch.ui.colors import GameColors
from starmatch.ui.game_widget import GameWidget


class MainWindow(QMainWindow):
    def __init__(self, session: RoundSession) -> None:
        super().__init__()
        self._session = session
        self.setWindowTitle("Star Match")
        self.setMinimumSize(560, 400)
        self.setStyleSheet(f"QMainWindow {{ background: {GameColors.BG}; }}")
        self.setCentralWidget(GameWidget(session, self))

    def closeEvent(self, event) -> None:
        self._session.stop()
        super().closeEvent(event)
