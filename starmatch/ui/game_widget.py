"""Game board: stars, numbered tiles, countdown and play-again panel."""

from __future__ import annotations

import math
from typing import Dict, Optional

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainter, QPolygonF
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from starmatch.core.round import TILES
from starmatch.core.session import RoundSession
from starmatch.ui.colors import GameColors, outcome_message, timer_color
from starmatch.ui.models import build_tile_views

HELP_TEXT = "Pick 1 or more numbers that sum to the number of stars"


class StarsWidget(QWidget):
    """Draws ``count`` stars on a 3x3 grid."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._count = 0
        self.setMinimumSize(210, 210)

    def set_count(self, count: int) -> None:
        self._count = max(0, count)
        self.update()

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        if not self._count:
            return
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(GameColors.STAR))

        cell = min(self.width(), self.height()) / 3.0
        for i in range(self._count):
            row, col = divmod(i, 3)
            center = QPointF((col + 0.5) * cell, (row + 0.5) * cell)
            painter.drawPolygon(_star_polygon(center, cell * 0.38))


def _star_polygon(center: QPointF, radius: float) -> QPolygonF:
    points = []
    for k in range(10):
        r = radius if k % 2 == 0 else radius * 0.45
        angle = -math.pi / 2 + k * math.pi / 5
        points.append(QPointF(center.x() + r * math.cos(angle), center.y() + r * math.sin(angle)))
    return QPolygonF(points)


class PlayAgainPanel(QWidget):
    """Outcome message with a button that starts the next round."""

    def __init__(self, session: RoundSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setSpacing(16)

        self._message = QLabel()
        self._message.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._message)

        button = QPushButton("Play Again")
        button.setCursor(Qt.PointingHandCursor)
        button.setStyleSheet(
            f"""
            QPushButton {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {GameColors.PRIMARY_LIGHT}, stop:1 {GameColors.PRIMARY});
                color: white;
                padding: 10px 16px;
                border: none;
                border-radius: 12px;
                font-weight: 600;
            }}
            """
        )
        button.clicked.connect(lambda: session.start_new_round())
        layout.addWidget(button, 0, Qt.AlignCenter)

    def set_outcome(self, text: str, color: str) -> None:
        self._message.setText(text)
        self._message.setStyleSheet(f"color: {color}; font-size: 28px; font-weight: 800;")


class GameWidget(QWidget):
    """Renders a :class:`RoundSession` and forwards tile clicks to it."""

    def __init__(self, session: RoundSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session = session

        root = QVBoxLayout(self)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(18)

        help_label = QLabel(HELP_TEXT)
        help_label.setAlignment(Qt.AlignCenter)
        help_label.setStyleSheet(f"color: {GameColors.TEXT_MUTED}; font-size: 15px;")
        root.addWidget(help_label)

        body = QHBoxLayout()
        body.setSpacing(24)

        self._left = QStackedWidget()
        self._stars = StarsWidget()
        self._play_again = PlayAgainPanel(session)
        self._left.addWidget(self._stars)
        self._left.addWidget(self._play_again)
        body.addWidget(self._left, 1)

        tiles = QWidget()
        grid = QGridLayout(tiles)
        grid.setSpacing(10)
        self._tile_buttons: Dict[int, QPushButton] = {}
        for number in TILES:
            self._add_tile(grid, number)
        body.addWidget(tiles, 1)
        root.addLayout(body, 1)

        self._timer_label = QLabel()
        self._timer_label.setAlignment(Qt.AlignCenter)
        root.addWidget(self._timer_label)

        unsubscribe = session.subscribe(lambda _session: self.refresh())
        self.destroyed.connect(lambda *_: unsubscribe())
        if session.round_number:
            self.refresh()

    def _add_tile(self, grid: QGridLayout, number: int) -> None:
        button = QPushButton(str(number))
        button.setFixedSize(64, 64)
        button.setCursor(Qt.PointingHandCursor)
        button.clicked.connect(lambda _checked=False, n=number: self._session.select_tile(n))
        row, col = divmod(number - 1, 3)
        grid.addWidget(button, row, col)
        self._tile_buttons[number] = button

    def refresh(self) -> None:
        """Re-read the session's derived state and repaint."""
        session = self._session
        for view in build_tile_views(session):
            button = self._tile_buttons[view.number]
            button.setEnabled(view.enabled)
            button.setStyleSheet(
                f"""
                QPushButton {{
                    background: {view.color};
                    color: {GameColors.TEXT_PRIMARY};
                    border: none;
                    border-radius: 10px;
                    font-size: 22px;
                    font-weight: 700;
                }}
                """
            )

        outcome = outcome_message(session.status)
        if outcome is None:
            self._stars.set_count(session.target)
            self._left.setCurrentWidget(self._stars)
        else:
            self._play_again.set_outcome(*outcome)
            self._left.setCurrentWidget(self._play_again)

        color = timer_color(session.seconds_remaining, session.settings.round_seconds)
        self._timer_label.setText(f"Time Remaining: {session.seconds_remaining}")
        self._timer_label.setStyleSheet(f"color: {color}; font-size: 18px; font-weight: 700;")
