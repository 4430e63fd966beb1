"""Animated panel that bounces missed-word definitions around the window."""

from __future__ import annotations

from dataclasses import dataclass
import random

from PySide6.QtCore import QTimer
from PySide6.QtGui import QColor, QFont, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from word_exam.constants.ui_constants import FLOATING_REFRESH_INTERVAL_MS
from word_exam.styling.styles import Styles

_FONT_FAMILIES = ("Arial", "Times New Roman", "Courier New", "Verdana")


@dataclass(slots=True)
class FloatingText:
    """A string drifting across the panel."""

    text: str
    x: int
    y: int
    dx: int
    dy: int
    color: QColor
    font: QFont

    def advance(self, width: int, height: int) -> None:
        self.x += self.dx
        self.y += self.dy
        # Bounce off the edges
        if self.x <= 0 or self.x >= width - 50:
            self.dx = -self.dx
        if self.y <= 20 or self.y >= height - 20:
            self.dy = -self.dy


class FloatingTextPanel(QWidget):
    """Black canvas with colored text that moves every refresh interval."""

    def __init__(self, parent: QWidget | None = None, rng: random.Random | None = None) -> None:
        super().__init__(parent)
        self._rng = rng or random.Random()
        self._texts: list[FloatingText] = []
        self.setAutoFillBackground(True)
        self.setStyleSheet(Styles.get_floating_panel_style())

        self._timer = QTimer(self)
        self._timer.setInterval(FLOATING_REFRESH_INTERVAL_MS)
        self._timer.timeout.connect(self._advance)
        self._timer.start()

    @property
    def texts(self) -> list[FloatingText]:
        return list(self._texts)

    def add_text(self, text: str, font: QFont | None = None) -> None:
        if font is None:
            font = QFont(self._rng.choice(_FONT_FAMILIES), 16, QFont.Bold)
        width_bound = max(self.width() - 200, 200)
        height_bound = max(self.height() - 100, 100)
        dx = self._rng.randint(-1, 1)
        dy = self._rng.randint(-1, 1)
        if dx == 0 and dy == 0:
            dx = 1
        self._texts.append(
            FloatingText(
                text=text,
                x=self._rng.randrange(width_bound),
                y=self._rng.randrange(height_bound) + 20,
                dx=dx,
                dy=dy,
                color=QColor(self._rng.randrange(256), self._rng.randrange(256), self._rng.randrange(256)),
                font=font,
            )
        )

    def stop(self) -> None:
        self._timer.stop()

    def _advance(self) -> None:
        for floating in self._texts:
            floating.advance(self.width(), self.height())
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        for floating in self._texts:
            painter.setPen(floating.color)
            painter.setFont(floating.font)
            painter.drawText(floating.x, floating.y, floating.text)
        painter.end()

    def closeEvent(self, event) -> None:
        self.stop()
        super().closeEvent(event)
