"""Row of lamps showing how many lives the player has left."""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QHBoxLayout, QWidget

from quiz_room.constants.quiz_constants import MAX_INCORRECT
from quiz_room.styling.color_palette import ColorPalette, Theme
from quiz_room.styling.styles import Styles


class LivesIndicator(QWidget):
    """Lights one lamp per available life; consumed lives turn dark."""

    def __init__(
        self,
        lamp_count: int = MAX_INCORRECT + 1,
        theme: Theme = Theme.DARK,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme
        self._lamps: list[QFrame] = []

        layout = QHBoxLayout()
        layout.setSpacing(12)
        self.setLayout(layout)
        layout.addStretch()
        for _ in range(lamp_count):
            lamp = QFrame(self)
            lamp.setFixedSize(24, 24)
            layout.addWidget(lamp)
            self._lamps.append(lamp)
        self.show_lives(lamp_count)

    def show_lives(self, lives: int) -> None:
        available = Styles.get_life_style(ColorPalette.LIFE_AVAILABLE.get(self._theme))
        consumed = Styles.get_life_style(ColorPalette.LIFE_CONSUMED.get(self._theme))
        for index, lamp in enumerate(self._lamps):
            lamp.setStyleSheet(available if index < lives else consumed)
