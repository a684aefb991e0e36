"""Menu screen shown before a quiz and after it ends."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_room.constants.ui_constants import (
    CONTROLLER_URL_TEMPLATE,
    MENU_ABOUT_BUTTON,
    MENU_HELP_BUTTON,
    MENU_START_BUTTON,
    MENU_TITLE,
    QUESTION_FONT_SIZE,
)
from quiz_room.styling.color_palette import ColorPalette, Theme
from quiz_room.styling.styles import Styles


class MenuPanel(QWidget):
    """Start screen with the controller address and a start button."""

    def __init__(
        self,
        controller_url: str | None,
        on_start_quiz: Callable[[], None],
        on_about: Callable[[], None],
        on_help: Callable[[], None],
        theme: Theme = Theme.DARK,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller_url = controller_url
        self.on_start_quiz = on_start_quiz
        self.on_about = on_about
        self.on_help = on_help
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel(MENU_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(
            Styles.get_text_style(ColorPalette.TEXT_STANDARD.get(self._theme), QUESTION_FONT_SIZE)
        )
        layout.addWidget(self.title_label)

        self.controller_label = QLabel("", self)
        self.controller_label.setAlignment(Qt.AlignCenter)
        self.controller_label.setWordWrap(True)
        if self.controller_url:
            self.controller_label.setText(CONTROLLER_URL_TEMPLATE.format(url=self.controller_url))
        layout.addWidget(self.controller_label)

        self.status_label = QLabel("", self)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setWordWrap(True)
        layout.addWidget(self.status_label)

        self.start_button = QPushButton(MENU_START_BUTTON, self)
        self.start_button.clicked.connect(self.on_start_quiz)
        layout.addWidget(self.start_button, alignment=Qt.AlignCenter)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.about_button = QPushButton(MENU_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self.on_about)
        button_row.addWidget(self.about_button)
        self.help_button = QPushButton(MENU_HELP_BUTTON, self)
        self.help_button.clicked.connect(self.on_help)
        button_row.addWidget(self.help_button)
        button_row.addStretch()
        layout.addLayout(button_row)
        layout.addStretch()

    def set_status_message(self, message: str) -> None:
        self.status_label.setText(message)
