"""Qt main window: menu, quiz room monitor and the game loop that drives them."""

from __future__ import annotations

import logging

from PySide6.QtCore import QElapsedTimer, Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QGraphicsOpacityEffect,
    QLabel,
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_room.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION, HELP_TEXT
from quiz_room.constants.ui_constants import (
    ABSENCE_ENVIRONMENT_TEXT,
    ANSWER_KEYS,
    NO_QUIZ_LOADED_MESSAGE,
    QUESTION_FONT_SIZE,
    TICK_INTERVAL_MS,
    WINDOW_TITLE,
)
from quiz_room.core.fader import Fade
from quiz_room.core.quiz_manager import QuizManager, QuizStartError
from quiz_room.styling.color_palette import ColorPalette, Theme
from quiz_room.styling.styles import Styles
from quiz_room.ui.components.menu_panel import MenuPanel
from quiz_room.ui.components.quiz_monitor import QuizMonitor
from quiz_room.ui.components.room_light import RoomLight
from quiz_room.ui.dialog_helpers import show_info, show_warning
from quiz_room.ui.display_bridge import DisplayBridge
from quiz_room.ui.scenarios import AbsenceScenario

logger = logging.getLogger(__name__)


class QuizRoomWindow(QMainWindow):
    """Shows the menu or the quiz room and ticks the quiz manager every frame."""

    def __init__(
        self,
        quiz_manager: QuizManager,
        controller_url: str | None = None,
        theme: Theme = Theme.DARK,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.quiz_manager = quiz_manager
        self.controller_url = controller_url
        self._theme = theme
        self._screen_fade: Fade | None = None

        self._build_ui()
        self._wire_quiz_manager()
        self._configure_game_loop()
        self.setStyleSheet(Styles.get_main_window_style(self._theme))

        if not self.quiz_manager.has_loaded_quiz():
            self.menu_panel.set_status_message(NO_QUIZ_LOADED_MESSAGE)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)
        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.mode_stack = QStackedWidget(self)
        self._opacity_effect = QGraphicsOpacityEffect(self.mode_stack)
        self._opacity_effect.setOpacity(1.0)
        self.mode_stack.setGraphicsEffect(self._opacity_effect)

        self.menu_panel = MenuPanel(
            self.controller_url,
            on_start_quiz=self._handle_start_quiz,
            on_about=self._handle_about,
            on_help=self._handle_help,
            theme=self._theme,
            parent=self,
        )

        self.room_widget = QWidget(self)
        room_layout = QVBoxLayout()
        self.room_widget.setLayout(room_layout)
        self.ceiling_light = RoomLight(self.room_widget, ColorPalette.BACKGROUND.get(self._theme))
        self.monitor = QuizMonitor(lights=[self.ceiling_light], theme=self._theme, parent=self.room_widget)
        room_layout.addWidget(self.monitor)

        self.environment_label = QLabel(ABSENCE_ENVIRONMENT_TEXT, self)
        self.environment_label.setAlignment(Qt.AlignCenter)
        self.environment_label.setWordWrap(True)
        self.environment_label.setStyleSheet(
            Styles.get_text_style(ColorPalette.TEXT_SECONDARY.get(self._theme), QUESTION_FONT_SIZE)
        )

        self.mode_stack.addWidget(self.menu_panel)
        self.mode_stack.addWidget(self.room_widget)
        self.mode_stack.addWidget(self.environment_label)
        root_layout.addWidget(self.mode_stack)
        self.mode_stack.setCurrentWidget(self.menu_panel)

    def _wire_quiz_manager(self) -> None:
        self.bridge = DisplayBridge(self)
        self.bridge.connect_monitor(self.monitor)
        self.bridge.scene_requested.connect(self._handle_scene_request)
        self.quiz_manager.set_display(self.bridge)
        self.quiz_manager.set_scene_changer(self.bridge)
        self.quiz_manager.register_scenario(AbsenceScenario(self))

    def _configure_game_loop(self) -> None:
        self._frame_clock = QElapsedTimer()
        self._frame_clock.start()
        self.game_timer = QTimer(self)
        self.game_timer.setInterval(TICK_INTERVAL_MS)
        self.game_timer.timeout.connect(self._tick)
        self.game_timer.start()

    def _tick(self) -> None:
        delta_seconds = self._frame_clock.restart() / 1000.0
        self.quiz_manager.tick(delta_seconds)
        self.monitor.advance(delta_seconds)
        self._advance_screen_fade(delta_seconds)

        # A quiz started from the controller page still needs the room on screen.
        if self.quiz_manager.is_running() and self.mode_stack.currentWidget() is self.menu_panel:
            self.mode_stack.setCurrentWidget(self.room_widget)

    # --- Menu actions ---

    def _handle_start_quiz(self) -> None:
        try:
            started = self.quiz_manager.start_quiz()
        except QuizStartError as exc:
            show_warning(self, "Cannot start quiz", str(exc))
            return
        if started:
            self.menu_panel.set_status_message("")
            self.mode_stack.setCurrentWidget(self.room_widget)

    def _handle_scene_request(self, scene_name: str) -> None:
        logger.info("Returning to %s.", scene_name)
        self.monitor.reset_room()
        self.mode_stack.setCurrentWidget(self.menu_panel)

    def _handle_about(self) -> None:
        details = f"{APP_NAME} v{APP_VERSION}\nLicense: {APP_LICENSE}\n\n{APP_ABOUT_TEXT}"
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if self.mode_stack.currentWidget() is self.menu_panel:
            if event.key() in (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space):
                self._handle_start_quiz()
                return
            super().keyPressEvent(event)
            return

        answer_index = _answer_index_for_key(event.text())
        if answer_index is None:
            super().keyPressEvent(event)
            return
        self.quiz_manager.submit_answer(answer_index)

    # --- ScenarioScreen ---

    def fade_out(self, seconds: float) -> None:
        self._screen_fade = Fade(self._opacity_effect.opacity(), 0.0, seconds)

    def fade_in(self, seconds: float) -> None:
        self._screen_fade = Fade(self._opacity_effect.opacity(), 1.0, seconds)

    def show_environment(self) -> None:
        self.mode_stack.setCurrentWidget(self.environment_label)

    def show_quiz_room(self) -> None:
        self.mode_stack.setCurrentWidget(self.room_widget)

    def _advance_screen_fade(self, delta_seconds: float) -> None:
        if self._screen_fade is None:
            return
        self._opacity_effect.setOpacity(self._screen_fade.advance(delta_seconds))
        if self._screen_fade.finished:
            self._screen_fade = None


def _answer_index_for_key(text: str) -> int | None:
    key = text.strip().upper()
    if len(key) != 1:
        return None
    if key in ANSWER_KEYS:
        return ANSWER_KEYS.index(key)
    if key.isdigit() and 1 <= int(key) <= len(ANSWER_KEYS):
        return int(key) - 1
    return None
