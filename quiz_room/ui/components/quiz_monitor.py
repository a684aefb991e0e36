"""Monitor widget that renders the quiz manager's display intents."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, Qt, QUrl, Slot
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from quiz_room.constants.ui_constants import (
    AMBIENT_CONFIRM_SECONDS,
    AMBIENT_CONFIRM_VOLUME,
    AMBIENT_END_SECONDS,
    AMBIENT_FADE_IN_SECONDS,
    AMBIENT_SOUND,
    ANSWER_FONT_SIZE,
    ANSWER_KEYS,
    ANSWER_SLOT_COUNT,
    ANSWER_TEMPLATE,
    CEILING_LIGHT_INTENSITY,
    CONFIRMING_TEMPLATE,
    CONFIRMING_TEXT,
    CORRECT_HIGHLIGHT_TEMPLATE,
    CORRECT_SOUND,
    CORRECT_TEXT,
    GAME_ENDED_FONT_SIZE,
    GAME_OVER_LIGHT_INTENSITY,
    GAME_OVER_SOUND,
    INCORRECT_SOUND,
    INCORRECT_TEXT,
    LIGHT_FADE_SECONDS,
    QUESTION_FONT_SIZE,
    SCORE_TEMPLATE,
    SOUND_DIR,
    SUBMIT_SOUND,
    VICTORY_SOUND,
    VOICE_DIR,
)
from quiz_room.core.fader import Fade
from quiz_room.core.models import QuizQuestion
from quiz_room.core.text_renderer import renderer
from quiz_room.styling.color_palette import ColorPalette, Theme
from quiz_room.styling.styles import Styles
from quiz_room.ui.components.lives_indicator import LivesIndicator
from quiz_room.ui.components.room_light import RoomLight

logger = logging.getLogger(__name__)

_PACKAGE_ROOT = Path(__file__).resolve().parents[2]


class _SoundBank:
    """Lazily loaded sound effects; missing files are skipped."""

    def __init__(self, parent: QObject, sound_dir: Path) -> None:
        self._parent = parent
        self._sound_dir = sound_dir
        self._effects: dict[str, QSoundEffect | None] = {}

    def effect(self, file_name: str) -> QSoundEffect | None:
        if file_name not in self._effects:
            self._effects[file_name] = self._load(self._sound_dir / file_name)
        return self._effects[file_name]

    def play(self, file_name: str) -> None:
        effect = self.effect(file_name)
        if effect is not None:
            effect.play()

    def _load(self, sound_path: Path) -> QSoundEffect | None:
        if not sound_path.exists():
            logger.debug("Could not find audio file: %s", sound_path)
            return None
        effect = QSoundEffect(self._parent)
        effect.setSource(QUrl.fromLocalFile(str(sound_path)))
        return effect


class QuizMonitor(QWidget):
    """The big screen in the quiz room: question, answers, score and lives."""

    def __init__(
        self,
        lights: list[RoomLight] | None = None,
        theme: Theme = Theme.DARK,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._theme = theme
        self._lights = list(lights or [])
        self._selected_answer: int | None = None
        self._answer_texts: list[str] = [""] * ANSWER_SLOT_COUNT

        self._ambient_fade: Fade | None = None
        self._light_fade: Fade | None = None

        self._sounds = _SoundBank(self, _PACKAGE_ROOT / SOUND_DIR)
        self._voices = _SoundBank(self, _PACKAGE_ROOT / VOICE_DIR)
        self._current_voice: QSoundEffect | None = None

        self._build_ui()
        self._start_ambient()
        self.clear()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        top_row = QHBoxLayout()
        self.score_label = QLabel("", self)
        self.score_label.setStyleSheet(
            Styles.get_text_style(ColorPalette.TEXT_SECONDARY.get(self._theme), ANSWER_FONT_SIZE)
        )
        top_row.addWidget(self.score_label)
        top_row.addStretch()
        self.lives_indicator = LivesIndicator(theme=self._theme, parent=self)
        top_row.addWidget(self.lives_indicator)
        layout.addLayout(top_row)

        layout.addStretch()
        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setTextFormat(Qt.RichText)
        layout.addWidget(self.question_label)
        layout.addStretch()

        self.answer_labels: list[QLabel] = []
        for _ in range(ANSWER_SLOT_COUNT):
            label = QLabel("", self)
            label.setWordWrap(True)
            label.setTextFormat(Qt.PlainText)
            layout.addWidget(label)
            self.answer_labels.append(label)
        layout.addStretch()

    def _start_ambient(self) -> None:
        ambient = self._sounds.effect(AMBIENT_SOUND)
        if ambient is None:
            return
        loop_value = getattr(QSoundEffect, "Infinite", -1)
        if hasattr(loop_value, "value"):
            loop_value = loop_value.value
        ambient.setLoopCount(int(loop_value))
        ambient.setVolume(0.0)
        ambient.play()

    # --- Display intents ---

    @Slot()
    def clear(self) -> None:
        self._set_question_text("", QUESTION_FONT_SIZE, self._standard_color())
        self._answer_texts = [""] * ANSWER_SLOT_COUNT
        for label in self.answer_labels:
            self._set_answer(label, "", self._standard_color())

    @Slot(object)
    def show_question(self, question: QuizQuestion) -> None:
        self.clear()
        self._selected_answer = None
        self._set_question_text(
            renderer.render_inline(question.question_text), QUESTION_FONT_SIZE, self._standard_color()
        )
        for index, answer in enumerate(question.answers[:ANSWER_SLOT_COUNT]):
            text = ANSWER_TEMPLATE.format(letter=ANSWER_KEYS[index], answer=answer)
            self._answer_texts[index] = text
            self._set_answer(self.answer_labels[index], text, self._standard_color())

        self._play_voice(question.media_name())
        self._fade_ambient(1.0, AMBIENT_FADE_IN_SECONDS)

    @Slot(int)
    def show_confirming(self, answer_index: int) -> None:
        self._selected_answer = answer_index
        self._set_question_text(CONFIRMING_TEXT, QUESTION_FONT_SIZE, self._standard_color())
        text = CONFIRMING_TEMPLATE.format(answer=self._answer_texts[answer_index])
        self._set_answer(self.answer_labels[answer_index], text, self._standard_color())

        self._sounds.play(SUBMIT_SOUND)
        self._stop_voice()
        self._fade_ambient(AMBIENT_CONFIRM_VOLUME, AMBIENT_CONFIRM_SECONDS)

    @Slot()
    def show_answer_as_correct(self) -> None:
        self._set_question_text(CORRECT_TEXT, QUESTION_FONT_SIZE, self._standard_color())
        if self._selected_answer is not None:
            self._recolor_answer(self._selected_answer, ColorPalette.CORRECT.get(self._theme))
        self._sounds.play(CORRECT_SOUND)

    @Slot(int)
    def show_answer_as_incorrect(self, correct_index: int) -> None:
        self._set_question_text(INCORRECT_TEXT, QUESTION_FONT_SIZE, self._standard_color())
        if self._selected_answer is not None:
            self._recolor_answer(self._selected_answer, ColorPalette.INCORRECT.get(self._theme))
        else:
            self._stop_voice()

        highlighted = CORRECT_HIGHLIGHT_TEMPLATE.format(answer=self._answer_texts[correct_index])
        self._set_answer(
            self.answer_labels[correct_index], highlighted, ColorPalette.CORRECT.get(self._theme)
        )
        self._sounds.play(INCORRECT_SOUND)

    @Slot(int)
    def update_score(self, score: int) -> None:
        self.score_label.setText(SCORE_TEMPLATE.format(score=score))

    @Slot(int)
    def show_lives(self, lives: int) -> None:
        self.lives_indicator.show_lives(lives)

    @Slot(bool, int)
    def show_game_ended(self, victory: bool, score: int) -> None:
        self.clear()
        self.score_label.setText("")
        self._fade_ambient(0.0, AMBIENT_END_SECONDS)

        text = SCORE_TEMPLATE.format(score=score)
        if victory:
            self._set_question_text(text, GAME_ENDED_FONT_SIZE, ColorPalette.CORRECT.get(self._theme))
            self._sounds.play(VICTORY_SOUND)
        else:
            self._set_question_text(text, GAME_ENDED_FONT_SIZE, ColorPalette.INCORRECT.get(self._theme))
            self._sounds.play(GAME_OVER_SOUND)
            self._light_fade = Fade(CEILING_LIGHT_INTENSITY, GAME_OVER_LIGHT_INTENSITY, LIGHT_FADE_SECONDS)

    def reset_room(self) -> None:
        """Restore the lights and blank the screen before a new quiz."""
        self._light_fade = None
        for light in self._lights:
            light.reset()
        self.clear()
        self.score_label.setText("")

    # --- Frame updates ---

    def advance(self, delta_seconds: float) -> None:
        if self._ambient_fade is not None:
            volume = self._ambient_fade.advance(delta_seconds)
            ambient = self._sounds.effect(AMBIENT_SOUND)
            if ambient is not None:
                ambient.setVolume(volume)
            if self._ambient_fade.finished:
                self._ambient_fade = None

        if self._light_fade is not None:
            intensity = self._light_fade.advance(delta_seconds)
            for light in self._lights:
                light.set_intensity(intensity)
            if self._light_fade.finished:
                self._light_fade = None

    # --- Helpers ---

    def _standard_color(self) -> str:
        return ColorPalette.TEXT_STANDARD.get(self._theme)

    def _set_question_text(self, html: str, font_size: int, color: str) -> None:
        self.question_label.setText(html)
        self.question_label.setStyleSheet(Styles.get_text_style(color, font_size))

    def _set_answer(self, label: QLabel, text: str, color: str) -> None:
        label.setText(text)
        label.setStyleSheet(Styles.get_text_style(color, ANSWER_FONT_SIZE))

    def _recolor_answer(self, index: int, color: str) -> None:
        label = self.answer_labels[index]
        label.setStyleSheet(Styles.get_text_style(color, ANSWER_FONT_SIZE))

    def _fade_ambient(self, target_volume: float, duration: float) -> None:
        ambient = self._sounds.effect(AMBIENT_SOUND)
        start = ambient.volume() if ambient is not None else 0.0
        self._ambient_fade = Fade(start, target_volume, duration)

    def _play_voice(self, media_name: str) -> None:
        self._stop_voice()
        voice = self._voices.effect(f"{media_name}.wav")
        if voice is None:
            return
        voice.play()
        self._current_voice = voice
        logger.debug("Playing voice clip for '%s'.", media_name)

    def _stop_voice(self) -> None:
        if self._current_voice is not None:
            self._current_voice.stop()
            self._current_voice = None
