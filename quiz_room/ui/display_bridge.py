"""Thread-safe adapter between the quiz manager and the Qt widgets.

The manager may be driven from the controller API thread, so every display
intent is re-emitted as a Qt signal; queued connections deliver it on the
GUI thread.
"""

from __future__ import annotations

from PySide6.QtCore import QObject, Signal

from quiz_room.core.models import QuizQuestion


class DisplayBridge(QObject):
    """Implements the quiz display and scene-changer boundaries with signals."""

    cleared = Signal()
    question_shown = Signal(object)
    confirming_shown = Signal(int)
    correct_shown = Signal()
    incorrect_shown = Signal(int)
    score_updated = Signal(int)
    game_ended = Signal(bool, int)
    lives_shown = Signal(int)
    scene_requested = Signal(str)

    def connect_monitor(self, monitor) -> None:
        self.cleared.connect(monitor.clear)
        self.question_shown.connect(monitor.show_question)
        self.confirming_shown.connect(monitor.show_confirming)
        self.correct_shown.connect(monitor.show_answer_as_correct)
        self.incorrect_shown.connect(monitor.show_answer_as_incorrect)
        self.score_updated.connect(monitor.update_score)
        self.game_ended.connect(monitor.show_game_ended)
        self.lives_shown.connect(monitor.show_lives)

    # --- QuizDisplay ---

    def clear(self) -> None:
        self.cleared.emit()

    def show_question(self, question: QuizQuestion) -> None:
        self.question_shown.emit(question)

    def show_confirming(self, answer_index: int) -> None:
        self.confirming_shown.emit(answer_index)

    def show_answer_as_correct(self) -> None:
        self.correct_shown.emit()

    def show_answer_as_incorrect(self, correct_index: int) -> None:
        self.incorrect_shown.emit(correct_index)

    def update_score(self, score: int) -> None:
        self.score_updated.emit(score)

    def show_game_ended(self, victory: bool, score: int) -> None:
        self.game_ended.emit(victory, score)

    def show_lives(self, lives: int) -> None:
        self.lives_shown.emit(lives)

    # --- SceneChanger ---

    def request_new_scene(self, scene_name: str) -> None:
        self.scene_requested.emit(scene_name)
