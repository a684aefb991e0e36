"""Qt scenarios played before certain questions.

The absence scenario runs directly before asking the player:
NL: "Welke van deze epileptische aanvallen heb je zojuist ervaren?"
EN: "Which of these epileptic seizures did you just experience?"

The screen fades out, the player briefly finds themselves somewhere else,
and the screen fades back to the quiz room, leaving a gap they cannot
account for.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from quiz_room.constants.ui_constants import ABSENCE_FADE_SECONDS, ABSENCE_SCENARIO_NAME
from quiz_room.core.scenario import QuizScenario

logger = logging.getLogger(__name__)


class ScenarioScreen(Protocol):
    """What a scenario may do with the window it plays in."""

    def fade_out(self, seconds: float) -> None: ...

    def fade_in(self, seconds: float) -> None: ...

    def show_environment(self) -> None: ...

    def show_quiz_room(self) -> None: ...


class _SequenceRunner(QObject):
    """Runs timed steps on the GUI thread, whichever thread asks."""

    start_requested = Signal()
    cancel_requested = Signal()

    def __init__(self, steps: list[tuple[Callable[[], None], float]], on_cancel: Callable[[], None]) -> None:
        super().__init__()
        self._steps = steps
        self._on_cancel = on_cancel
        self._index = 0
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._run_step)
        self.start_requested.connect(self._start)
        self.cancel_requested.connect(self._cancel)

    @Slot()
    def _start(self) -> None:
        self._index = 0
        self._run_step()

    @Slot()
    def _cancel(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            self._on_cancel()

    @Slot()
    def _run_step(self) -> None:
        if self._index >= len(self._steps):
            return
        action, wait_seconds = self._steps[self._index]
        self._index += 1
        action()
        if self._index < len(self._steps):
            self._timer.start(int(wait_seconds * 1000))


class AbsenceScenario(QuizScenario):
    """Fade away from the quiz room, show another place, fade back, resume."""

    def __init__(
        self,
        screen: ScenarioScreen,
        name: str = ABSENCE_SCENARIO_NAME,
        fade_seconds: float = ABSENCE_FADE_SECONDS,
    ) -> None:
        super().__init__(name)
        self._screen = screen
        self._fade_seconds = fade_seconds
        self._runner = _SequenceRunner(
            [
                (lambda: screen.fade_out(fade_seconds), fade_seconds),
                (self._enter_environment, fade_seconds),
                (lambda: screen.fade_out(fade_seconds), fade_seconds),
                (self._return_to_quiz_room, fade_seconds),
                (self._finish, 0.0),
            ],
            on_cancel=self._return_to_quiz_room,
        )

    def _on_load(self) -> None:
        self._runner.start_requested.emit()

    def _on_unload(self) -> None:
        self._runner.cancel_requested.emit()

    def _enter_environment(self) -> None:
        self._screen.show_environment()
        self._screen.fade_in(self._fade_seconds)

    def _return_to_quiz_room(self) -> None:
        self._screen.show_quiz_room()
        self._screen.fade_in(self._fade_seconds)

    def _finish(self) -> None:
        logger.debug("Absence sequence finished.")
        self.unload()
