"""Scenarios: scripted vignettes played before certain questions.

An example is experiencing an absence seizure and then being asked which
type of seizure just occurred. The quiz only knows a scenario by name; the
scenario holds nothing but a completion callback and must call it exactly
once per ``load()`` by way of ``unload()``.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable

logger = logging.getLogger(__name__)


class QuizScenario:
    """Base scenario. Subclasses decide when their content is done."""

    def __init__(self, name: str) -> None:
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Scenario name must not be empty.")
        self.name = cleaned
        self._on_complete: Callable[[], None] | None = None
        self._active: bool = False
        self._state_lock = Lock()

    def bind(self, on_complete: Callable[[], None]) -> None:
        self._on_complete = on_complete

    def is_active(self) -> bool:
        return self._active

    def load(self) -> None:
        """Activate the scenario content."""
        with self._state_lock:
            if self._active:
                logger.info("Scenario '%s' is already running.", self.name)
                return
            self._active = True
        logger.info("Loading scenario '%s'.", self.name)
        self._on_load()

    def unload(self) -> None:
        """Deactivate the content and hand control back to the quiz.

        Safe to call from the GUI thread and the controller API thread at once;
        only the first call after a load completes the scenario.
        """
        with self._state_lock:
            if not self._active:
                logger.debug("Ignoring unload of inactive scenario '%s'.", self.name)
                return
            self._active = False
        self._on_unload()
        logger.info("Scenario '%s' completed.", self.name)
        if self._on_complete is not None:
            self._on_complete()

    def tick(self, delta_seconds: float) -> None:
        """Advance scenario content; most scenarios are driven elsewhere."""

    def _on_load(self) -> None:
        pass

    def _on_unload(self) -> None:
        pass


class ManualScenario(QuizScenario):
    """Scenario completed by an outside signal, e.g. the controller API."""


class TimedScenario(QuizScenario):
    """Scenario that completes on its own after ``duration_seconds`` of ticks."""

    def __init__(self, name: str, duration_seconds: float) -> None:
        super().__init__(name)
        if duration_seconds < 0:
            raise ValueError("Scenario duration must not be negative.")
        self.duration_seconds = duration_seconds
        self._elapsed: float = 0.0

    def _on_load(self) -> None:
        self._elapsed = 0.0
        if self.duration_seconds == 0:
            self.unload()

    def tick(self, delta_seconds: float) -> None:
        if not self.is_active():
            return
        self._elapsed += delta_seconds
        if self._elapsed >= self.duration_seconds:
            self.unload()


class ScenarioRegistry:
    """Scenarios available to the quiz, looked up by name."""

    def __init__(self) -> None:
        self._scenarios: dict[str, QuizScenario] = {}

    def register(self, scenario: QuizScenario) -> None:
        if scenario.name in self._scenarios:
            logger.warning("Replacing scenario registered as '%s'.", scenario.name)
        self._scenarios[scenario.name] = scenario

    def find(self, name: str) -> QuizScenario | None:
        return self._scenarios.get(name.strip())

    def names(self) -> list[str]:
        return sorted(self._scenarios)

    def all(self) -> list[QuizScenario]:
        return list(self._scenarios.values())
