"""Quiz state machine shared between the monitor UI and the controller API.

The manager never waits on its own. Everything that happens "later" (the
drum roll before the reveal, the award, the next question, the return to the
menu) sits in a ``DelayQueue`` that ``tick`` advances, so the owner of the
game loop decides how fast time passes.
"""

from __future__ import annotations

import logging
import random
from threading import RLock

from quiz_room.core.display import NullDisplay, NullSceneChanger, QuizDisplay, SceneChanger
from quiz_room.core.models import QuizQuestion, QuizSettings, QuizSnapshot, QuizState, RoundResult
from quiz_room.core.scenario import QuizScenario, ScenarioRegistry
from quiz_room.core.services.delay_queue import DelayQueue
from quiz_room.core.services.question_store import QuestionStore, validate_question
from quiz_room.core.services.score_keeper import ScoreKeeper, display_score

logger = logging.getLogger(__name__)


class QuizStartError(RuntimeError):
    """Raised when a quiz cannot be started."""


class QuizManager:
    """Drives one quiz: deck, scenarios, answers, score, lives and the ending."""

    def __init__(
        self,
        display: QuizDisplay | None = None,
        scene_changer: SceneChanger | None = None,
        settings: QuizSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._lock = RLock()
        self._settings = settings or QuizSettings()
        self._display: QuizDisplay = display or NullDisplay()
        self._scene_changer: SceneChanger = scene_changer or NullSceneChanger()
        self._rng = rng or random.Random()

        # Services
        self._store = QuestionStore()
        self._scores = ScoreKeeper(self._settings.initial_score)
        self._delays = DelayQueue()
        self._scenarios = ScenarioRegistry()

        self._source_questions: list[QuizQuestion] = []
        self._state = QuizState.ASLEEP
        self._current_question: QuizQuestion | None = None
        self._current_scenario: QuizScenario | None = None
        self._last_result: RoundResult | None = None
        self._answer_elapsed: float = 0.0

    # --- Wiring ---

    def set_display(self, display: QuizDisplay) -> None:
        with self._lock:
            self._display = display

    def set_scene_changer(self, scene_changer: SceneChanger) -> None:
        with self._lock:
            self._scene_changer = scene_changer

    def register_scenario(self, scenario: QuizScenario) -> None:
        with self._lock:
            scenario.bind(lambda: self._on_scenario_complete(scenario))
            self._scenarios.register(scenario)

    def get_settings(self) -> QuizSettings:
        return self._settings

    # --- Questions ---

    def load_quiz_from_questions(self, questions: list[QuizQuestion]) -> None:
        with self._lock:
            if self._state is not QuizState.ASLEEP:
                raise RuntimeError("Cannot replace the questions while a quiz is running.")
            if not questions:
                raise ValueError("Quiz must contain at least one question.")
            for question in questions:
                validate_question(question)
            self._source_questions = list(questions)
            logger.info("Loaded %d questions.", len(questions))

    def has_loaded_quiz(self) -> bool:
        with self._lock:
            return bool(self._source_questions)

    def get_question_count(self) -> int:
        with self._lock:
            return len(self._source_questions)

    # --- Quiz flow ---

    def start_quiz(self) -> bool:
        """Reset score and tallies, deal a fresh deck and show the first question."""
        with self._lock:
            if self._state is not QuizState.ASLEEP:
                logger.info("Quiz already running (%s); ignoring start request.", self._state.name)
                return False
            if not self._source_questions:
                raise QuizStartError("No questions loaded.")

            self._delays.cancel_all()
            self._set_state(QuizState.INITIALIZING)
            self._scores.reset(self._settings.initial_score)
            self._last_result = None
            self._current_question = None
            self._current_scenario = None
            self._store.deal(self._source_questions, self._rng)
            logger.info("Quiz started with %d questions.", self._store.remaining_count())

            self._display.update_score(display_score(self._scores.score))
            self._display.show_lives(self._lives())
            self._draw_next_question()
            return True

    def start_quiz_after(self, delay_seconds: float) -> None:
        with self._lock:
            if not self._source_questions:
                raise QuizStartError("No questions loaded.")
            self._delays.schedule(delay_seconds, self.start_quiz, "start quiz")

    def submit_answer(self, answer_index: int) -> bool:
        """Submit the answer at ``answer_index`` of the current question's answers."""
        with self._lock:
            if self._state is not QuizState.AWAITING_ANSWER:
                logger.info("Ignoring answer %s while %s.", answer_index, self._state.name)
                return False
            question = self._current_question
            if not 0 <= answer_index < len(question.answers):
                logger.info(
                    "Ignoring answer %s: question %d only has %d answers.",
                    answer_index,
                    question.id,
                    len(question.answers),
                )
                return False

            self._set_state(QuizState.SHOWING_RESULT)
            self._display.show_confirming(answer_index)
            logger.info("Answer %d submitted for question %d.", answer_index, question.id)
            self._delays.schedule(
                self._settings.delay_before_reveal_answer,
                lambda: self._validate_and_record(answer_index),
                "reveal answer",
            )
            return True

    def end_scenario(self) -> bool:
        """Finish the running scenario and show the question tied to it."""
        with self._lock:
            if self._state is not QuizState.SHOWING_SCENARIO or self._current_scenario is None:
                logger.info("No scenario to end while %s.", self._state.name)
                return False
            self._current_scenario.unload()
            return True

    def tick(self, delta_seconds: float) -> None:
        """Advance the game by ``delta_seconds``: drain score, scenarios, then delays.

        With the time limit enforced, a tick that runs past the question's
        deadline is split there: the score drains only up to the deadline, the
        question expires, and the rest of the tick goes to the delay queue.
        """
        if delta_seconds < 0:
            raise ValueError("delta_seconds must not be negative.")
        with self._lock:
            awaiting = self._state is QuizState.AWAITING_ANSWER
            open_seconds = delta_seconds
            expires = False
            if awaiting and self._settings.enforce_time_limit:
                remaining = self._current_question.duration_seconds - self._answer_elapsed
                if delta_seconds >= remaining:
                    open_seconds = max(0.0, remaining)
                    expires = True
                self._answer_elapsed += open_seconds

            if awaiting:
                score = self._scores.drain(open_seconds, self._settings.score_drain_per_second)
                self._display.update_score(display_score(score))
            for scenario in self._scenarios.all():
                scenario.tick(delta_seconds)

            if not expires:
                self._delays.advance(delta_seconds)
                return
            self._delays.advance(open_seconds)
            if self._state is QuizState.AWAITING_ANSWER:
                self._expire_question()
            self._delays.advance(delta_seconds - open_seconds)

    # --- Round steps ---

    def _draw_next_question(self) -> None:
        question = self._store.draw(self._rng)
        self._current_question = question
        logger.info(
            "Question %d drawn, %d remaining.", question.id, self._store.remaining_count()
        )

        if question.scenario is None:
            self._await_answer()
            return

        scenario = self._scenarios.find(question.scenario)
        if scenario is None:
            logger.warning(
                "No scenario named '%s'; showing question %d without it.",
                question.scenario,
                question.id,
            )
            self._await_answer()
            return

        self._display.clear()
        self._set_state(QuizState.SHOWING_SCENARIO)
        self._current_scenario = scenario
        scenario.load()

    def _on_scenario_complete(self, scenario: QuizScenario) -> None:
        with self._lock:
            if self._state is not QuizState.SHOWING_SCENARIO or scenario is not self._current_scenario:
                logger.info("Ignoring completion of scenario '%s'.", scenario.name)
                return
            self._current_scenario = None
            self._await_answer()

    def _await_answer(self) -> None:
        self._answer_elapsed = 0.0
        self._display.show_question(self._current_question)
        self._set_state(QuizState.AWAITING_ANSWER)

    def _expire_question(self) -> None:
        logger.info("Time is up for question %d.", self._current_question.id)
        self._set_state(QuizState.SHOWING_RESULT)
        self._validate_and_record(None)

    def _validate_and_record(self, answer_index: int | None) -> None:
        question = self._current_question
        was_correct = (
            answer_index is not None and question.answers[answer_index] == question.correct_answer
        )
        self._scores.record(question, was_correct)
        self._last_result = RoundResult(
            question_id=question.id,
            submitted_answer_index=answer_index,
            was_correct=was_correct,
        )

        if was_correct:
            self._display.show_answer_as_correct()
            logger.info("Answered correctly!")
        else:
            self._display.show_answer_as_incorrect(question.correct_index())
            logger.info("Answered incorrectly; the correct answer was '%s'.", question.correct_answer)
        self._display.show_lives(self._lives())

        self._delays.schedule(
            self._settings.delay_before_award,
            lambda: self._award_and_advance(was_correct),
            "award",
        )

    def _award_and_advance(self, was_correct: bool) -> None:
        if was_correct:
            self._increment_score(self._current_question.score)
        self._delays.schedule(
            self._settings.delay_before_next_question,
            self._advance_round,
            "next question",
        )

    def _advance_round(self) -> None:
        if self._scores.is_defeated(self._settings.max_incorrect):
            self._end_game(completed=False)
        elif not self._store.is_empty():
            self._draw_next_question()
        else:
            self._end_game(completed=True)

    def _end_game(self, completed: bool) -> None:
        self._set_state(QuizState.ENDING_GAME)
        self._current_question = None
        final_score = display_score(self._scores.score)
        self._display.show_game_ended(completed, final_score)
        logger.info(
            "The game has ended (%s). Final score: %s",
            "victory" if completed else "game over",
            final_score,
        )
        self._delays.schedule(self._settings.delay_before_load_menu, self._load_menu, "load menu")

    def _load_menu(self) -> None:
        self._set_state(QuizState.ASLEEP)
        self._scene_changer.request_new_scene(self._settings.menu_scene)

    # --- Bookkeeping ---

    def _increment_score(self, amount: float) -> None:
        score = self._scores.increment(amount)
        self._display.update_score(display_score(score))

    def _lives(self) -> int:
        return self._scores.lives(self._settings.max_incorrect)

    def _set_state(self, state: QuizState) -> None:
        logger.debug("State %s -> %s", self._state.name, state.name)
        self._state = state

    # --- Queries ---

    def get_state(self) -> QuizState:
        with self._lock:
            return self._state

    def is_running(self) -> bool:
        with self._lock:
            return self._state is not QuizState.ASLEEP

    def get_score(self) -> float:
        with self._lock:
            return self._scores.score

    def get_lives(self) -> int:
        with self._lock:
            return self._lives()

    def get_current_question(self) -> QuizQuestion | None:
        with self._lock:
            return self._current_question

    def get_answered_correctly(self) -> list[QuizQuestion]:
        with self._lock:
            return self._scores.get_answered_correctly()

    def get_answered_incorrectly(self) -> list[QuizQuestion]:
        with self._lock:
            return self._scores.get_answered_incorrectly()

    def get_remaining_question_count(self) -> int:
        with self._lock:
            return self._store.remaining_count()

    def get_last_result(self) -> RoundResult | None:
        with self._lock:
            return self._last_result

    def get_snapshot(self) -> QuizSnapshot:
        with self._lock:
            return QuizSnapshot(
                state=self._state,
                score=display_score(self._scores.score),
                lives=self._lives(),
                correct_count=self._scores.correct_count,
                incorrect_count=self._scores.incorrect_count,
                remaining_count=self._store.remaining_count(),
                current_question=self._current_question,
                last_result=self._last_result,
                scenario=self._current_scenario.name if self._current_scenario else None,
            )
