"""Domain models for the quiz game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
import re

from quiz_room.constants.quiz_constants import (
    DEFAULT_QUESTION_DURATION_SECONDS,
    DEFAULT_QUESTION_SCORE,
    DELAY_BEFORE_AWARD,
    DELAY_BEFORE_LOAD_MENU,
    DELAY_BEFORE_NEXT_QUESTION,
    DELAY_BEFORE_REVEAL_ANSWER,
    INITIAL_SCORE,
    MAX_INCORRECT,
    MENU_SCENE_NAME,
    SCORE_DRAIN_PER_SECOND,
)

_MEDIA_NAME_PATTERN = re.compile(r"[^0-9a-zA-Z]+")


class QuizState(Enum):
    """Progress of the current quiz game."""

    ASLEEP = auto()
    INITIALIZING = auto()
    SHOWING_SCENARIO = auto()
    AWAITING_ANSWER = auto()
    SHOWING_RESULT = auto()
    ENDING_GAME = auto()


@dataclass(slots=True, frozen=True)
class QuizQuestion:
    """Multiple-choice question with two to four answers.

    ``correct_answer`` is stored by value so the answers can be shuffled
    freely without losing track of the right one.
    """

    id: int
    question_text: str
    answers: tuple[str, ...]
    correct_answer: str
    score: float = DEFAULT_QUESTION_SCORE
    duration_seconds: float = DEFAULT_QUESTION_DURATION_SECONDS
    scenario: str | None = None

    def correct_index(self) -> int:
        return self.answers.index(self.correct_answer)

    def media_name(self) -> str:
        """Lower-cased alphanumeric slug used to find voice clips for this question."""
        return _MEDIA_NAME_PATTERN.sub("", self.question_text).lower()


@dataclass(slots=True, frozen=True)
class RoundResult:
    """Outcome of a single question-to-result cycle."""

    question_id: int
    submitted_answer_index: int | None
    was_correct: bool


@dataclass(slots=True)
class QuizSettings:
    """Tunable rules and timings for one quiz."""

    initial_score: float = INITIAL_SCORE
    max_incorrect: int = MAX_INCORRECT
    score_drain_per_second: float = SCORE_DRAIN_PER_SECOND
    delay_before_reveal_answer: float = DELAY_BEFORE_REVEAL_ANSWER
    delay_before_award: float = DELAY_BEFORE_AWARD
    delay_before_next_question: float = DELAY_BEFORE_NEXT_QUESTION
    delay_before_load_menu: float = DELAY_BEFORE_LOAD_MENU
    menu_scene: str = MENU_SCENE_NAME
    enforce_time_limit: bool = False

    def __post_init__(self) -> None:
        if self.max_incorrect < 0:
            raise ValueError("max_incorrect must not be negative.")
        if self.initial_score < 0:
            raise ValueError("initial_score must not be negative.")
        if self.score_drain_per_second < 0:
            raise ValueError("score_drain_per_second must not be negative.")
        delays = (
            self.delay_before_reveal_answer,
            self.delay_before_award,
            self.delay_before_next_question,
            self.delay_before_load_menu,
        )
        if any(delay < 0 for delay in delays):
            raise ValueError("Delays must not be negative.")


@dataclass(slots=True)
class QuizSnapshot:
    """Read-only view of the quiz handed to the API and UI."""

    state: QuizState
    score: int
    lives: int
    correct_count: int
    incorrect_count: int
    remaining_count: int
    current_question: QuizQuestion | None = None
    last_result: RoundResult | None = None
    scenario: str | None = None
