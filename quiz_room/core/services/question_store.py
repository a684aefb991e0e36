"""Service holding the deck of questions for the running quiz."""

from __future__ import annotations

from dataclasses import replace
import math
import random

from quiz_room.constants.quiz_constants import MAX_ANSWERS, MIN_ANSWERS
from quiz_room.core.models import QuizQuestion


class QuestionStore:
    """Shuffled deck of not-yet-asked questions, drawn without replacement."""

    def __init__(self) -> None:
        self._deck: list[QuizQuestion] = []
        self._question_counter: int = 0

    def deal(self, questions: list[QuizQuestion], rng: random.Random) -> None:
        """Replace the deck with freshly shuffled copies of the given questions."""
        if not questions:
            raise ValueError("Quiz must contain at least one question.")

        deck = [self.prepare_question(q, rng) for q in questions]
        rng.shuffle(deck)
        self._deck = deck

    def draw(self, rng: random.Random) -> QuizQuestion:
        """Remove and return a uniformly random remaining question."""
        if not self._deck:
            raise IndexError("Cannot draw from an empty deck.")
        index = rng.randrange(len(self._deck))
        return self._deck.pop(index)

    def remaining_count(self) -> int:
        return len(self._deck)

    def is_empty(self) -> bool:
        return not self._deck

    def prepare_question(self, question: QuizQuestion, rng: random.Random | None = None) -> QuizQuestion:
        """Validate a question and return a copy with a fresh id and shuffled answers."""
        validate_question(question)
        answers = [answer.strip() for answer in question.answers]
        if rng is not None:
            rng.shuffle(answers)
        return replace(
            question,
            id=self._next_question_id(),
            question_text=question.question_text.strip(),
            answers=tuple(answers),
            correct_answer=question.correct_answer.strip(),
            scenario=(question.scenario or "").strip() or None,
        )

    def _next_question_id(self) -> int:
        self._question_counter += 1
        return self._question_counter


def validate_question(question: QuizQuestion) -> None:
    """Raise ``ValueError`` if the question cannot be played."""
    if not question.question_text.strip():
        raise ValueError("Question text must not be empty.")

    answers = [answer.strip() for answer in question.answers]
    if not MIN_ANSWERS <= len(answers) <= MAX_ANSWERS:
        raise ValueError(
            f"Each question must have between {MIN_ANSWERS} and {MAX_ANSWERS} answers."
        )
    if any(not answer for answer in answers):
        raise ValueError("Answer text cannot be empty.")
    if len(set(answers)) != len(answers):
        raise ValueError("Answers must be distinct.")
    if question.correct_answer.strip() not in answers:
        raise ValueError("The correct answer must be one of the answers.")

    if not math.isfinite(question.score):
        raise ValueError("Question score must be a finite number.")
    if not math.isfinite(question.duration_seconds) or question.duration_seconds <= 0:
        raise ValueError("Question duration must be a positive number of seconds.")
