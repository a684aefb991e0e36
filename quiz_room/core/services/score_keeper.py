"""Service tracking the player's score, tallies and remaining lives."""

from __future__ import annotations

from quiz_room.core.models import QuizQuestion


class ScoreKeeper:
    """Score and answer tallies for one quiz session."""

    def __init__(self, initial_score: float = 0.0) -> None:
        self._score: float = 0.0
        self._answered_correctly: list[QuizQuestion] = []
        self._answered_incorrectly: list[QuizQuestion] = []
        self.reset(initial_score)

    def reset(self, initial_score: float) -> None:
        """Clear both tallies and restore the starting score."""
        self._score = max(0.0, float(initial_score))
        self._answered_correctly = []
        self._answered_incorrectly = []

    @property
    def score(self) -> float:
        return self._score

    def increment(self, amount: float) -> float:
        """Add ``amount`` (may be negative) and return the new score, never below zero."""
        self._score += amount
        if self._score < 0.0:
            self._score = 0.0
        return self._score

    def drain(self, delta_seconds: float, rate_per_second: float) -> float:
        return self.increment(-rate_per_second * delta_seconds)

    def record(self, question: QuizQuestion, was_correct: bool) -> None:
        if was_correct:
            self._answered_correctly.append(question)
        else:
            self._answered_incorrectly.append(question)

    @property
    def correct_count(self) -> int:
        return len(self._answered_correctly)

    @property
    def incorrect_count(self) -> int:
        return len(self._answered_incorrectly)

    def get_answered_correctly(self) -> list[QuizQuestion]:
        return list(self._answered_correctly)

    def get_answered_incorrectly(self) -> list[QuizQuestion]:
        return list(self._answered_incorrectly)

    def lives(self, max_incorrect: int) -> int:
        """Remaining allowed incorrect answers, counting the current one."""
        return max(0, (max_incorrect + 1) - self.incorrect_count)

    def is_defeated(self, max_incorrect: int) -> bool:
        return self.incorrect_count > max_incorrect


def display_score(score: float) -> int:
    """Round a score for display."""
    return int(round(score))
