"""Outbound boundaries of the quiz: the monitor and the scene changer."""

from __future__ import annotations

import logging
from typing import Protocol

from quiz_room.core.models import QuizQuestion

logger = logging.getLogger(__name__)


class QuizDisplay(Protocol):
    """Receives display intents from the quiz manager. Never drives quiz logic."""

    def clear(self) -> None: ...

    def show_question(self, question: QuizQuestion) -> None: ...

    def show_confirming(self, answer_index: int) -> None: ...

    def show_answer_as_correct(self) -> None: ...

    def show_answer_as_incorrect(self, correct_index: int) -> None: ...

    def update_score(self, score: int) -> None: ...

    def show_game_ended(self, victory: bool, score: int) -> None: ...

    def show_lives(self, lives: int) -> None: ...


class SceneChanger(Protocol):
    def request_new_scene(self, scene_name: str) -> None: ...


class NullDisplay:
    """Display that ignores every intent."""

    def clear(self) -> None:
        pass

    def show_question(self, question: QuizQuestion) -> None:
        pass

    def show_confirming(self, answer_index: int) -> None:
        pass

    def show_answer_as_correct(self) -> None:
        pass

    def show_answer_as_incorrect(self, correct_index: int) -> None:
        pass

    def update_score(self, score: int) -> None:
        pass

    def show_game_ended(self, victory: bool, score: int) -> None:
        pass

    def show_lives(self, lives: int) -> None:
        pass


class LoggingDisplay(NullDisplay):
    """Display that writes round events to the log; handy when running headless."""

    def show_question(self, question: QuizQuestion) -> None:
        logger.info("Q: %s", question.question_text)
        for index, answer in enumerate(question.answers):
            logger.info("%s: %s", chr(ord("A") + index), answer)

    def show_confirming(self, answer_index: int) -> None:
        logger.info("Answer %s submitted.", chr(ord("A") + answer_index))

    def show_answer_as_correct(self) -> None:
        logger.info("Answered correctly!")

    def show_answer_as_incorrect(self, correct_index: int) -> None:
        logger.info("Answered incorrectly, the correct answer was %s.", chr(ord("A") + correct_index))

    def show_game_ended(self, victory: bool, score: int) -> None:
        logger.info("Game ended (%s). Final score: %d", "victory" if victory else "game over", score)

    def show_lives(self, lives: int) -> None:
        logger.info("Lives remaining: %d", lives)


class NullSceneChanger:
    def request_new_scene(self, scene_name: str) -> None:
        logger.info("Scene change to '%s' requested.", scene_name)
