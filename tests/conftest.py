"""
Shared pytest fixtures for the quiz test suite.
Provides sample questions, a recording display and a seeded quiz manager.
"""

import random

import pytest

from quiz_room.core.models import QuizQuestion, QuizSettings
from quiz_room.core.quiz_manager import QuizManager

# Long enough to run reveal, award and next-question delays in one tick.
ROUND_SECONDS = 2.0


class RecordingDisplay:
    """Display that records every intent as ``(name, *args)``."""

    def __init__(self):
        self.calls = []

    def names(self):
        return [call[0] for call in self.calls]

    def last(self, name):
        for call in reversed(self.calls):
            if call[0] == name:
                return call
        return None

    def clear(self):
        self.calls.append(("clear",))

    def show_question(self, question):
        self.calls.append(("show_question", question))

    def show_confirming(self, answer_index):
        self.calls.append(("show_confirming", answer_index))

    def show_answer_as_correct(self):
        self.calls.append(("show_answer_as_correct",))

    def show_answer_as_incorrect(self, correct_index):
        self.calls.append(("show_answer_as_incorrect", correct_index))

    def update_score(self, score):
        self.calls.append(("update_score", score))

    def show_game_ended(self, victory, score):
        self.calls.append(("show_game_ended", victory, score))

    def show_lives(self, lives):
        self.calls.append(("show_lives", lives))


class RecordingSceneChanger:
    def __init__(self):
        self.requests = []

    def request_new_scene(self, scene_name):
        self.requests.append(scene_name)


def make_question(number, answer_count=3, score=100, scenario=None, duration=10.0):
    """Question whose first answer is correct, as the importer produces it."""
    answers = tuple(f"Answer {number}.{index}" for index in range(answer_count))
    return QuizQuestion(
        id=number,
        question_text=f"Question {number}?",
        answers=answers,
        correct_answer=answers[0],
        score=score,
        duration_seconds=duration,
        scenario=scenario,
    )


def answer(manager, correct):
    """Submit the right or a wrong answer for the current question."""
    question = manager.get_current_question()
    index = question.correct_index()
    if not correct:
        index = (index + 1) % len(question.answers)
    assert manager.submit_answer(index)
    return index


@pytest.fixture
def questions():
    return [make_question(number) for number in range(1, 7)]


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def scene_changer():
    return RecordingSceneChanger()


@pytest.fixture
def settings():
    return QuizSettings()


@pytest.fixture
def manager(display, scene_changer, settings, questions):
    quiz = QuizManager(
        display=display,
        scene_changer=scene_changer,
        settings=settings,
        rng=random.Random(1234),
    )
    quiz.load_quiz_from_questions(questions)
    return quiz
