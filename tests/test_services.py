"""
Tests for the quiz services: question deck, score keeping, delays and fades.
"""

from dataclasses import replace
import random

from hypothesis import given, strategies as st
import pytest

from quiz_room.core.fader import Fade
from quiz_room.core.services.delay_queue import DelayQueue
from quiz_room.core.services.question_store import QuestionStore, validate_question
from quiz_room.core.services.score_keeper import ScoreKeeper, display_score

from tests.conftest import make_question


class TestQuestionStore:
    """Tests for dealing and drawing questions."""

    def test_draws_every_question_once(self, questions):
        """Drawing empties the deck without repeating a question."""
        store = QuestionStore()
        rng = random.Random(5)
        store.deal(questions, rng)

        drawn = [store.draw(rng).question_text for _ in questions]

        assert sorted(drawn) == sorted(q.question_text for q in questions)
        assert store.is_empty()

    def test_draw_from_empty_deck_raises(self):
        with pytest.raises(IndexError):
            QuestionStore().draw(random.Random())

    def test_deal_requires_questions(self):
        with pytest.raises(ValueError):
            QuestionStore().deal([], random.Random())

    def test_last_question_can_be_drawn_first(self):
        """Every position of the deck is reachable by a draw."""
        questions = [make_question(number) for number in range(1, 4)]
        first_draws = set()
        for seed in range(200):
            store = QuestionStore()
            rng = random.Random(seed)
            store.deal(questions, rng)
            first_draws.add(store.draw(rng).question_text)

        assert first_draws == {q.question_text for q in questions}

    def test_prepare_assigns_fresh_ids(self, questions):
        store = QuestionStore()
        prepared = [store.prepare_question(q) for q in questions[:2]]

        assert prepared[0].id != prepared[1].id

    def test_prepare_keeps_answer_set(self):
        question = make_question(1, answer_count=4)
        prepared = QuestionStore().prepare_question(question, random.Random(9))

        assert sorted(prepared.answers) == sorted(question.answers)
        assert prepared.correct_answer == question.correct_answer

    def test_blank_scenario_becomes_none(self):
        question = make_question(1, scenario="  ")
        assert QuestionStore().prepare_question(question).scenario is None


class TestValidateQuestion:
    """Tests for rejecting unplayable questions."""

    @pytest.mark.parametrize(
        "changes",
        [
            {"question_text": "  "},
            {"answers": ("Only",), "correct_answer": "Only"},
            {"answers": ("a", "b", "c", "d", "e"), "correct_answer": "a"},
            {"answers": ("a", ""), "correct_answer": "a"},
            {"answers": ("a", "a"), "correct_answer": "a"},
            {"correct_answer": "not listed"},
            {"duration_seconds": 0.0},
            {"score": float("nan")},
        ],
    )
    def test_invalid_questions(self, changes):
        with pytest.raises(ValueError):
            validate_question(replace(make_question(1), **changes))

    def test_valid_question_passes(self):
        validate_question(make_question(1, answer_count=2))


class TestScoreKeeper:
    """Tests for score and tallies."""

    def test_increment_clamps_at_zero(self):
        keeper = ScoreKeeper(50)
        assert keeper.increment(-80) == 0
        assert keeper.increment(30) == 30

    def test_drain(self):
        keeper = ScoreKeeper(500)
        assert keeper.drain(2.0, 5.0) == pytest.approx(490)

    def test_lives_and_defeat(self):
        keeper = ScoreKeeper(500)
        assert keeper.lives(2) == 3
        for _ in range(3):
            keeper.record(make_question(1), was_correct=False)

        assert keeper.lives(2) == 0
        assert keeper.is_defeated(2)

    def test_reset_clears_tallies(self):
        keeper = ScoreKeeper(500)
        keeper.record(make_question(1), was_correct=True)
        keeper.increment(100)

        keeper.reset(500)

        assert keeper.score == 500
        assert keeper.correct_count == 0
        assert keeper.get_answered_correctly() == []

    def test_display_score_rounds(self):
        assert display_score(489.6) == 490
        assert display_score(0.2) == 0

    @given(st.lists(st.floats(min_value=-1000, max_value=1000), max_size=30))
    def test_score_never_negative(self, increments):
        """Any sequence of gains and losses keeps the score at or above zero."""
        keeper = ScoreKeeper(500)
        for amount in increments:
            assert keeper.increment(amount) >= 0


class TestDelayQueue:
    """Tests for the tick-driven delay queue."""

    def test_runs_when_deadline_reached(self):
        queue = DelayQueue()
        fired = []
        queue.schedule(1.0, lambda: fired.append("a"))

        assert queue.advance(0.5) == 0
        assert queue.advance(0.5) == 1
        assert fired == ["a"]

    def test_runs_in_deadline_order(self):
        queue = DelayQueue()
        fired = []
        queue.schedule(2.0, lambda: fired.append("late"))
        queue.schedule(1.0, lambda: fired.append("early"))
        queue.schedule(1.0, lambda: fired.append("early too"))

        queue.advance(3.0)

        assert fired == ["early", "early too", "late"]

    def test_chained_actions_count_from_their_deadline(self):
        """An action scheduled by a callback is due relative to that callback's deadline."""
        queue = DelayQueue()
        fired = []
        queue.schedule(1.0, lambda: queue.schedule(0.5, lambda: fired.append("chained")))

        queue.advance(2.0)

        assert fired == ["chained"]
        assert queue.clock == 2.0

    def test_cancel(self):
        queue = DelayQueue()
        fired = []
        action = queue.schedule(1.0, lambda: fired.append("a"))
        queue.cancel(action)

        queue.advance(2.0)

        assert fired == []
        assert queue.pending_count() == 0

    def test_cancel_all(self):
        queue = DelayQueue()
        fired = []
        queue.schedule(1.0, lambda: fired.append("a"))
        queue.schedule(2.0, lambda: fired.append("b"))

        queue.cancel_all()
        queue.advance(5.0)

        assert fired == []

    def test_negative_values_rejected(self):
        queue = DelayQueue()
        with pytest.raises(ValueError):
            queue.schedule(-1.0, lambda: None)
        with pytest.raises(ValueError):
            queue.advance(-1.0)


class TestFade:
    def test_interpolates_linearly(self):
        fade = Fade(1.5, 0.1, 4.0)

        assert fade.advance(2.0) == pytest.approx(0.8)
        assert not fade.finished
        assert fade.advance(5.0) == pytest.approx(0.1)
        assert fade.finished

    def test_zero_duration_jumps_to_target(self):
        fade = Fade(0.0, 1.0, 0.0)
        assert fade.value == 1.0
        assert fade.finished

    def test_negative_duration_rejected(self):
        with pytest.raises(ValueError):
            Fade(0.0, 1.0, -1.0)
