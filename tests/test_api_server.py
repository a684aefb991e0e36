"""
Tests for the controller API.
"""

import random

from fastapi.testclient import TestClient
import pytest

from quiz_room.core.quiz_manager import QuizManager
from quiz_room.core.scenario import ManualScenario
from quiz_room.server.api_server import create_api_app

from tests.conftest import ROUND_SECONDS, make_question


@pytest.fixture
def client(manager):
    return TestClient(create_api_app(manager))


class TestControllerApi:
    """Tests for the HTTP endpoints."""

    def test_controller_page(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "QuizRoom" in response.text

    def test_state_before_start(self, client):
        data = client.get("/state").json()

        assert data["state"] == "ASLEEP"
        assert data["question"] is None
        assert data["score"] == 500

    def test_start_and_answer(self, client, manager):
        """A controller can start the quiz and answer the first question."""
        response = client.post("/start")
        assert response.status_code == 201
        assert response.json()["state"] == "AWAITING_ANSWER"

        question = client.get("/state").json()["question"]
        correct_index = question["answers"].index(manager.get_current_question().correct_answer)
        response = client.post("/answer", json={"answer_index": correct_index})

        assert response.status_code == 201
        assert response.json() == {"accepted": True, "answer_index": correct_index}

        manager.tick(ROUND_SECONDS)
        data = client.get("/state").json()
        assert data["correct_count"] == 1
        assert data["last_result"]["was_correct"] is True

    def test_start_twice_conflicts(self, client):
        client.post("/start")
        assert client.post("/start").status_code == 409

    def test_start_without_questions(self):
        client = TestClient(create_api_app(QuizManager()))
        assert client.post("/start").status_code == 400

    def test_answer_rejected_when_asleep(self, client):
        response = client.post("/answer", json={"answer_index": 0})
        assert response.status_code == 409

    def test_answer_requires_index(self, client):
        client.post("/start")
        assert client.post("/answer", json={}).status_code == 422

    def test_scenario_complete_without_scenario(self, client):
        client.post("/start")
        assert client.post("/scenario/complete").status_code == 409


class TestScenarioOverApi:
    def test_question_hidden_until_scenario_completes(self, display):
        """The controller sees the question only after the scenario ends."""
        quiz = QuizManager(display=display, rng=random.Random(2))
        quiz.register_scenario(ManualScenario("absence"))
        quiz.load_quiz_from_questions([make_question(1, scenario="absence")])
        client = TestClient(create_api_app(quiz))

        client.post("/start")
        data = client.get("/state").json()
        assert data["state"] == "SHOWING_SCENARIO"
        assert data["scenario"] == "absence"
        assert data["question"] is None

        response = client.post("/scenario/complete")
        assert response.status_code == 200
        assert response.json() == {"state": "AWAITING_ANSWER"}
        assert client.get("/state").json()["question"]["text"] == "Question 1?"
