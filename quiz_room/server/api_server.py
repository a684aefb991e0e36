"""FastAPI server that lets a phone or VR controller play the quiz."""

from __future__ import annotations

from threading import Thread

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from quiz_room.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_room.core.models import QuizQuestion, QuizSnapshot, QuizState
from quiz_room.core.quiz_manager import QuizManager, QuizStartError
from quiz_room.core.text_renderer import renderer

_CONTROLLER_PAGE_HTML = """<!doctype html>
<html lang="nl">
  <head>
    <meta charset="utf-8" />
    <title>QuizRoom Controller</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #0b1120; color: #f5f7ff; }
      body { margin: 0; padding: 1.5rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #111a30; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.5rem 1.5rem rgba(0, 0, 0, 0.4); }
      .hidden { display: none; }
      .primary-button { border: none; border-radius: 0.75rem; padding: 0.85rem 1.5rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; }
      .primary-button:disabled { opacity: 0.6; cursor: not-allowed; }
      #question-container { min-height: 4rem; font-size: 1.1rem; line-height: 1.6; }
      .options-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 0.75rem; }
      .option-button { border: none; border-radius: 0.75rem; padding: 1rem; font-size: 1rem; background: #1f9aa5; color: #fff; cursor: pointer; }
      .option-button:disabled { opacity: 0.5; cursor: not-allowed; }
      #status-row { display: flex; justify-content: space-between; color: #94a3b8; }
    </style>
  </head>
  <body>
    <section class="card" id="menu-card">
      <h1>QuizRoom</h1>
      <button id="start-button" class="primary-button">Start Quiz</button>
    </section>
    <section class="card hidden" id="scenario-card">
      <p>Kijk goed om je heen...</p>
      <button id="scenario-button" class="primary-button">Verder</button>
    </section>
    <section class="card hidden" id="quiz-card">
      <div id="status-row"><span id="score"></span><span id="lives"></span></div>
      <div id="question-container"></div>
      <div id="options-container" class="options-grid"></div>
    </section>
    <script>
      const menuCard = document.getElementById('menu-card');
      const scenarioCard = document.getElementById('scenario-card');
      const quizCard = document.getElementById('quiz-card');
      const questionContainer = document.getElementById('question-container');
      const optionsContainer = document.getElementById('options-container');
      const scoreEl = document.getElementById('score');
      const livesEl = document.getElementById('lives');
      let currentQuestionId = null;

      function show(card) {
        for (const c of [menuCard, scenarioCard, quizCard]) {
          c.classList.toggle('hidden', c !== card);
        }
      }

      async function post(path, body) {
        await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined,
        });
      }

      function renderOptions(question, enabled) {
        if (question.id !== currentQuestionId) {
          currentQuestionId = question.id;
          questionContainer.innerHTML = question.html;
          optionsContainer.innerHTML = '';
          question.answers.forEach((answer, index) => {
            const button = document.createElement('button');
            button.className = 'option-button';
            button.textContent = String.fromCharCode(65 + index) + ': ' + answer;
            button.onclick = () => post('/answer', { answer_index: index });
            optionsContainer.appendChild(button);
          });
        }
        for (const button of optionsContainer.children) {
          button.disabled = !enabled;
        }
      }

      async function poll() {
        try {
          const response = await fetch('/state');
          const data = await response.json();
          scoreEl.textContent = 'Score: ' + data.score;
          livesEl.textContent = 'Levens: ' + data.lives;
          if (data.state === 'ASLEEP') {
            currentQuestionId = null;
            show(menuCard);
          } else if (data.state === 'SHOWING_SCENARIO') {
            show(scenarioCard);
          } else if (data.state === 'ENDING_GAME') {
            questionContainer.textContent = 'Eindscore: ' + data.score;
            optionsContainer.innerHTML = '';
            currentQuestionId = null;
            show(quizCard);
          } else if (data.question) {
            renderOptions(data.question, data.state === 'AWAITING_ANSWER');
            show(quizCard);
          }
        } catch (error) {
          console.error(error);
        }
      }

      document.getElementById('start-button').onclick = () => post('/start');
      document.getElementById('scenario-button').onclick = () => post('/scenario/complete');
      setInterval(poll, 500);
      poll();
    </script>
  </body>
</html>
"""


class AnswerPayload(BaseModel):
    """Payload schema for submitted answers."""

    answer_index: int


def _get_quiz_manager_dependency(quiz_manager: QuizManager):
    def dependency() -> QuizManager:
        return quiz_manager

    return dependency


def _serialize_question(question: QuizQuestion) -> dict[str, object]:
    return {
        "id": question.id,
        "text": question.question_text,
        "html": renderer.render_fragment(question.question_text),
        "answers": list(question.answers),
        "duration_seconds": question.duration_seconds,
    }


def _serialize_snapshot(snapshot: QuizSnapshot) -> dict[str, object]:
    # The question stays hidden while its scenario plays.
    visible_question = snapshot.current_question
    if snapshot.state in (QuizState.SHOWING_SCENARIO, QuizState.INITIALIZING):
        visible_question = None

    last_result = None
    if snapshot.last_result is not None:
        last_result = {
            "question_id": snapshot.last_result.question_id,
            "submitted_answer_index": snapshot.last_result.submitted_answer_index,
            "was_correct": snapshot.last_result.was_correct,
        }

    return {
        "state": snapshot.state.name,
        "score": snapshot.score,
        "lives": snapshot.lives,
        "correct_count": snapshot.correct_count,
        "incorrect_count": snapshot.incorrect_count,
        "remaining_count": snapshot.remaining_count,
        "scenario": snapshot.scenario,
        "question": _serialize_question(visible_question) if visible_question else None,
        "last_result": last_result,
    }


def create_api_app(quiz_manager: QuizManager) -> FastAPI:
    """Create a FastAPI application wired to the provided quiz manager."""
    app = FastAPI(title="QuizRoom Controller API", version="0.1.0")
    quiz_manager_dep = _get_quiz_manager_dependency(quiz_manager)

    @app.get("/", response_class=HTMLResponse)
    def serve_controller_page() -> str:
        return _CONTROLLER_PAGE_HTML

    @app.get("/state")
    def get_state(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        return _serialize_snapshot(manager.get_snapshot())

    @app.post("/start", status_code=201)
    def start_quiz(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        try:
            started = manager.start_quiz()
        except QuizStartError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        if not started:
            raise HTTPException(status_code=409, detail="Quiz is already running.")
        return {"started": True, "state": manager.get_state().name}

    @app.post("/answer", status_code=201)
    def submit_answer(
        payload: AnswerPayload,
        manager: QuizManager = Depends(quiz_manager_dep),
    ) -> dict[str, object]:
        if not manager.submit_answer(payload.answer_index):
            raise HTTPException(status_code=409, detail="Answer not accepted right now.")
        return {"accepted": True, "answer_index": payload.answer_index}

    @app.post("/scenario/complete")
    def complete_scenario(manager: QuizManager = Depends(quiz_manager_dep)) -> dict[str, object]:
        if not manager.end_scenario():
            raise HTTPException(status_code=409, detail="No scenario is running.")
        return {"state": manager.get_state().name}

    return app


def start_api_server(
    quiz_manager: QuizManager,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> Thread:
    """Start the FastAPI server in a background daemon thread."""
    app = create_api_app(quiz_manager)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="QuizApiServer", daemon=True)
    thread.start()
    return thread
