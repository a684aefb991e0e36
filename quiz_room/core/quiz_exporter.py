"""Utilities for exporting questions to the plain-text format used for imports."""

from __future__ import annotations

from pathlib import Path

from quiz_room.core.models import QuizQuestion


def save_quiz_to_file(file_path: Path, questions: list[QuizQuestion]) -> None:
    """Persist the provided questions to disk in the text import format."""

    if not questions:
        raise ValueError("Cannot export an empty quiz.")

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    document = serialize_questions(questions)
    file_path.write_text(document, encoding="utf-8")


def serialize_questions(questions: list[QuizQuestion]) -> str:
    blocks = [_serialize_question(question) for question in questions]
    return "\n\n---\n\n".join(blocks) + "\n"


def _serialize_question(question: QuizQuestion) -> str:
    lines: list[str] = []

    question_lines = question.question_text.splitlines() or [question.question_text]
    lines.append(f"Q: {question_lines[0]}")
    lines.extend(question_lines[1:])

    # The correct answer goes first; the rest keep their current order.
    ordered = [question.correct_answer]
    ordered.extend(answer for answer in question.answers if answer != question.correct_answer)
    for answer in ordered:
        answer_lines = answer.splitlines() or [answer]
        lines.append(f"A: {answer_lines[0]}")
        lines.extend(answer_lines[1:])

    lines.append(f"SCORE: {int(question.score)}")
    lines.append(f"DURATION: {question.duration_seconds:g}")
    if question.scenario:
        lines.append(f"SCENARIO: {question.scenario}")

    return "\n".join(lines)
