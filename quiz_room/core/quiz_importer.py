"""Utilities for importing quiz questions from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text. Additional lines until the next marker are treated
       as part of the question.
    A: The correct answer (always listed first)
    A: Another answer
    A: Optional third answer
    A: Optional fourth answer
    SCORE: points awarded for a correct answer (required)
    DURATION: seconds to answer (required)
    SCENARIO: name of a scenario to play first (optional)

Example:

    Q: Welke aanval heb je zojuist ervaren?
    A: Absence
    A: Tonisch-clonisch
    A: Myoclonisch
    SCORE: 150
    DURATION: 15
    SCENARIO: absence

Answers are shuffled when the quiz starts, so the file keeps the correct one
in front and the game remembers it by value. A block missing its SCORE or
DURATION is rejected rather than filled in with defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from pathlib import Path

from quiz_room.constants.quiz_constants import MAX_ANSWERS, MIN_ANSWERS
from quiz_room.core.models import QuizQuestion


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[QuizQuestion]


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise QuizImportError(f"Could not read quiz file {file_path}: {exc}") from exc
    questions = parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return ImportedQuiz(source_path=file_path, questions=questions)


def parse_quiz_text(text: str) -> list[QuizQuestion]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped.startswith("#"):
            continue
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    questions: list[QuizQuestion] = []
    for number, block in enumerate(blocks, start=1):
        try:
            questions.append(_parse_block(block, question_id=number))
        except QuizImportError as exc:
            raise QuizImportError(f"Question {number}: {exc}") from exc
    return questions


def _parse_block(block: str, question_id: int) -> QuizQuestion:
    question_lines: list[str] = []
    answers: list[str] = []
    score: int | None = None
    duration: float | None = None
    scenario: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("A:"):
            answers.append(line[2:].strip())
            current_section = "A"
            continue

        if upper.startswith("SCORE:"):
            raw_value = line.split(":", 1)[1].strip()
            try:
                score = int(raw_value)
            except ValueError as exc:
                raise QuizImportError("SCORE must be an integer.") from exc
            current_section = None
            continue

        if upper.startswith("DURATION:"):
            raw_value = line.split(":", 1)[1].strip()
            try:
                duration = float(raw_value)
            except ValueError as exc:
                raise QuizImportError("DURATION must be a number of seconds.") from exc
            if not math.isfinite(duration) or duration <= 0:
                raise QuizImportError("DURATION must be a positive number of seconds.")
            current_section = None
            continue

        if upper.startswith("SCENARIO:"):
            scenario = line.split(":", 1)[1].strip() or None
            current_section = None
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "A":
            answers[-1] = answers[-1] + f"\n{line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")
    if not MIN_ANSWERS <= len(answers) <= MAX_ANSWERS:
        raise QuizImportError(
            f"Each question must define between {MIN_ANSWERS} and {MAX_ANSWERS} answers (A: ...)."
        )
    if any(not answer for answer in answers):
        raise QuizImportError("Answer text cannot be empty.")
    if len(set(answers)) != len(answers):
        raise QuizImportError("Answers must be distinct.")
    if score is None:
        raise QuizImportError("SCORE missing (SCORE: ...)")
    if duration is None:
        raise QuizImportError("DURATION missing (DURATION: ...)")

    return QuizQuestion(
        id=question_id,  # overwritten by the question store when the quiz starts
        question_text=question_text,
        answers=tuple(answers),
        correct_answer=answers[0],
        score=score,
        duration_seconds=duration,
        scenario=scenario,
    )
