"""
Tests for reading and writing the plain-text question format.
"""

from pathlib import Path

import pytest

from quiz_room.core.quiz_exporter import save_quiz_to_file, serialize_questions
from quiz_room.core.quiz_importer import QuizImportError, load_quiz_from_file, parse_quiz_text

from tests.conftest import make_question

SAMPLE = """
# Epilepsy quiz
Q: Welke aanval heb je zojuist ervaren?
A: Absence
A: Tonisch-clonisch
A: Myoclonisch
SCORE: 150
DURATION: 15
SCENARIO: absence

---

Q: Hoe lang duurt een absence meestal?
   Kies het beste antwoord.
A: Enkele seconden
A: Een uur
SCORE: 100
DURATION: 10
"""

BUNDLED_QUESTIONS = Path(__file__).resolve().parents[1] / "quiz_room" / "data" / "quiz_questions.txt"


class TestParseQuizText:
    """Tests for parsing question blocks."""

    def test_parses_all_fields(self):
        """Every supported field lands on the question."""
        first, second = parse_quiz_text(SAMPLE)

        assert first.question_text == "Welke aanval heb je zojuist ervaren?"
        assert first.answers == ("Absence", "Tonisch-clonisch", "Myoclonisch")
        assert first.correct_answer == "Absence"
        assert first.score == 150
        assert first.duration_seconds == 15.0
        assert first.scenario == "absence"

        assert second.question_text == "Hoe lang duurt een absence meestal?\nKies het beste antwoord."
        assert second.score == 100
        assert second.duration_seconds == 10.0
        assert second.scenario is None

    def test_blank_lines_separate_blocks(self):
        text = "Q: One?\nA: a\nA: b\nSCORE: 1\nDURATION: 5\n\nQ: Two?\nA: c\nA: d\nSCORE: 2\nDURATION: 5\n"
        assert [q.question_text for q in parse_quiz_text(text)] == ["One?", "Two?"]

    def test_empty_text_has_no_questions(self):
        assert parse_quiz_text("# only a comment\n\n") == []

    @pytest.mark.parametrize(
        "block",
        [
            "A: a\nA: b\nSCORE: 1\nDURATION: 5",
            "Q: Too few?\nA: a\nSCORE: 1\nDURATION: 5",
            "Q: Too many?\nA: a\nA: b\nA: c\nA: d\nA: e\nSCORE: 1\nDURATION: 5",
            "Q: Twice?\nA: same\nA: same\nSCORE: 1\nDURATION: 5",
            "Q: Empty?\nA: a\nA:\nSCORE: 1\nDURATION: 5",
            "Q: Score?\nA: a\nA: b\nSCORE: lots\nDURATION: 5",
            "Q: Duration?\nA: a\nA: b\nSCORE: 1\nDURATION: -3",
            "stray text\nQ: Where?\nA: a\nA: b\nSCORE: 1\nDURATION: 5",
        ],
    )
    def test_malformed_blocks(self, block):
        with pytest.raises(QuizImportError):
            parse_quiz_text(block)

    @pytest.mark.parametrize(
        ("block", "missing"),
        [
            ("Q: No score?\nA: a\nA: b\nDURATION: 5", "SCORE"),
            ("Q: No duration?\nA: a\nA: b\nSCORE: 1", "DURATION"),
        ],
    )
    def test_missing_score_or_duration(self, block, missing):
        """Blocks must state both their points and their answer time."""
        with pytest.raises(QuizImportError, match=missing):
            parse_quiz_text(block)

    def test_error_names_question_number(self):
        text = "Q: Fine?\nA: a\nA: b\nSCORE: 1\nDURATION: 5\n\nQ: Broken?\nA: a\n"
        with pytest.raises(QuizImportError, match="Question 2"):
            parse_quiz_text(text)


class TestLoadQuizFromFile:
    def test_bundled_questions_load(self):
        """The questions shipped with the game parse cleanly."""
        imported = load_quiz_from_file(BUNDLED_QUESTIONS)

        assert len(imported.questions) >= 1
        assert any(q.scenario == "absence" for q in imported.questions)

    def test_missing_file(self, tmp_path):
        with pytest.raises(QuizImportError):
            load_quiz_from_file(tmp_path / "missing.txt")

    def test_file_without_questions(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("# nothing here\n", encoding="utf-8")

        with pytest.raises(QuizImportError):
            load_quiz_from_file(path)


class TestExport:
    """Tests for writing questions back out."""

    def test_exported_file_reads_back(self, tmp_path):
        questions = [
            make_question(1, score=150, scenario="absence", duration=15.0),
            make_question(2, answer_count=4),
        ]
        path = tmp_path / "nested" / "quiz.txt"

        save_quiz_to_file(path, questions)
        imported = load_quiz_from_file(path)

        assert [q.question_text for q in imported.questions] == ["Question 1?", "Question 2?"]
        assert imported.questions[0].scenario == "absence"
        assert imported.questions[0].duration_seconds == 15.0
        assert imported.questions[1].answers == questions[1].answers

    def test_correct_answer_written_first(self):
        question = make_question(1)
        shuffled = type(question)(
            id=1,
            question_text=question.question_text,
            answers=tuple(reversed(question.answers)),
            correct_answer=question.correct_answer,
        )

        text = serialize_questions([shuffled])

        assert text.splitlines()[1] == f"A: {question.correct_answer}"
        assert "DURATION: 10" in text

    def test_empty_export_rejected(self, tmp_path):
        with pytest.raises(ValueError):
            save_quiz_to_file(tmp_path / "quiz.txt", [])
