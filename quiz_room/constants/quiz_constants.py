"""Quiz rules and timings shared across core, UI and server layers."""

INITIAL_SCORE: float = 500.0
MAX_INCORRECT: int = 2
SCORE_DRAIN_PER_SECOND: float = 5.0

DEFAULT_QUESTION_SCORE: float = 100.0
DEFAULT_QUESTION_DURATION_SECONDS: float = 10.0
MIN_ANSWERS: int = 2
MAX_ANSWERS: int = 4

# Delays between the steps of a round, in seconds.
DELAY_BEFORE_REVEAL_ANSWER: float = 1.0
DELAY_BEFORE_AWARD: float = 0.2
DELAY_BEFORE_NEXT_QUESTION: float = 0.7
DELAY_BEFORE_LOAD_MENU: float = 5.0
AUTO_START_DELAY_SECONDS: float = 5.0

MENU_SCENE_NAME: str = "MenuScene"
DEFAULT_QUESTIONS_FILE: str = "data/quiz_questions.txt"  # relative to the quiz_room package
