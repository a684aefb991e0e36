"""Static metadata describing QuizRoom."""

APP_NAME = "QuizRoom"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizRoom is the quiz room from an epilepsy awareness experience. "
    "Answer before your score drains away; three wrong answers and the lights go out."
)

HELP_TEXT = (
    "Answer with the keys A-D (or 1-4) or from the controller page on your phone. "
    "Questions are loaded from a .txt file in the import format:\n\n"
    "Q: Welke aanval heb je zojuist ervaren?\n"
    "A: Absence\nA: Tonisch-clonisch\nA: Myoclonisch\n"
    "SCORE: 150\nDURATION: 15\nSCENARIO: absence\n\n"
    "The first answer listed is the correct one; answers are shuffled in the game."
)
