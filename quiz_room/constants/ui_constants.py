"""Qt monitor constants."""

WINDOW_TITLE: str = "QuizRoom"
TICK_INTERVAL_MS: int = 16

MENU_TITLE: str = "QuizRoom"
MENU_START_BUTTON: str = "Start Quiz"
MENU_ABOUT_BUTTON: str = "About"
MENU_HELP_BUTTON: str = "Help"
CONTROLLER_URL_TEMPLATE: str = "Answer from your phone: {url}"
NO_QUIZ_LOADED_MESSAGE: str = "No questions loaded. Start the app with --questions <file>."

CONFIRMING_TEXT: str = "Het antwoord is..."
CORRECT_TEXT: str = "JUIST!"
INCORRECT_TEXT: str = "FOUT!"
SCORE_TEMPLATE: str = "Score: {score}"
ANSWER_TEMPLATE: str = "{letter}: {answer}"
CONFIRMING_TEMPLATE: str = "[ {answer} ]"
CORRECT_HIGHLIGHT_TEMPLATE: str = ">>> {answer} <<<"

QUESTION_FONT_SIZE: int = 28
ANSWER_FONT_SIZE: int = 22
GAME_ENDED_FONT_SIZE: int = 64
ANSWER_SLOT_COUNT: int = 4
ANSWER_KEYS: str = "ABCD"

CEILING_LIGHT_INTENSITY: float = 1.5
GAME_OVER_LIGHT_INTENSITY: float = 0.1
LIGHT_FADE_SECONDS: float = 4.0

AMBIENT_FADE_IN_SECONDS: float = 1.0
AMBIENT_CONFIRM_SECONDS: float = 1.0
AMBIENT_CONFIRM_VOLUME: float = 0.5
AMBIENT_END_SECONDS: float = 3.0

SOUND_DIR: str = "data/sounds"
VOICE_DIR: str = "data/voice"
AMBIENT_SOUND: str = "ambient.wav"
SUBMIT_SOUND: str = "submit.wav"
CORRECT_SOUND: str = "correct.wav"
INCORRECT_SOUND: str = "incorrect.wav"
VICTORY_SOUND: str = "victory.wav"
GAME_OVER_SOUND: str = "game_over.wav"

ABSENCE_SCENARIO_NAME: str = "absence"
ABSENCE_FADE_SECONDS: float = 2.1
ABSENCE_ENVIRONMENT_TEXT: str = "Je zit in de klas. De leraar praat over het weekend..."
