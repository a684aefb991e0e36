"""Qt UI components for the quiz room."""

from .dialog_helpers import show_info, show_warning
from .display_bridge import DisplayBridge
from .quiz_room_window import QuizRoomWindow
from .scenarios import AbsenceScenario

__all__ = [
    "AbsenceScenario",
    "DisplayBridge",
    "QuizRoomWindow",
    "show_info",
    "show_warning",
]
