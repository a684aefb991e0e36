"""Application entry point for QuizRoom."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import random
import socket
import sys

from PySide6.QtWidgets import QApplication

from quiz_room.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_room.constants.quiz_constants import AUTO_START_DELAY_SECONDS, DEFAULT_QUESTIONS_FILE
from quiz_room.core.models import QuizSettings
from quiz_room.core.quiz_importer import QuizImportError, load_quiz_from_file
from quiz_room.core.quiz_manager import QuizManager
from quiz_room.server.api_server import start_api_server
from quiz_room.ui.quiz_room_window import QuizRoomWindow
from quiz_room.utils.logging_config import configure_logging

_DEFAULT_QUESTIONS_PATH = Path(__file__).resolve().parent / "quiz_room" / DEFAULT_QUESTIONS_FILE


def _determine_controller_url(port: int) -> str:
    """Best-effort determination of the local IP for the controller URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the QuizRoom quiz.")
    parser.add_argument(
        "--questions",
        type=Path,
        default=_DEFAULT_QUESTIONS_PATH,
        help="Path to the question file",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="Controller API host")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Controller API port")
    parser.add_argument("--seed", type=int, default=None, help="Seed for question and answer shuffling")
    parser.add_argument(
        "--time-limit",
        action="store_true",
        help="Count unanswered questions as wrong once their duration runs out",
    )
    parser.add_argument(
        "--auto-start",
        action="store_true",
        help=f"Start the quiz {AUTO_START_DELAY_SECONDS:g}s after launch",
    )
    parser.add_argument("--no-server", action="store_true", help="Do not start the controller API")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Load the questions, start the controller API, and launch the Qt window."""
    args = parse_args(argv)
    logger = configure_logging(logging.DEBUG if args.debug else logging.INFO)
    logger.info("Starting QuizRoom…")

    try:
        imported = load_quiz_from_file(args.questions)
    except QuizImportError as exc:
        logger.error("Could not load questions: %s", exc)
        sys.exit(1)

    settings = QuizSettings(enforce_time_limit=args.time_limit)
    quiz_manager = QuizManager(settings=settings, rng=random.Random(args.seed))
    quiz_manager.load_quiz_from_questions(imported.questions)

    controller_url = None
    if not args.no_server:
        start_api_server(quiz_manager=quiz_manager, host=args.host, port=args.port)
        controller_url = _determine_controller_url(args.port)
        logger.info("Controller page available at %s", controller_url)

    app = QApplication(sys.argv[:1])
    window = QuizRoomWindow(quiz_manager=quiz_manager, controller_url=controller_url)
    window.show()
    if args.auto_start:
        quiz_manager.start_quiz_after(AUTO_START_DELAY_SECONDS)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
