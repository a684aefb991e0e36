"""Helper functions for common dialog patterns in the monitor UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show an informational message box."""
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Show a warning message box."""
    QMessageBox.warning(parent, title, message)
