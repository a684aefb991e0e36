"""Color palette for the QuizRoom monitor supporting light and dark rooms."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Monitor theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the monitor."""

    # Text colors
    TEXT_STANDARD = ThemeColors(
        light="#000000",      # Black
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#666666",      # Dark Gray
        dark="#AAAAAA"        # Light Gray
    )

    # Answer feedback
    CORRECT = ThemeColors(
        light="#107C10",      # Green
        dark="#6FCF6F"        # Light Green
    )

    INCORRECT = ThemeColors(
        light="#D13438",      # Red
        dark="#FF6B6B"        # Light Red
    )

    # Room background
    BACKGROUND = ThemeColors(
        light="#FFFFFF",      # White
        dark="#101522"        # Night blue
    )

    # Lives indicator
    LIFE_AVAILABLE = ThemeColors(
        light="#FFB900",      # Orange/Yellow
        dark="#FFC83D"        # Lighter Orange
    )

    LIFE_CONSUMED = ThemeColors(
        light="#D1D1D1",      # Gray
        dark="#3A3A3A"        # Dark Gray
    )

    # Buttons
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#0078D4",      # Blue
        dark="#4A9EFF"        # Lighter Blue
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",      # White
        dark="#000000"        # Black
    )
