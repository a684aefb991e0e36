"""Styling module for the QuizRoom monitor."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
