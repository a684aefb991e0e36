"""Centralized styles for the monitor window."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.DARK) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_STANDARD.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND.get(theme)};
                color: {ColorPalette.TEXT_STANDARD.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 6px;
                padding: 10px 18px;
                font-size: 18px;
            }}
        """

    @staticmethod
    def get_text_style(color: str, font_size: int) -> str:
        return f"color: {color}; font-size: {font_size}pt;"

    @staticmethod
    def get_life_style(color: str) -> str:
        return f"background-color: {color}; border-radius: 12px;"
