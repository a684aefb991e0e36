"""Room lights the monitor can dim, registered explicitly by the window."""

from __future__ import annotations

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QWidget

from quiz_room.constants.ui_constants import CEILING_LIGHT_INTENSITY


class RoomLight:
    """Maps a light intensity onto the background brightness of a widget."""

    def __init__(
        self,
        widget: QWidget,
        base_color: str,
        full_intensity: float = CEILING_LIGHT_INTENSITY,
    ) -> None:
        if full_intensity <= 0:
            raise ValueError("full_intensity must be positive.")
        self._widget = widget
        self._base_color = QColor(base_color)
        self._full_intensity = full_intensity
        self._intensity = full_intensity

    @property
    def intensity(self) -> float:
        return self._intensity

    def set_intensity(self, intensity: float) -> None:
        self._intensity = max(0.0, intensity)
        factor = min(1.0, self._intensity / self._full_intensity)
        color = QColor.fromRgbF(
            self._base_color.redF() * factor,
            self._base_color.greenF() * factor,
            self._base_color.blueF() * factor,
        )
        # Selector form so the tint reaches every child of the room.
        self._widget.setStyleSheet(f"QWidget {{ background-color: {color.name()}; }}")

    def reset(self) -> None:
        self.set_intensity(self._full_intensity)
