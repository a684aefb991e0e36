"""Linear value fades driven by elapsed time (volumes, light intensity)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Fade:
    """Interpolates from ``start`` to ``target`` over ``duration`` seconds."""

    start: float
    target: float
    duration: float
    elapsed: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("Fade duration must not be negative.")

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def value(self) -> float:
        if self.duration == 0 or self.finished:
            return self.target
        progress = self.elapsed / self.duration
        return self.start + (self.target - self.start) * progress

    def advance(self, delta_seconds: float) -> float:
        if delta_seconds < 0:
            raise ValueError("Cannot advance a fade backwards.")
        self.elapsed = min(self.duration, self.elapsed + delta_seconds)
        return self.value
