"""Cooperative delay queue advanced by game ticks.

Delayed steps of a round (reveal, award, next question, menu) are stored as
``(deadline, continuation)`` pairs and run from ``advance`` on the ticking
thread, so a pending delay never blocks score drain or input handling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import heapq
import itertools
import logging
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(order=True, slots=True)
class DelayedAction:
    """A continuation waiting for the clock to reach ``deadline``."""

    deadline: float
    sequence: int
    callback: Callable[[], None] = field(compare=False)
    label: str = field(default="", compare=False)
    cancelled: bool = field(default=False, compare=False)


class DelayQueue:
    """Runs callbacks once enough simulated time has elapsed."""

    def __init__(self) -> None:
        self._clock: float = 0.0
        self._heap: list[DelayedAction] = []
        self._sequence = itertools.count()

    @property
    def clock(self) -> float:
        return self._clock

    def schedule(self, delay: float, callback: Callable[[], None], label: str = "") -> DelayedAction:
        if delay < 0:
            raise ValueError("Delay must not be negative.")
        action = DelayedAction(
            deadline=self._clock + delay,
            sequence=next(self._sequence),
            callback=callback,
            label=label,
        )
        heapq.heappush(self._heap, action)
        logger.debug("Scheduled %s in %.2fs", label or "action", delay)
        return action

    def advance(self, delta_seconds: float) -> int:
        """Move the clock forward and run every due action. Returns how many ran."""
        if delta_seconds < 0:
            raise ValueError("Cannot advance the clock backwards.")
        target = self._clock + delta_seconds

        executed = 0
        while self._heap and self._heap[0].deadline <= target:
            action = heapq.heappop(self._heap)
            if action.cancelled:
                continue
            # Actions scheduled by this callback count from its deadline.
            self._clock = max(self._clock, action.deadline)
            logger.debug("Running %s", action.label or "action")
            action.callback()
            executed += 1
        self._clock = target
        return executed

    def cancel(self, action: DelayedAction) -> None:
        action.cancelled = True

    def cancel_all(self) -> None:
        for action in self._heap:
            action.cancelled = True
        self._heap = []

    def pending_count(self) -> int:
        return sum(1 for action in self._heap if not action.cancelled)
