"""Quiescence-window coalescing of history commits."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

from script_synth.runtime import telemetry

from .timeline import HistoryTimeline

DEFAULT_DEBOUNCE_MS = 1000


@dataclass
class PendingCommit:
    deadline: float
    text: str


class DebouncedCommitter:
    """Holds at most one pending commit for a ``HistoryTimeline``.

    Each ``schedule`` replaces the pending text and pushes the deadline out.
    Nothing fires on its own: the host polls ``process_timeouts`` from its
    event loop, or calls ``flush`` to commit immediately.
    """

    def __init__(
        self,
        history: HistoryTimeline,
        *,
        delay_ms: int = DEFAULT_DEBOUNCE_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if delay_ms < 0:
            raise ValueError("delay_ms cannot be negative")
        self.history = history
        self.delay_ms = delay_ms
        self._clock = clock
        self._pending: Optional[PendingCommit] = None

    @property
    def pending(self) -> Optional[PendingCommit]:
        return self._pending

    def schedule(self, text: str) -> None:
        self._pending = PendingCommit(
            deadline=self._clock() + (self.delay_ms / 1000.0), text=text
        )

    def cancel(self) -> None:
        self._pending = None

    def process_timeouts(self) -> bool:
        """Commit the pending text if its deadline passed; ``True`` if it did."""

        timer = self._pending
        if timer is None or timer.deadline > self._clock():
            return False
        return self._fire(timer)

    def flush(self) -> bool:
        if self._pending is None:
            return False
        return self._fire(self._pending)

    def _fire(self, timer: PendingCommit) -> bool:
        self._pending = None
        with telemetry.span("history::debounced_commit", chars=len(timer.text)):
            return self.history.commit(timer.text)


__all__ = ["DEFAULT_DEBOUNCE_MS", "DebouncedCommitter", "PendingCommit"]
