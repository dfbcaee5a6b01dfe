"""Linear snapshot history guarding the editable document."""

from __future__ import annotations

from typing import List, Tuple

from script_synth.runtime import telemetry


class HistoryTimeline:
    """Cursor-indexed list of document snapshots.

    Always holds at least the seed snapshot. Committing after an undo drops
    the redo branch; undo/redo at either end are no-ops.
    """

    def __init__(self, initial: str = "") -> None:
        self._snapshots: List[str] = [initial]
        self._cursor: int = 0

    @property
    def current(self) -> str:
        return self._snapshots[self._cursor]

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._snapshots)

    def snapshots(self) -> Tuple[str, ...]:
        return tuple(self._snapshots)

    def commit(self, text: str) -> bool:
        """Append ``text`` after the cursor; returns ``False`` for a no-op."""

        if text == self._snapshots[self._cursor]:
            return False
        if self._cursor < len(self._snapshots) - 1:
            del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(text)
        self._cursor = len(self._snapshots) - 1
        telemetry.record_event(
            "history.commit",
            level="debug",
            data={"length": len(self._snapshots), "cursor": self._cursor},
        )
        return True

    def can_undo(self) -> bool:
        return self._cursor > 0

    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def undo(self) -> str:
        if self.can_undo():
            self._cursor -= 1
        return self.current

    def redo(self) -> str:
        if self.can_redo():
            self._cursor += 1
        return self.current

    def reset(self, text: str) -> None:
        """Forget every snapshot and reseed with ``text``."""

        self._snapshots = [text]
        self._cursor = 0


__all__ = ["HistoryTimeline"]
