"""Append-only output log rendered by the console view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple


class OutputKind(str, Enum):
    """Channel tag attached to every console line."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    SYSTEM = "system"


@dataclass(frozen=True, slots=True)
class OutputEntry:
    kind: OutputKind
    text: str
    sequence: int


class OutputSink:
    """Ordered log of ``OutputEntry`` values.

    Sequence numbers are assigned only by ``append`` and stay contiguous from
    zero until ``clear`` drops every entry and restarts the counter.
    """

    def __init__(self) -> None:
        self._entries: List[OutputEntry] = []

    def append(self, kind: OutputKind, text: str) -> OutputEntry:
        entry = OutputEntry(kind=OutputKind(kind), text=text, sequence=len(self._entries))
        self._entries.append(entry)
        return entry

    def clear(self) -> None:
        self._entries = []

    def all(self) -> Tuple[OutputEntry, ...]:
        return tuple(self._entries)

    def texts(self) -> List[str]:
        return [entry.text for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OutputEntry]:
        return iter(tuple(self._entries))


__all__ = ["OutputEntry", "OutputKind", "OutputSink"]
