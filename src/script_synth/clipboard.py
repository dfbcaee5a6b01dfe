"""Clipboard collaborator used by copy and share actions."""

from __future__ import annotations

from typing import Optional, Protocol


class ClipboardError(RuntimeError):
    """Raised when the host clipboard rejects a write."""


class Clipboard(Protocol):
    def copy(self, text: str) -> None:
        ...


class MemoryClipboard:
    """Keeps the last copied text; stands in where no host clipboard exists."""

    def __init__(self) -> None:
        self.text: Optional[str] = None

    def copy(self, text: str) -> None:
        self.text = text


__all__ = ["Clipboard", "ClipboardError", "MemoryClipboard"]
