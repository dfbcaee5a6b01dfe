"""Persistence boundary for the ``(text, language)`` pair."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from script_synth.runtime import telemetry

from .models import Document

CODE_KEY = "code"
LANGUAGE_KEY = "language"


class DocumentStoreError(RuntimeError):
    """Raised when a store cannot persist a document."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DocumentStore(Protocol):
    """Get/set contract the session persists through."""

    def load(self) -> Optional[Document]:
        """Return the last saved document, or ``None`` when nothing is stored."""
        ...

    def save(self, document: Document) -> None:
        """Persist ``document``, replacing whatever was stored."""
        ...


class MemoryDocumentStore:
    """Process-local store; used by tests and ``--no-store`` sessions."""

    def __init__(self, document: Optional[Document] = None) -> None:
        self._document = document

    def load(self) -> Optional[Document]:
        return self._document

    def save(self, document: Document) -> None:
        self._document = document


class JsonFileDocumentStore:
    """Stores the document as ``{"code": ..., "language": ...}`` on disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> Optional[Document]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise DocumentStoreError(
                f"Cannot read {self.path}: {exc}", path=self.path
            ) from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            telemetry.record_event(
                "store.corrupt", level="warning", data={"path": str(self.path)}
            )
            return None

        code = payload.get(CODE_KEY) if isinstance(payload, dict) else None
        language = payload.get(LANGUAGE_KEY) if isinstance(payload, dict) else None
        if not isinstance(code, str) or not isinstance(language, str) or not code:
            return None
        return Document(text=code, language=language)

    def save(self, document: Document) -> None:
        payload = {CODE_KEY: document.text, LANGUAGE_KEY: document.language}
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise DocumentStoreError(
                f"Cannot write {self.path}: {exc}", path=self.path
            ) from exc
        telemetry.record_event(
            "store.save",
            data={"path": str(self.path), "language": document.language},
        )


__all__ = [
    "DocumentStore",
    "DocumentStoreError",
    "JsonFileDocumentStore",
    "MemoryDocumentStore",
]
