"""Editing session tying the document, history, sandbox, and store together."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Callable, Optional

from script_synth.clipboard import Clipboard, ClipboardError, MemoryClipboard
from script_synth.console import ConsoleChannels, OutputKind, OutputSink
from script_synth.document import (
    Document,
    DocumentStore,
    DocumentStoreError,
    MemoryDocumentStore,
    build_share_url,
    default_code,
    default_file_name,
    parse_share_url,
    rename_for_language,
)
from script_synth.document.models import EXECUTABLE_LANGUAGE
from script_synth.execution import ExecutionSandbox
from script_synth.history import DEFAULT_DEBOUNCE_MS, DebouncedCommitter, HistoryTimeline
from script_synth.runtime import telemetry


class EditorSession:
    """UI-agnostic state behind one editor window.

    Keystrokes update ``document`` immediately while history commits are
    debounced. Store and clipboard problems become console errors instead
    of exceptions.
    """

    def __init__(
        self,
        store: Optional[DocumentStore] = None,
        *,
        language: str = EXECUTABLE_LANGUAGE,
        clipboard: Optional[Clipboard] = None,
        channels: Optional[ConsoleChannels] = None,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.store: DocumentStore = store if store is not None else MemoryDocumentStore()
        self.clipboard: Clipboard = clipboard or MemoryClipboard()
        self.sink = OutputSink()
        self.sandbox = ExecutionSandbox(self.sink, channels)
        self.is_saved = False
        self.last_saved: Optional[datetime] = None

        loaded = self._load()
        if loaded is not None:
            self.document = loaded
            self.is_saved = True
        else:
            self.document = Document(text=default_code(language), language=language)
        self.file_name = default_file_name(self.document.language)
        self.history = HistoryTimeline(self.document.text)
        self.committer = DebouncedCommitter(
            self.history, delay_ms=debounce_ms, clock=clock
        )

    @property
    def code(self) -> str:
        return self.document.text

    @property
    def language(self) -> str:
        return self.document.language

    def update_code(self, text: str) -> None:
        if text == self.document.text:
            return
        self.document = self.document.with_text(text)
        self.is_saved = False
        self.committer.schedule(text)

    def process_timeouts(self) -> bool:
        return self.committer.process_timeouts()

    def change_language(self, language: str) -> None:
        self.document = self.document.with_language(language)
        self.file_name = rename_for_language(self.file_name, self.document.language)

    def set_file_name(self, name: str) -> None:
        self.file_name = name

    def new_file(self) -> None:
        self.update_code(default_code(self.document.language))
        self.committer.flush()

    def open_document(self, document: Document) -> None:
        """Replace the session document and start a fresh history."""

        self.committer.cancel()
        self.document = document
        self.file_name = default_file_name(document.language)
        self.history.reset(document.text)
        self.is_saved = False

    def open_share_url(self, url: str) -> bool:
        shared = parse_share_url(url)
        if shared is None:
            return False
        self.open_document(shared)
        return True

    def save(self) -> bool:
        try:
            self.store.save(self.document)
        except DocumentStoreError as exc:
            self.sink.append(OutputKind.ERROR, f"Error: {exc}")
            return False
        self.is_saved = True
        self.last_saved = datetime.now()
        self.sink.append(OutputKind.SYSTEM, f"File saved: {self.file_name}")
        telemetry.record_event(
            "session.save",
            data={"file": self.file_name, "language": self.document.language},
        )
        return True

    def undo(self) -> str:
        self.committer.flush()
        return self._restore(self.history.undo())

    def redo(self) -> str:
        self.committer.flush()
        return self._restore(self.history.redo())

    def run(self) -> None:
        self.sandbox.run(self.document, file_name=self.file_name)

    def clear_output(self) -> None:
        self.sink.clear()

    def copy_output(self) -> bool:
        lines = self.sink.texts()
        if not lines:
            return False
        return self._copy("\n".join(lines), "Terminal output")

    def share_url(self, base_url: str) -> str:
        return build_share_url(base_url, self.document)

    def copy_share_url(self, base_url: str) -> bool:
        return self._copy(self.share_url(base_url), "Share link")

    def _copy(self, text: str, label: str) -> bool:
        try:
            self.clipboard.copy(text)
        except ClipboardError as exc:
            self.sink.append(OutputKind.ERROR, f"Error: failed to copy {label.lower()}: {exc}")
            return False
        telemetry.record_event("session.copy", level="debug", data={"what": label})
        return True

    def _restore(self, text: str) -> str:
        if text != self.document.text:
            self.document = self.document.with_text(text)
            self.is_saved = False
        return text

    def _load(self) -> Optional[Document]:
        try:
            return self.store.load()
        except DocumentStoreError as exc:
            self.sink.append(OutputKind.ERROR, f"Error: {exc}")
            return None


__all__ = ["EditorSession"]
