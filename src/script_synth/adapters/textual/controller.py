"""Textual adapter that wires an EditorSession into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Sequence

from script_synth.console import OutputEntry
from script_synth.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_editor: Callable[[str], None]
    update_console: Callable[[Sequence[OutputEntry]], None] = _noop
    update_status: Callable[[str], None] = _noop
    # Optional debug line sink for hosts that want to trace adapter traffic
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Translates widget events and toolbar actions into session calls."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._refresh_editor()
        self._refresh_console()
        self._refresh_status()

    def handle_text_change(self, text: str) -> None:
        self.session.update_code(text)
        self._refresh_status()

    def process_timeouts(self) -> bool:
        committed = self.session.process_timeouts()
        if committed:
            self._log_state("timeout ->", committed=True)
        return committed

    def run(self) -> None:
        self._log_state("run ->")
        self.session.run()
        self._refresh_console()
        self._log_state("run <-", entries=len(self.session.sink))

    def undo(self) -> str:
        text = self.session.undo()
        self._after_history("undo")
        return text

    def redo(self) -> str:
        text = self.session.redo()
        self._after_history("redo")
        return text

    def save(self) -> bool:
        saved = self.session.save()
        self._refresh_console()
        self.hooks.update_status(
            "File saved successfully" if saved else "Failed to save file"
        )
        return saved

    def new_file(self) -> None:
        self.session.new_file()
        self._refresh_editor()
        self.hooks.update_status("Created new file")

    def change_language(self, language: str) -> None:
        self.session.change_language(language)
        self._refresh_status()
        self._log_state("language ->", language=language)

    def clear_output(self) -> None:
        self.session.clear_output()
        self._refresh_console()

    def copy_output(self) -> bool:
        copied = self.session.copy_output()
        self._refresh_console()
        if copied:
            self.hooks.update_status("Terminal output copied to clipboard")
        return copied

    def share(self, base_url: str) -> bool:
        copied = self.session.copy_share_url(base_url)
        self._refresh_console()
        self.hooks.update_status(
            "Share link copied to clipboard" if copied else "Failed to copy share link"
        )
        return copied

    def open_share_url(self, url: str) -> bool:
        opened = self.session.open_share_url(url)
        if opened:
            self._refresh_editor()
            self._refresh_status()
        else:
            self.hooks.update_status("Invalid share link")
        self._log_state("open_url ->", opened=opened)
        return opened

    def _after_history(self, action: str) -> None:
        history = self.session.history
        self._log_state(f"{action} ->", cursor=history.cursor, length=len(history))
        self._refresh_editor()
        self._refresh_status()

    def _refresh_editor(self) -> None:
        self.hooks.update_editor(self.session.code)

    def _refresh_console(self) -> None:
        self.hooks.update_console(self.session.sink.all())

    def _refresh_status(self) -> None:
        marker = "" if self.session.is_saved else " *"
        self.hooks.update_status(
            f"{self.session.file_name}{marker} [{self.session.language}]"
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "file": session.file_name,
            "language": session.language,
            "saved": session.is_saved,
            "pending_commit": session.committer.pending is not None,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
