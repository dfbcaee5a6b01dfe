"""Executable Textual app hosting the script editor."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal, Vertical
    from textual.widgets import Footer, Header, RichLog, Select, Static, TextArea
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use script_synth.adapters.textual.app"
    ) from exc

from script_synth.clipboard import ClipboardError
from script_synth.config import SessionConfig
from script_synth.console import OutputEntry, render_entries
from script_synth.document import (
    LANGUAGE_OPTIONS,
    DocumentStore,
    JsonFileDocumentStore,
    MemoryDocumentStore,
)
from script_synth.runtime import telemetry
from script_synth.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks


_LANGUAGE_VALUES = {value for value, _label in LANGUAGE_OPTIONS}


def _select_value(language: str) -> str:
    return language if language in _LANGUAGE_VALUES else LANGUAGE_OPTIONS[0][0]


class TextualClipboard:
    """Clipboard collaborator writing through the running app."""

    def __init__(self, app: App) -> None:
        self._app = app

    def copy(self, text: str) -> None:
        copy = getattr(self._app, "copy_to_clipboard", None)
        if copy is None:
            raise ClipboardError("this terminal does not expose a clipboard")
        copy(text)


@dataclass
class UIState:
    editor_text: str = ""
    status_text: str = ""


class ScriptSynthApp(App[None]):
    """Editor pane on top, console pane below."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#toolbar {
		height: 3;
	}

	#language {
		width: 24;
	}

	#status-line {
		padding: 1 1;
		width: 1fr;
	}

	#editor {
		height: 2fr;
	}

	#console {
		height: 1fr;
		border: round $accent;
		background: $surface-darken-1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+r", "run", "Run", priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+n", "new_file", "New"),
        Binding("ctrl+l", "clear_output", "Clear"),
        Binding("ctrl+o", "copy_output", "Copy output"),
        Binding("ctrl+e", "share", "Share"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: SessionConfig,
        store: DocumentStore,
        *,
        open_url: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._config = config
        self._open_url = open_url
        self._store = store
        self._state = UIState()
        self.session: EditorSession | None = None
        self.adapter: TextualEditorAdapter | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="toolbar"):
            yield Select(
                [(label, value) for value, label in LANGUAGE_OPTIONS],
                value=_select_value(self._config.language),
                allow_blank=False,
                id="language",
            )
            yield Static("", id="status-line")
        with Vertical():
            yield TextArea("", id="editor")
            yield RichLog(id="console", wrap=True, markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.session = EditorSession(
            self._store,
            language=self._config.language,
            clipboard=TextualClipboard(self),
            debounce_ms=self._config.debounce_ms,
        )
        hooks = TextualUIHooks(
            update_editor=self._update_editor,
            update_console=self._update_console,
            update_status=self._update_status,
            log=lambda line: telemetry.log_message("debug", line),
        )
        self.adapter = TextualEditorAdapter(self.session, hooks)
        if self._open_url:
            self.adapter.open_share_url(self._open_url)
        if self.session.language in _LANGUAGE_VALUES:
            self.query_one("#language", Select).value = self.session.language
        self.set_interval(0.1, self._process_timeouts)

    def _process_timeouts(self) -> None:
        if self.adapter:
            self.adapter.process_timeouts()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        text = event.text_area.text
        self._state.editor_text = text
        if self.adapter:
            self.adapter.handle_text_change(text)

    def on_select_changed(self, event: Select.Changed) -> None:
        if self.adapter and isinstance(event.value, str):
            self.adapter.change_language(event.value)

    def action_run(self) -> None:
        if self.adapter:
            self.adapter.run()

    def action_save(self) -> None:
        if self.adapter:
            self.adapter.save()

    def action_undo(self) -> None:
        if self.adapter:
            self.adapter.undo()

    def action_redo(self) -> None:
        if self.adapter:
            self.adapter.redo()

    def action_new_file(self) -> None:
        if self.adapter:
            self.adapter.new_file()

    def action_clear_output(self) -> None:
        if self.adapter:
            self.adapter.clear_output()

    def action_copy_output(self) -> None:
        if self.adapter:
            self.adapter.copy_output()

    def action_share(self) -> None:
        if self.adapter:
            self.adapter.share(self._config.share_base_url)

    def _update_editor(self, text: str) -> None:
        if text == self._state.editor_text:
            return
        self._state.editor_text = text
        self.query_one("#editor", TextArea).load_text(text)

    def _update_console(self, entries: Sequence[OutputEntry]) -> None:
        console = self.query_one("#console", RichLog)
        console.clear()
        if not entries:
            console.write("Terminal output will appear here...")
            return
        for line in render_entries(entries):
            console.write(line)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        self.query_one("#status-line", Static).update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = SessionConfig.from_env()
    parser = argparse.ArgumentParser(description="Run the script_synth editor.")
    parser.add_argument(
        "--language",
        default=defaults.language,
        help=f"Language for a fresh document (default: {defaults.language})",
    )
    parser.add_argument(
        "--store",
        type=Path,
        default=defaults.store_path,
        help="JSON file the document is saved to",
    )
    parser.add_argument(
        "--no-store",
        action="store_true",
        help="Keep the document in memory only",
    )
    parser.add_argument(
        "--debounce-ms",
        type=int,
        default=defaults.debounce_ms,
        help="Quiet period before an edit lands in undo history",
    )
    parser.add_argument(
        "--share-base-url",
        default=defaults.share_base_url,
        help="Base URL share links are built on",
    )
    parser.add_argument(
        "--open-url",
        help="Share link whose document replaces the stored one on start",
    )
    parser.add_argument(
        "--log-preset",
        choices=sorted(telemetry.PRESETS),
        help="Telemetry preset to apply before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    config = SessionConfig(
        language=args.language.strip().lower(),
        debounce_ms=max(args.debounce_ms, 0),
        store_path=None if args.no_store else args.store,
        share_base_url=args.share_base_url,
    )
    store: DocumentStore
    if config.store_path is None:
        store = MemoryDocumentStore()
    else:
        store = JsonFileDocumentStore(config.store_path)
    ScriptSynthApp(config, store, open_url=args.open_url).run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
