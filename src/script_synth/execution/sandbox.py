"""Cooperative sandbox that runs a document and records its output."""

from __future__ import annotations

import builtins
import time
from typing import Any, Callable, Dict, Mapping, Optional

from script_synth.console import CaptureShim, ConsoleChannels, OutputKind, OutputSink
from script_synth.document.models import Document, default_file_name
from script_synth.runtime import telemetry

from .evaluator import EvaluationResult, evaluate, fresh_namespace


class ExecutionSandbox:
    """Runs ``python`` documents in a fresh namespace.

    Every run clears the sink first. There is no timeout: a script that
    never returns blocks the caller, since evaluation happens on the calling
    thread.
    """

    def __init__(
        self,
        sink: OutputSink,
        channels: Optional[ConsoleChannels] = None,
        *,
        extra_globals: Optional[Mapping[str, Any]] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.sink = sink
        self.channels = channels or ConsoleChannels.host()
        self._extra_globals = dict(extra_globals or {})
        self._clock = clock
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self, document: Document, *, file_name: Optional[str] = None) -> None:
        if self._running:
            telemetry.record_event(
                "sandbox.reentrant_run",
                level="warning",
                data={"language": document.language},
            )
            return
        self._running = True
        try:
            self._run(document, file_name or default_file_name(document.language))
        finally:
            self._running = False

    def _run(self, document: Document, file_name: str) -> None:
        self.sink.clear()
        if not document.executable:
            self.sink.append(
                OutputKind.SYSTEM,
                f"Execution of {document.language} code requires a server environment.",
            )
            telemetry.record_event(
                "sandbox.unsupported", data={"language": document.language}
            )
            return

        self.sink.append(OutputKind.SYSTEM, f"Execution started: {file_name}")
        shim = CaptureShim(self.channels, self.sink)
        started = self._clock()
        with telemetry.span(
            "sandbox::run", track=True, file=file_name, language=document.language
        ) as handle:
            try:
                shim.install()
                result = evaluate(document.text, self._namespace())
            except Exception as exc:
                # evaluate() already traps script failures; this covers the shim.
                result = EvaluationResult(
                    error=str(exc) or type(exc).__name__,
                    error_type=type(exc).__name__,
                )
            finally:
                shim.uninstall()
            handle.add_metadata("ok", result.ok)

        if result.error is not None:
            self.sink.append(OutputKind.ERROR, result.error)
        elif result.value is not None:
            self.sink.append(OutputKind.INFO, f"Return value: {result.value}")

        elapsed_ms = (self._clock() - started) * 1000.0
        self.sink.append(
            OutputKind.SYSTEM, f"Execution completed in {elapsed_ms:.2f}ms"
        )

    def _namespace(self) -> Dict[str, Any]:
        channels = self.channels

        def script_print(
            *args: Any,
            sep: Optional[str] = " ",
            end: Optional[str] = "\n",
            file: Any = None,
            flush: bool = False,
        ) -> None:
            log = channels.log
            if log is None or file is not None:
                builtins.print(*args, sep=sep, end=end, file=file, flush=flush)
                return
            # One print is one console line; the default newline is implied.
            line = (" " if sep is None else sep).join(str(arg) for arg in args)
            line += "\n" if end is None else end
            log(line[:-1] if line.endswith("\n") else line)

        return fresh_namespace(
            {**self._extra_globals, "console": channels, "print": script_print}
        )


__all__ = ["ExecutionSandbox"]
