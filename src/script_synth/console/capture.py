"""Temporary redirection of console channels into an ``OutputSink``."""

from __future__ import annotations

from typing import Any, Dict, Optional

from script_synth.runtime import telemetry

from .channels import CHANNEL_KINDS, CHANNEL_NAMES, Channel, ConsoleChannels
from .formatting import format_call
from .sink import OutputSink


class CaptureShim:
    """Intercepts ``log``/``info``/``warn``/``error`` on a ``ConsoleChannels``.

    ``install`` remembers the functions bound at that moment and
    ``uninstall`` puts back exactly those references, so repeated cycles
    never stack wrappers. Channels bound to ``None`` are left alone.
    """

    def __init__(self, channels: ConsoleChannels, sink: OutputSink) -> None:
        self.channels = channels
        self.sink = sink
        self._saved: Optional[Dict[str, Optional[Channel]]] = None

    @property
    def installed(self) -> bool:
        return self._saved is not None

    def install(self) -> None:
        if self._saved is not None:
            return
        saved = self.channels.bindings()
        for name in CHANNEL_NAMES:
            original = saved[name]
            if original is None:
                telemetry.record_event(
                    "capture.channel_missing", level="debug", data={"channel": name}
                )
                continue
            self.channels.bind(name, self._wrap(name, original))
        self._saved = saved

    def uninstall(self) -> None:
        if self._saved is None:
            return
        for name, original in self._saved.items():
            self.channels.bind(name, original)
        self._saved = None

    def __enter__(self) -> "CaptureShim":
        self.install()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.uninstall()
        return False

    def _wrap(self, name: str, original: Channel) -> Channel:
        kind = CHANNEL_KINDS[name]
        sink = self.sink

        def captured(*args: Any) -> None:
            sink.append(kind, format_call(name, args))
            original(*args)

        captured.__name__ = name
        captured.__wrapped__ = original  # type: ignore[attr-defined]
        return captured


__all__ = ["CaptureShim"]
