"""The ``console`` handle scripts write to."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from script_synth.runtime import telemetry

from .sink import OutputKind

Channel = Callable[..., None]

CHANNEL_NAMES: tuple[str, ...] = ("log", "info", "warn", "error")

CHANNEL_KINDS: Dict[str, OutputKind] = {
    "log": OutputKind.INFO,
    "info": OutputKind.INFO,
    "warn": OutputKind.WARNING,
    "error": OutputKind.ERROR,
}


class ConsoleChannels:
    """Explicit handle over the four logging channels.

    Sandboxes borrow one of these instead of patching process-wide streams,
    so two sandboxes with separate handles never see each other's output.
    A channel bound to ``None`` is treated as unavailable.
    """

    __slots__ = CHANNEL_NAMES

    def __init__(
        self,
        *,
        log: Optional[Channel] = None,
        info: Optional[Channel] = None,
        warn: Optional[Channel] = None,
        error: Optional[Channel] = None,
    ) -> None:
        self.log = log
        self.info = info
        self.warn = warn
        self.error = error

    @classmethod
    def host(cls) -> "ConsoleChannels":
        """Channels that forward to the telemetry script logger."""

        return cls(**{name: telemetry.script_channel(name) for name in CHANNEL_NAMES})

    def get(self, name: str) -> Optional[Channel]:
        if name not in CHANNEL_NAMES:
            raise KeyError(f"Unknown console channel '{name}'")
        return getattr(self, name)

    def bind(self, name: str, channel: Optional[Channel]) -> None:
        if name not in CHANNEL_NAMES:
            raise KeyError(f"Unknown console channel '{name}'")
        setattr(self, name, channel)

    def bindings(self) -> Dict[str, Optional[Channel]]:
        return {name: getattr(self, name) for name in CHANNEL_NAMES}

    def __repr__(self) -> str:
        bound = [name for name in CHANNEL_NAMES if getattr(self, name) is not None]
        return f"ConsoleChannels(bound={bound!r})"


__all__ = ["CHANNEL_KINDS", "CHANNEL_NAMES", "Channel", "ConsoleChannels"]
