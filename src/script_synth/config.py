"""Session configuration sourced from ``SCRIPT_SYNTH_*`` environment variables."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from script_synth.document.models import EXECUTABLE_LANGUAGE
from script_synth.history.debounce import DEFAULT_DEBOUNCE_MS
from script_synth.runtime.telemetry import env

DEFAULT_STORE_PATH = Path("~/.script_synth/last.json")
DEFAULT_SHARE_BASE_URL = "https://script-synth.local/"


def _env_int(name: str, fallback: int) -> int:
    value = env(name)
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed >= 0 else fallback


@dataclass
class SessionConfig:
    language: str = EXECUTABLE_LANGUAGE
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    store_path: Optional[Path] = DEFAULT_STORE_PATH
    share_base_url: str = DEFAULT_SHARE_BASE_URL

    @classmethod
    def from_env(cls) -> "SessionConfig":
        store = env("STORE_PATH")
        return cls(
            language=(env("LANGUAGE") or EXECUTABLE_LANGUAGE).strip().lower(),
            debounce_ms=_env_int("DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS),
            store_path=Path(store) if store else DEFAULT_STORE_PATH,
            share_base_url=env("SHARE_BASE_URL") or DEFAULT_SHARE_BASE_URL,
        )


__all__ = ["DEFAULT_SHARE_BASE_URL", "DEFAULT_STORE_PATH", "SessionConfig"]
