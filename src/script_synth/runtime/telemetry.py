"""Telemetry for script_synth, backed by telelog.

Two kinds of traffic share one telelog configuration: the editor's own
diagnostics (``record_event`` and ``span``) and whatever a script writes on
its host console channels (``script_channel``). The editor normally owns the
terminal, so nothing is echoed to it unless ``SCRIPT_SYNTH_LOG_CONSOLE`` is
set or the ``development`` preset is chosen.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "SCRIPT_SYNTH_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "script_synth")
SCRIPT_LOGGER_NAME = f"{DEFAULT_LOGGER_NAME}.console"

# Level each script console channel is written at on the host logger.
SCRIPT_CHANNEL_LEVELS: Dict[str, str] = {
    "log": "info",
    "info": "debug",
    "warn": "warning",
    "error": "error",
}

_LOGGERS: MutableMapping[str, Any] = {}
_CONFIG: Optional[Any] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LogSettings:
    """What the telelog config should look like, before it is built."""

    level: str = "WARNING"
    console: bool = False
    color: bool = True
    json: bool = False
    log_file: Optional[str] = None
    buffered: bool = False

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level.upper())
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        config.with_profiling(True)
        return config


PRESETS: Dict[str, LogSettings] = {
    "development": LogSettings(level="DEBUG", console=True),
    "production": LogSettings(
        level="INFO", log_file="script_synth.log", buffered=True
    ),
    "performance": LogSettings(
        level="DEBUG",
        json=True,
        log_file="script_synth-performance.log",
        buffered=True,
    ),
}


def settings_from_env() -> LogSettings:
    return LogSettings(
        level=env("LOG_LEVEL") or "WARNING",
        console=env_flag("LOG_CONSOLE", False),
        color=not env_flag("NO_COLOR", False),
        json=env_flag("LOG_JSON", False),
        log_file=env("LOG_FILE") or None,
    )


def preset_settings(name: str) -> LogSettings:
    try:
        settings = PRESETS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown telemetry preset '{name}'.") from None
    log_file = env("LOG_FILE")
    return replace(settings, log_file=log_file) if log_file else settings


def configure(
    settings: Optional[LogSettings] = None, *, preset: Optional[str] = None
) -> None:
    """Rebuild the telelog config; with no arguments it is read from the environment."""

    global _CONFIG
    if settings is not None and preset:
        raise ValueError("Provide either `settings` or `preset`, not both.")
    if preset:
        settings = preset_settings(preset)
    _CONFIG = (settings or settings_from_env()).build()
    _LOGGERS.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = settings_from_env().build()
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGERS:
        _LOGGERS[logger_name] = tl.Logger.with_config(logger_name, _CONFIG)
    return _LOGGERS[logger_name]


def _emit(
    log: Any, level: str, message: str, data: Optional[Dict[str, Any]] = None
) -> None:
    name = str(level).lower()
    if data is not None:
        with_data = getattr(log, f"{name}_with", None)
        if with_data is not None:
            with_data(message, [(str(key), str(value)) for key, value in data.items()])
            return
        message = f"{message} {data}"
    method = getattr(log, name, None)
    if method is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    method(message)


def log_message(level: str, message: str, *, logger_name: Optional[str] = None) -> None:
    _emit(get_logger(logger_name), level, message)


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` as structured pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


def script_channel(channel: str) -> Callable[..., None]:
    """Host writer for one script console channel.

    Arguments are joined with a space and written to ``SCRIPT_LOGGER_NAME``
    at the level ``SCRIPT_CHANNEL_LEVELS`` assigns to ``channel``.
    """

    level = SCRIPT_CHANNEL_LEVELS[channel]

    def write(*args: Any) -> None:
        _emit(get_logger(SCRIPT_LOGGER_NAME), level, " ".join(str(arg) for arg in args))

    write.__name__ = channel
    return write


@dataclass
class SpanHandle:
    logger: Any
    name: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = str(value)


@contextmanager
def span(
    name: str,
    *,
    track: bool = False,
    logger_name: Optional[str] = None,
    **metadata: Any,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``.

    ``track=True`` also registers it as a telelog component. Keyword
    metadata is held as logger context while the block runs and is repeated
    on the ``span::fail`` line if the block raises.
    """

    log = get_logger(logger_name)
    handle = SpanHandle(log, name, {key: str(value) for key, value in metadata.items()})
    context_keys = list(handle.metadata)
    for key in context_keys:
        log.add_context(key, handle.metadata[key])

    with ExitStack() as stack:
        if track:
            stack.enter_context(log.track_component(name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            _emit(log, "error", "span::fail", {"span": name, **handle.metadata, "reason": exc})
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


__all__ = [
    "LogSettings",
    "PRESETS",
    "SCRIPT_CHANNEL_LEVELS",
    "SCRIPT_LOGGER_NAME",
    "SpanHandle",
    "configure",
    "env",
    "env_flag",
    "get_logger",
    "log_message",
    "preset_settings",
    "record_event",
    "script_channel",
    "settings_from_env",
    "span",
]
