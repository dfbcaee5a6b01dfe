"""Edit history: snapshot timeline plus debounced commits."""

from .debounce import DEFAULT_DEBOUNCE_MS, DebouncedCommitter, PendingCommit
from .timeline import HistoryTimeline

__all__ = [
    "DEFAULT_DEBOUNCE_MS",
    "DebouncedCommitter",
    "HistoryTimeline",
    "PendingCommit",
]
