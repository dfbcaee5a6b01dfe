"""Script editing session with a cooperative Python sandbox."""

__all__ = [
    "adapters",
    "clipboard",
    "config",
    "console",
    "document",
    "execution",
    "history",
    "runtime",
    "session",
]

__version__ = "0.1.0"
