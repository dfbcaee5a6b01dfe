"""Pattern-based styling for console lines."""

from __future__ import annotations

import re
from typing import Iterable, Tuple

from rich.text import Text

from .sink import OutputEntry

HIGHLIGHT_RULES: Tuple[Tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(?i)\b(?:error|fail|exception):"), "bold red"),
    (re.compile(r"(?i)\b(?:warning|warn):"), "yellow"),
    (re.compile(r"(?i)\b(?:success|done|completed):"), "green"),
    (re.compile(r"\b[a-z][a-z0-9+.-]*://[^\s]+"), "underline blue"),
    (re.compile(r"(?:[A-Za-z0-9_-]+/)*[A-Za-z0-9_-]+\.[A-Za-z0-9]+\b"), "blue"),
)

_URL = HIGHLIGHT_RULES[3][0]


def highlight(text: str) -> Text:
    """Return ``text`` with style spans over the recognised substrings.

    The scan is purely textual and ignores which channel produced the line.
    URL spans suppress overlapping file-name spans.
    """

    rendered = Text(text)
    url_ranges = [match.span() for match in _URL.finditer(text)]
    for pattern, style in HIGHLIGHT_RULES:
        for match in pattern.finditer(text):
            start, end = match.span()
            if start == end:
                continue
            if style == "blue" and _inside(url_ranges, start, end):
                continue
            rendered.stylize(style, start, end)
    return rendered


def render_entries(entries: Iterable[OutputEntry]) -> list[Text]:
    return [highlight(entry.text) for entry in entries]


def _inside(ranges: list[tuple[int, int]], start: int, end: int) -> bool:
    return any(lo <= start and end <= hi for lo, hi in ranges)


__all__ = ["HIGHLIGHT_RULES", "highlight", "render_entries"]
