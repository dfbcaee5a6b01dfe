"""Argument stringification for captured console calls."""

from __future__ import annotations

import json
from pprint import pformat
from typing import Any, Iterable

_STRUCTURED = (dict, list, tuple, set, frozenset)


def stringify(value: Any) -> str:
    """Render one console argument.

    Containers become indented JSON (``pprint`` when they hold values JSON
    cannot encode); everything else uses its natural ``str`` form.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, _STRUCTURED):
        payload = sorted(value, key=repr) if isinstance(value, (set, frozenset)) else value
        try:
            return json.dumps(payload, indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            return pformat(value, indent=2)
    return str(value)


def format_call(channel: str, args: Iterable[Any]) -> str:
    """``[channel] arg1 arg2 ...``"""

    return " ".join([f"[{channel}]", *(stringify(arg) for arg in args)])


__all__ = ["format_call", "stringify"]
