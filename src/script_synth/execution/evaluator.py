"""The single entry point through which script text is executed."""

from __future__ import annotations

import ast
import builtins
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

SCRIPT_FILENAME = "<script>"


@dataclass(slots=True)
class EvaluationResult:
    """Outcome of ``evaluate``: either a value or a failure message."""

    value: Any = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def fresh_namespace(extras: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Module-like globals holding only the builtins plus ``extras``."""

    namespace: Dict[str, Any] = {
        "__name__": "__script__",
        "__builtins__": builtins,
    }
    namespace.update(extras or {})
    return namespace


def evaluate(source: str, namespace: Dict[str, Any]) -> EvaluationResult:
    """Compile and run ``source`` inside ``namespace``.

    A trailing expression statement is evaluated separately so its value
    can be reported. Anything the script raises while parsing or running,
    ``BaseException`` subclasses included, is returned as a failure.
    ``KeyboardInterrupt`` is the host aborting the run and still propagates.
    """

    try:
        tree = ast.parse(source, filename=SCRIPT_FILENAME, mode="exec")
        trailing: Optional[ast.Expression] = None
        if tree.body and isinstance(tree.body[-1], ast.Expr):
            last = tree.body.pop()
            trailing = ast.Expression(body=last.value)  # type: ignore[attr-defined]
        body = compile(tree, SCRIPT_FILENAME, "exec")
        tail = compile(trailing, SCRIPT_FILENAME, "eval") if trailing else None

        exec(body, namespace)
        value = eval(tail, namespace) if tail is not None else None
    except KeyboardInterrupt:
        raise
    except SystemExit as exc:
        return _failure(exc, f"SystemExit: {exc.code}")
    except BaseException as exc:
        return _failure(exc)
    return EvaluationResult(value=value)


def _failure(exc: BaseException, fallback: Optional[str] = None) -> EvaluationResult:
    message = str(exc) or fallback or type(exc).__name__
    if isinstance(exc, SyntaxError) and exc.msg:
        message = f"{exc.msg} (line {exc.lineno})" if exc.lineno else exc.msg
    return EvaluationResult(error=message, error_type=type(exc).__name__)


__all__ = ["EvaluationResult", "SCRIPT_FILENAME", "evaluate", "fresh_namespace"]
