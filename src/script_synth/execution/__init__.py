"""Script evaluation and the run lifecycle around it."""

from .evaluator import EvaluationResult, evaluate, fresh_namespace
from .sandbox import ExecutionSandbox

__all__ = ["EvaluationResult", "ExecutionSandbox", "evaluate", "fresh_namespace"]
