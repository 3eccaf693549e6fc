"""Evaluator: tree-walking evaluation of Expression trees."""

from __future__ import annotations

import logging

from .environment import Environment
from .errors import (
    ArgumentError,
    EmptyListError,
    NestingTooDeepError,
    NotCallableError,
)
from .values import Expression, List, Procedure, Symbol

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(expr: Expression, env: Environment) -> Expression:
    """Evaluate *expr* against *env* and return the resulting Expression.

    Raises an EvaluationError subclass for unbound symbols, non-callable
    heads, empty lists and bad procedure arguments.
    """
    try:
        return _eval(expr, env)
    except RecursionError as exc:
        raise NestingTooDeepError("expression nested too deeply to evaluate") from exc


def apply_procedure(proc: Procedure, args: list[Expression]) -> Expression:
    if len(args) != proc.arity:
        raise ArgumentError(
            f"{proc.name} expects {proc.arity} arguments, got {len(args)}"
        )
    logger.debug("apply %s to %s", proc.name, ", ".join(str(a) for a in args))
    return proc.func(args)


# ---------------------------------------------------------------------------
# Recursive cases
# ---------------------------------------------------------------------------

def _eval(expr: Expression, env: Environment) -> Expression:
    if isinstance(expr, Symbol):
        return env.lookup(expr.name)

    if isinstance(expr, List):
        return _eval_list(expr, env)

    # Numbers and procedures are self-evaluating
    return expr


def _eval_list(expr: List, env: Environment) -> Expression:
    if not expr.items:
        raise EmptyListError()

    head, *rest = expr.items
    callee = _eval(head, env.copy())
    args = [_eval(arg, env.copy()) for arg in rest]

    if not isinstance(callee, Procedure):
        raise NotCallableError(callee)
    return apply_procedure(callee, args)
