"""SexpRepl — incremental evaluation session.

Also provides the ``sexp-eval`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Sequence

from .environment import Environment, new_context
from .errors import EvaluationError, NestingTooDeepError, ParsingError
from .evaluator import evaluate
from .reader import parse, parse_many
from .values import Expression, render

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# SexpRepl class (programmatic use)
# ---------------------------------------------------------------------------

class SexpRepl:
    """Session that evaluates every input against one shared Environment.

    Usage::

        repl = SexpRepl()
        repl.eval("(+ 1 2)")          # → Number(3.0)
        repl.eval("(* 2 3) (/ 1 4)")  # → Number(0.25)
        repl.results                  # all values produced so far
        repl.reset()                  # fresh environment, no results
    """

    def __init__(self) -> None:
        self.environment: Environment = new_context()
        self.results: list[Expression] = []

    def eval(self, text: str) -> Expression | None:
        """Evaluate each top-level expression in *text*.

        Returns the last value, or ``None`` if *text* held no expression.
        Errors propagate; values produced before the failing expression
        stay in ``results``.
        """
        last: Expression | None = None
        for expr in parse_many(text):
            last = evaluate(expr, self.environment)
            self.results.append(last)
        return last

    def reset(self) -> None:
        self.environment = new_context()
        self.results = []


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def run(source: str, out: IO[str], err: IO[str]) -> int:
    """Parse and evaluate *source*, writing ``AST:`` and ``EVAL:`` lines."""
    try:
        tree = parse(source)
    except (ParsingError, NestingTooDeepError) as exc:
        logger.debug("parse failed for %r", source, exc_info=True)
        print(f"parse error: {exc}", file=err)
        return 1
    print(f"AST: {render(tree)}", file=out)

    try:
        result = evaluate(tree, new_context())
    except (EvaluationError, NestingTooDeepError) as exc:
        logger.debug("evaluation failed for %r", source, exc_info=True)
        print(f"eval error: {exc}", file=err)
        return 1
    print(f"EVAL: {render(result)}", file=out)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """``sexp-eval "(+ 1 2)"``; exits silently when no argument is given."""
    logging.basicConfig(level=logging.WARNING)
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    return run(args[0], sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
