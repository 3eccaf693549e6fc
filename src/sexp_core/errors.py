"""Error taxonomy for the S-expression core."""

from __future__ import annotations


class SexpCoreError(Exception):
    """Base class for every error raised by sexp_core."""


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

class ParsingError(SexpCoreError):
    pass


class UnexpectedEOF(ParsingError):
    """Token queue ran out before an expression was complete."""

    def __init__(self, message: str = "unexpected end of input") -> None:
        super().__init__(message)


class SexpSyntaxError(ParsingError):
    """Stray ``)`` or trailing tokens after a complete expression."""


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

class EvaluationError(SexpCoreError):
    pass


class UnboundSymbolError(EvaluationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unbound symbol: {name}")
        self.name = name


class NotCallableError(EvaluationError):
    def __init__(self, value: object) -> None:
        super().__init__(f"not a procedure: {value}")
        self.value = value


class EmptyListError(EvaluationError):
    def __init__(self) -> None:
        super().__init__("cannot evaluate an empty list")


class ArgumentError(EvaluationError):
    """Wrong number or wrong type of arguments to a procedure."""


# ---------------------------------------------------------------------------
# Resource exhaustion
# ---------------------------------------------------------------------------

class NestingTooDeepError(SexpCoreError):
    """Input nested deeper than the interpreter's call stack allows."""
