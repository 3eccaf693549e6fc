"""sexp_core — tokenizer, parser and evaluator for arithmetic S-expressions."""

from .environment import Environment, new_context
from .errors import (
    ArgumentError,
    EmptyListError,
    EvaluationError,
    NestingTooDeepError,
    NotCallableError,
    ParsingError,
    SexpCoreError,
    SexpSyntaxError,
    UnboundSymbolError,
    UnexpectedEOF,
)
from .evaluator import apply_procedure, evaluate
from .reader import parse, parse_many, read_from_tokens
from .repl import SexpRepl
from .tokenizer import tokenize
from .values import Atom, Expression, List, Number, Procedure, Symbol, render

__all__ = [
    "tokenize",
    "parse",
    "parse_many",
    "read_from_tokens",
    "evaluate",
    "apply_procedure",
    "Environment",
    "new_context",
    "Atom",
    "Expression",
    "List",
    "Number",
    "Procedure",
    "Symbol",
    "render",
    "SexpCoreError",
    "ParsingError",
    "UnexpectedEOF",
    "SexpSyntaxError",
    "EvaluationError",
    "UnboundSymbolError",
    "NotCallableError",
    "EmptyListError",
    "ArgumentError",
    "NestingTooDeepError",
    "SexpRepl",
]
