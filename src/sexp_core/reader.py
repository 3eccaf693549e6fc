"""Reader layer: recursive-descent parser from tokens to Expression trees."""

from __future__ import annotations

import logging
import re
from collections import deque

from .errors import NestingTooDeepError, SexpSyntaxError, UnexpectedEOF
from .tokenizer import tokenize
from .values import Atom, Expression, List, Number, Symbol

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


# ---------------------------------------------------------------------------
# Atoms
# ---------------------------------------------------------------------------

def atom(token: str) -> Atom:
    """Numeric literal → Number, anything else → Symbol."""
    if _NUMBER_RE.match(token):
        return Number(float(token))
    return Symbol(token)


# ---------------------------------------------------------------------------
# Recursive descent
# ---------------------------------------------------------------------------

def read_from_tokens(tokens: deque[str]) -> Expression:
    """Pop exactly one expression off the front of *tokens*.

    Tokens after the expression are left in the queue.
    """
    if not tokens:
        raise UnexpectedEOF()
    token = tokens.popleft()

    if token == "(":
        lst = List()
        while True:
            if not tokens:
                raise UnexpectedEOF("unexpected end of input: missing ')'")
            if tokens[0] == ")":
                tokens.popleft()
                return lst
            lst.items.append(read_from_tokens(tokens))

    if token == ")":
        raise SexpSyntaxError("unexpected ')'")

    return atom(token)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse(text: str) -> Expression:
    """Parse *text* as exactly one expression."""
    tokens = tokenize(text)
    try:
        expr = read_from_tokens(tokens)
    except RecursionError as exc:
        raise NestingTooDeepError("input nested too deeply to parse") from exc
    if tokens:
        raise SexpSyntaxError(f"unexpected token after expression: {tokens[0]}")
    logger.debug("parsed %r -> %s", text, expr)
    return expr


def parse_many(text: str) -> list[Expression]:
    """Parse every top-level expression in *text*, in order."""
    tokens = tokenize(text)
    exprs: list[Expression] = []
    try:
        while tokens:
            exprs.append(read_from_tokens(tokens))
    except RecursionError as exc:
        raise NestingTooDeepError("input nested too deeply to parse") from exc
    return exprs
