"""Expression types for the S-expression core."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Callable, Union


# ---------------------------------------------------------------------------
# Atoms
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return repr(float(self.value))


@dataclass(frozen=True)
class Symbol:
    name: str

    def __str__(self) -> str:
        return json.dumps(self.name, ensure_ascii=False)


Atom = Union[Number, Symbol]


# ---------------------------------------------------------------------------
# Compound values
# ---------------------------------------------------------------------------

@dataclass
class List:
    """Ordered sequence of child expressions, built bottom-up by the reader."""

    items: list["Expression"] = field(default_factory=list)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class Procedure:
    """Native callable bound in an Environment.

    ``func`` receives the already-evaluated arguments in order and
    returns a single Expression.  Displayed as ``proc``.
    """

    name: str
    func: Callable[[list["Expression"]], "Expression"] = field(compare=False)
    arity: int = 2

    def __str__(self) -> str:
        return "proc"


Expression = Union[Number, Symbol, List, Procedure]


def render(expr: Expression) -> str:
    """Structural rendering used for ``AST:`` / ``EVAL:`` output."""
    parts: list[str] = []
    # str entries are literal punctuation
    stack: list[Expression | str] = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, str):
            parts.append(node)
        elif isinstance(node, List):
            stack.append(")")
            for i, child in enumerate(reversed(node.items)):
                if i:
                    stack.append(", ")
                stack.append(child)
            stack.append("(")
        else:
            parts.append(str(node))
    return "".join(parts)
