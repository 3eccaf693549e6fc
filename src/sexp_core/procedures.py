"""Built-in arithmetic procedures."""

from __future__ import annotations

import math

from .errors import ArgumentError
from .values import Expression, Number, Procedure


def _operands(name: str, args: list[Expression]) -> tuple[float, float]:
    if len(args) != 2:
        raise ArgumentError(f"{name} expects 2 arguments, got {len(args)}")
    for arg in args:
        if not isinstance(arg, Number):
            raise ArgumentError(f"{name} expects numbers, got {arg}")
    return args[0].value, args[1].value


def add(args: list[Expression]) -> Number:
    a, b = _operands("+", args)
    return Number(a + b)


def multiply(args: list[Expression]) -> Number:
    a, b = _operands("*", args)
    return Number(a * b)


def divide(args: list[Expression]) -> Number:
    """IEEE-754 division: x/0 is ±inf and 0/0 is nan, never an error."""
    a, b = _operands("/", args)
    if b == 0:
        if a == 0 or math.isnan(a):
            return Number(math.nan)
        return Number(math.copysign(math.inf, a) * math.copysign(1.0, b))
    return Number(a / b)


BUILTINS: dict[str, Procedure] = {
    "+": Procedure("+", add),
    "*": Procedure("*", multiply),
    "/": Procedure("/", divide),
}
