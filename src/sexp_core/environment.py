"""Symbol bindings and construction of the base environment."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field

from .errors import UnboundSymbolError
from .procedures import BUILTINS
from .values import Expression, List


@dataclass
class Environment:
    """Maps symbol names to bound values."""

    bindings: dict[str, Expression] = field(default_factory=dict)

    def define(self, name: str, value: Expression) -> None:
        self.bindings[name] = value

    def lookup(self, name: str) -> Expression:
        try:
            value = self.bindings[name]
        except KeyError:
            raise UnboundSymbolError(name) from None
        if isinstance(value, List):
            return copy.deepcopy(value)
        return value

    def copy(self) -> Environment:
        """Snapshot passed down to nested evaluation."""
        return Environment(dict(self.bindings))

    def __contains__(self, name: str) -> bool:
        return name in self.bindings


def new_context() -> Environment:
    """Base environment with ``+``, ``*`` and ``/`` bound."""
    return Environment(dict(BUILTINS))
