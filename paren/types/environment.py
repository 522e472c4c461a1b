"""Runtime environment for Paren.

The Environment is a single flat mapping of identifier names to evaluated
values. There are no nested scopes: one instance lives for a whole session and
is passed explicitly to every evaluation call.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from paren.types.value import Value


class Environment:
    """Flat mapping from identifier names to Values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[dict[str, Value]] = None):
        self.vars: dict[str, Value] = dict(bindings) if bindings else {}

    def set(self, name: str, value: Value) -> None:
        """Bind `name` to `value`, overwriting any existing binding."""
        self.vars[name] = value

    def get(self, name: str) -> Optional[Value]:
        """Return the value bound to `name`, or None if it is unbound."""
        return self.vars.get(name)

    def update(self, mapping: dict[str, Value]) -> None:
        for k, v in mapping.items():
            self.set(k, v)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
