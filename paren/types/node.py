"""Parsed syntax tree for Paren.

The tree is a closed set of node classes. Every node owns an ordered list of
children; the order is operand order and is never rearranged. The parser is the
only writer (via `add_child`), afterwards the tree is read through the
`children` tuple.
"""

from __future__ import annotations

from io import StringIO
from typing import Union

from paren.types.operator import Operator
from paren.types.value import Value


class Node:
    __slots__ = ("_children",)

    def __init__(self, children: list[AstNode] | None = None):
        self._children: list[AstNode] = list(children) if children else []

    def add_child(self, node: AstNode) -> None:
        self._children.append(node)

    @property
    def children(self) -> tuple[AstNode, ...]:
        return tuple(self._children)

    def label(self) -> str:
        return type(self).__name__.removesuffix("Node")

    def _payload(self) -> tuple:
        return ()

    def __eq__(self, other) -> bool:
        return (
            type(self) is type(other)
            and self._payload() == other._payload()
            and self._children == other._children
        )

    def __repr__(self) -> str:
        args = [repr(p) for p in self._payload()]
        if self._children:
            args.append(repr(self._children))
        return f"{type(self).__name__}({', '.join(args)})"

    def render(self, indent: int = 0) -> str:
        """Indented, one node per line rendering used for diagnostics."""
        with StringIO() as buffer:
            self._write(buffer, indent)
            return buffer.getvalue()

    def _write(self, buffer: StringIO, depth: int) -> None:
        buffer.write("  " * depth)
        buffer.write(self.label())
        buffer.write("\n")
        for child in self._children:
            child._write(buffer, depth + 1)

    def __str__(self) -> str:
        return self.render()


class RootNode(Node):
    __slots__ = ()


class QuoteNode(Node):
    __slots__ = ()


class OperatorNode(Node):
    __slots__ = ("op",)

    def __init__(self, op: Operator, children: list[AstNode] | None = None):
        super().__init__(children)
        self.op = op

    def label(self) -> str:
        return f"Operator({self.op})"

    def _payload(self) -> tuple:
        return (self.op,)


class LiteralNode(Node):
    __slots__ = ("value",)

    def __init__(self, value: Value, children: list[AstNode] | None = None):
        super().__init__(children)
        self.value = value

    def label(self) -> str:
        return f"Literal({self.value!r})"

    def _payload(self) -> tuple:
        return (self.value,)


class IdentifierNode(Node):
    __slots__ = ("name",)

    def __init__(self, name: str, children: list[AstNode] | None = None):
        super().__init__(children)
        self.name = name

    def label(self) -> str:
        return f"Identifier({self.name})"

    def _payload(self) -> tuple:
        return (self.name,)


AstNode = Union[RootNode, OperatorNode, LiteralNode, IdentifierNode, QuoteNode]
