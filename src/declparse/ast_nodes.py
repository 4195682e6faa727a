"""AST node definitions for the declaration syntax."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union

from declparse.tokens import Token

# ── Leaves ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class Invalid:
    """Stands in for a malformed subexpression; wraps the offending token."""

    token: Token


@dataclass(frozen=True)
class Identifier:
    token: Token

    @property
    def name(self) -> str:
        return self.token.value


# ── Composites ───────────────────────────────────────────────────


@dataclass(frozen=True)
class ExprList:
    items: list[Node] = field(default_factory=list)


@dataclass(frozen=True)
class ConstDecl:
    """Compile-time binding, ``names :: values``."""

    names: list[Node]
    type: Node | None = None
    values: list[Node] = field(default_factory=list)


@dataclass(frozen=True)
class RuntimeDecl:
    """Typed runtime binding, ``names : type``."""

    names: list[Node]
    type: Node | None = None
    values: list[Node] = field(default_factory=list)


Declaration = Union[ConstDecl, RuntimeDecl]
Node = Union[Invalid, Identifier, ExprList, ConstDecl, RuntimeDecl]


# ── Merging ──────────────────────────────────────────────────────


def append(left: Node, right: Node) -> ExprList:
    """Join two nodes into one list, splicing either side that is a list."""
    return ExprList(explode(left) + explode(right))


def explode(node: Node) -> list[Node]:
    """Return a list's items, or the node itself as a one-element list."""
    if isinstance(node, ExprList):
        return list(node.items)
    return [node]


def children(node: Node) -> list[Node]:
    """Direct child nodes in source order."""
    if isinstance(node, ExprList):
        return list(node.items)
    if isinstance(node, (ConstDecl, RuntimeDecl)):
        kids = list(node.names)
        if node.type is not None:
            kids.append(node.type)
        kids.extend(node.values)
        return kids
    return []


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and every descendant, depth-first."""
    yield node
    for child in children(node):
        yield from walk(child)
