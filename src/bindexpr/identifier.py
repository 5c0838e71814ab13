"""Concrete identifier and expression objects for binding contexts."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from .evaluator import evaluate, get_leaf_value
from .reactive import unwrap
from .tree import Node, as_leaf, create_root
from .types import ExpressionLike, UnknownIdentifierError
from .utils import get_member


class Identifier(ExpressionLike):
    """A name looked up in a binding context, followed by member dereferences.

    ``Identifier("a", ctx, ["b", "c"])`` reads ``a.b.c``: ``a`` comes from
    ``ctx`` (or from ``member_of`` when the identifier is itself a member),
    and each dereference is resolved against the value before it.
    """

    def __init__(
        self,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
        dereferences: Sequence[Any] = (),
    ):
        self.name = name
        self.context = context if context is not None else {}
        self.dereferences = tuple(as_leaf(member) for member in dereferences)

    def lookup_value(self, member_of: Any = None) -> Any:
        if member_of is not None:
            return get_member(member_of, self.name)

        try:
            return self.context[self.name]
        except KeyError:
            raise UnknownIdentifierError(self.name) from None

    def get_value(self, member_of: Any = None) -> Any:
        value = unwrap(self.lookup_value(member_of))

        for member in self.dereferences:
            value = unwrap(get_leaf_value(member, value))

        return value

    def __repr__(self) -> str:
        path = "".join(f".{member!r}" for member in self.dereferences)
        return f"Identifier({self.name}{path})"


class Expression(ExpressionLike):
    """A token stream whose tree is built once and re-evaluated on demand."""

    def __init__(self, nodes: Sequence[Any]):
        self.nodes = tuple(nodes)
        self.root: Node = create_root(self.nodes)

    def get_value(self, member_of: Any = None) -> Any:
        del member_of
        return evaluate(self.root)

    def __repr__(self) -> str:
        return f"Expression{self.root!r}"
