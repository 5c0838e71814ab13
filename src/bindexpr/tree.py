"""Expression tree nodes and the token-stream tree builder."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .operators import OPERATORS, Operator, resolve_operator
from .reactive import is_observable
from .types import ExpressionLike, Leaf, Literal, MalformedTokensError, ValueProvider, is_primitive

logger = logging.getLogger(__name__)


@dataclass
class Node:
    lhs: Leaf
    op: Operator
    rhs: Leaf

    def __repr__(self) -> str:
        return f"Node({render_node(self)})"


def as_leaf(token: Any) -> Leaf:
    """Wrap primitives and observables as literals; other tokens pass through.

    Unrecognised tokens are kept as given and rejected when evaluated.
    """
    if isinstance(token, (Node, Literal, ValueProvider, ExpressionLike)):
        return token

    if is_primitive(token) or is_observable(token):
        return Literal(token)

    return token


def create_root(
    tokens: Sequence[Any],
    operators: Mapping[str, Operator] = OPERATORS,
) -> Node:
    """Convert ``[lhs, op, rhs, (op, value)*]`` into an executable tree.

    An operator ranked looser than the current root rebases the whole tree
    under a new root; anything else extends the right-hand chain at ``leaf``.
    The caller's sequence is read through a cursor and never mutated.
    """
    if len(tokens) < 3:
        raise MalformedTokensError(f"Expected at least 3 tokens, got {len(tokens)}")

    root = leaf = Node(as_leaf(tokens[0]), resolve_operator(tokens[1], operators), as_leaf(tokens[2]))
    pos = 3

    while pos < len(tokens):
        raw_op = tokens[pos]

        if raw_op is None:
            break

        if pos + 1 >= len(tokens):
            raise MalformedTokensError("Operator without a right-hand operand", pos)

        op = resolve_operator(raw_op, operators)
        value = as_leaf(tokens[pos + 1])
        pos += 2

        if op.precedence > root.op.precedence:
            logger.debug("rebase on %r (root %r)", op.symbol, root.op.symbol)
            root = Node(root, op, value)
            leaf = root
        else:
            logger.debug("extend %r under %r", op.symbol, leaf.op.symbol)
            leaf.rhs = Node(leaf.rhs, op, value)
            leaf = leaf.rhs

    return root


def render_node(node: Any) -> str:
    """Parenthesised infix rendering; unary placeholders are omitted."""
    if isinstance(node, Node):
        rhs = render_node(node.rhs)

        if node.op.unary:
            return f"({node.op.symbol}{rhs})"

        return f"({render_node(node.lhs)} {node.op.symbol} {rhs})"

    return repr(node)
