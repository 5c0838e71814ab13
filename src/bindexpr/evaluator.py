from __future__ import annotations

import logging
from typing import Any

from .reactive import unwrap
from .tree import Node
from .types import ExpressionLike, InvalidLeafError, Leaf, Literal, ValueProvider
from .utils import get_member

logger = logging.getLogger(__name__)

def get_leaf_value(leaf: Leaf, member_of: Any = None) -> Any:
    """Resolve one operand to a concrete value.

    ``member_of`` is the already-resolved parent when ``leaf`` names a member,
    e.g. ``a`` for ``b`` and then ``a.b`` for ``c`` in ``a.b.c``.
    """
    match leaf:
        case ValueProvider():
            # Expressions on observables are nonsensical; read through them.
            return unwrap(leaf())
        case Literal(value=value):
            if member_of is not None:
                return get_member(member_of, value)
            return unwrap(value)
        case ExpressionLike():
            return unwrap(leaf.get_value(member_of))
        case Node():
            return get_node_value(leaf)
        case _:
            logger.debug("rejecting leaf of type %s", type(leaf).__name__)
            raise InvalidLeafError(leaf)

def get_node_value(node: Node) -> Any:
    # The lhs of a unary operator is a placeholder and is never read.
    lhs_value = None if node.op.unary else get_leaf_value(node.lhs)

    return node.op.fn(lhs_value, get_leaf_value(node.rhs))

def evaluate(root: Node) -> Any:
    """Evaluate a tree built by ``create_root``; nothing is cached."""
    return get_node_value(root)

def value_of(item: Any) -> Any:
    if isinstance(item, ExpressionLike):
        return item.get_value()

    return item
