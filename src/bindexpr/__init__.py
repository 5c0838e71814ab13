"""Binding-expression trees: build from tokens, evaluate against live values."""

from .evaluator import evaluate, get_leaf_value, get_node_value, value_of
from .identifier import Expression, Identifier
from .operators import OPERATORS, Operator, precedence_of, resolve_operator
from .reactive import Observable, is_observable, unwrap
from .tree import Node, as_leaf, create_root, render_node
from .types import (
    ExpressionError,
    ExpressionLike,
    InvalidLeafError,
    Literal,
    MalformedTokensError,
    UnknownIdentifierError,
    UnknownOperatorError,
    ValueProvider,
)

__all__ = [
    "OPERATORS",
    "Expression",
    "ExpressionError",
    "ExpressionLike",
    "Identifier",
    "InvalidLeafError",
    "Literal",
    "MalformedTokensError",
    "Node",
    "Observable",
    "Operator",
    "UnknownIdentifierError",
    "UnknownOperatorError",
    "ValueProvider",
    "as_leaf",
    "create_root",
    "evaluate",
    "get_leaf_value",
    "get_node_value",
    "is_observable",
    "precedence_of",
    "render_node",
    "resolve_operator",
    "unwrap",
    "value_of",
]
