"""Operator table for binding expressions.

Ranks follow the JavaScript precedence table, lowest number binding tightest.
``@`` is the unwrap/call operator; the prefix increment and decrement sit at
the loosest rank.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from .reactive import unwrap
from .types import UnknownOperatorError, ValueProvider
from .utils import strict_equals

BinaryFn = Callable[[Any, Any], Any]

@dataclass(frozen=True)
class Operator:
    symbol: str
    fn: BinaryFn
    precedence: int
    unary: bool = False

    def __call__(self, lhs: Any, rhs: Any) -> Any:
        return self.fn(lhs, rhs)

    def __repr__(self) -> str:
        return f"Operator({self.symbol!r}, {self.precedence})"

def unwrap_or_call(_a: Any, b: Any) -> Any:
    """Call ``b`` if it is a value provider, then unwrap the result."""
    return unwrap(b() if isinstance(b, ValueProvider) else b)

def _not(_a: Any, b: Any) -> bool:
    return not b

def _notnot(_a: Any, b: Any) -> bool:
    return bool(b)

def _preinc(_a: Any, b: Any) -> Any:
    return b + 1

def _predec(_a: Any, b: Any) -> Any:
    return b - 1

def _logic_and(a: Any, b: Any) -> Any:
    return a and b

def _logic_or(a: Any, b: Any) -> Any:
    return a or b

def _strict_ne(a: Any, b: Any) -> bool:
    return not strict_equals(a, b)

_SPECS: tuple[tuple[str, BinaryFn, int, bool], ...] = (
    ('@', unwrap_or_call, 1, True),
    ('!', _not, 4, True),
    ('!!', _notnot, 4, True),
    ('*', lambda a, b: a * b, 5, False),
    ('/', lambda a, b: a / b, 5, False),
    ('%', lambda a, b: a % b, 5, False),
    ('+', lambda a, b: a + b, 6, False),
    ('-', lambda a, b: a - b, 6, False),
    ('<', lambda a, b: a < b, 8, False),
    ('<=', lambda a, b: a <= b, 8, False),
    ('>', lambda a, b: a > b, 8, False),
    ('>=', lambda a, b: a >= b, 8, False),
    # '==' and '!=' are strict on purpose.
    ('==', strict_equals, 9, False),
    ('!=', _strict_ne, 9, False),
    ('===', strict_equals, 9, False),
    ('!==', _strict_ne, 9, False),
    ('&', lambda a, b: a & b, 10, False),
    ('^', lambda a, b: a ^ b, 11, False),
    ('|', lambda a, b: a | b, 12, False),
    ('&&', _logic_and, 13, False),
    ('||', _logic_or, 14, False),
    ('++', _preinc, 15, True),
    ('--', _predec, 15, True),
)

def _build_table() -> Mapping[str, Operator]:
    table: Dict[str, Operator] = {}

    for symbol, fn, precedence, unary in _SPECS:
        table[symbol] = Operator(symbol, fn, precedence, unary)

    return MappingProxyType(table)

OPERATORS: Mapping[str, Operator] = _build_table()

def resolve_operator(op: Any, operators: Mapping[str, Operator] = OPERATORS) -> Operator:
    if isinstance(op, Operator):
        return op

    if isinstance(op, str):
        try:
            return operators[op]
        except KeyError:
            raise UnknownOperatorError(op) from None

    raise UnknownOperatorError(op)

def precedence_of(symbol: str, operators: Mapping[str, Operator] = OPERATORS) -> int:
    return resolve_operator(symbol, operators).precedence
