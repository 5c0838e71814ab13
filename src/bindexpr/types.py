from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union
from typing_extensions import TypeAlias

# ---------- Leaf variants ----------

@dataclass(frozen=True)
class Literal:
    value: Any
    def __repr__(self) -> str:
        return repr(self.value)

@dataclass(frozen=True)
class ValueProvider:
    """Zero-argument accessor standing in for an identifier's current value."""

    accessor: Callable[[], Any]

    def __call__(self) -> Any:
        return self.accessor()

    def __repr__(self) -> str:
        name = getattr(self.accessor, '__name__', type(self.accessor).__name__)
        return f"provider<{name}>"

class ExpressionLike(ABC):
    """Identifier/expression capability.

    Subclasses resolve themselves to a value, optionally as a member of an
    already-resolved parent value (``member_of``).
    """

    @abstractmethod
    def get_value(self, member_of: Any = None) -> Any:
        ...

# Node lives in tree.py.
Leaf: TypeAlias = Union[Literal, ValueProvider, ExpressionLike, "Node"]

PRIMITIVE_TYPES = (type(None), bool, int, float, str)

def is_primitive(value: Any) -> bool:
    return isinstance(value, PRIMITIVE_TYPES)

# ---------- Errors ----------

class ExpressionError(Exception):
    pass

class InvalidLeafError(ExpressionError, TypeError):
    def __init__(self, leaf: Any):
        super().__init__(f"Invalid type of leaf node: {leaf!r}")
        self.leaf = leaf

class UnknownOperatorError(ExpressionError, KeyError):
    def __init__(self, symbol: Any):
        super().__init__(f"Unknown operator {symbol!r}")
        self.symbol = symbol

    def __str__(self) -> str:
        return str(self.args[0])

class MalformedTokensError(ExpressionError, ValueError):
    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position

    def __str__(self) -> str:
        msg = super().__str__()

        if self.position is None:
            return msg

        return f"{msg} (token {self.position})"

class UnknownIdentifierError(ExpressionError, NameError):
    def __init__(self, name: str):
        super().__init__(f"Name '{name}' not found")
        self.name = name
