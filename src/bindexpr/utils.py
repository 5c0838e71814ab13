from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from .types import is_primitive


def _kind(value: Any) -> Optional[str]:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def strict_equals(lhs: Any, rhs: Any) -> bool:
    """Same kind and value for primitives, identity for everything else.

    ``int`` and ``float`` share the numeric kind, ``bool`` does not, and NaN
    is never equal to itself.
    """
    if not (is_primitive(lhs) and is_primitive(rhs)):
        return lhs is rhs

    if _kind(lhs) != _kind(rhs):
        return False

    if isinstance(lhs, float) and math.isnan(lhs):
        return False

    return bool(lhs == rhs)


def get_member(parent: Any, key: Any) -> Any:
    """Read ``key`` off an already-resolved parent value."""
    if isinstance(parent, Mapping):
        return parent[key]

    if isinstance(parent, Sequence) and not isinstance(key, str):
        return parent[key]

    return getattr(parent, str(key))
