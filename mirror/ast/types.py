"""Type expressions used in signature parameters and return types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

__all__ = [
    "PRIMITIVE_TYPE_NAMES",
    "PrimitiveType",
    "ListType",
    "DictType",
    "TypeExpr",
]


PRIMITIVE_TYPE_NAMES = ("string", "number", "bool")


@dataclass(frozen=True)
class PrimitiveType:
    """One of ``string``, ``number`` or ``bool``."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "primitive", "name": self.name}

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class ListType:
    """``list[inner]``"""

    inner: "TypeExpr"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "list", "inner": self.inner.to_dict()}

    def __str__(self) -> str:
        return f"list[{self.inner}]"


@dataclass(frozen=True)
class DictType:
    """``dict{inner}``"""

    inner: "TypeExpr"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "dict", "inner": self.inner.to_dict()}

    def __str__(self) -> str:
        return f"dict{{{self.inner}}}"


TypeExpr = Union[PrimitiveType, ListType, DictType]
