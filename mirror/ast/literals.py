"""Literal values appearing in examples and expression arguments.

Container literals hold exactly one inner literal: ``[1]`` and ``{"a": 1}``
are valid, ``[1, 2]`` is not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

__all__ = [
    "BoolLiteral",
    "NumberLiteral",
    "StringLiteral",
    "ListLiteral",
    "DictLiteral",
    "LiteralExpr",
]


@dataclass(frozen=True)
class BoolLiteral:
    value: bool

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "bool", "value": self.value}


@dataclass(frozen=True)
class NumberLiteral:
    """Decimal number; ``int`` unless written with a fractional part."""

    value: Union[int, float]

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "number", "value": self.value}


@dataclass(frozen=True)
class StringLiteral:
    """String value with quotes removed and escapes decoded."""

    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "string", "value": self.value}


@dataclass(frozen=True)
class ListLiteral:
    value: "LiteralExpr"

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": "list", "value": self.value.to_dict()}


@dataclass(frozen=True)
class DictLiteral:
    key: "LiteralExpr"
    value: "LiteralExpr"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "dict",
            "key": self.key.to_dict(),
            "value": self.value.to_dict(),
        }


LiteralExpr = Union[BoolLiteral, NumberLiteral, StringLiteral, ListLiteral, DictLiteral]
