"""Top-level statements of a Mirror program."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from .literals import LiteralExpr
from .types import TypeExpr

__all__ = [
    "Parameter",
    "Signature",
    "Example",
    "Expression",
    "MixItem",
    "Statement",
]


@dataclass(frozen=True)
class Parameter:
    """Typed signature parameter: ``name: type``"""

    name: str
    type: TypeExpr

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "type": self.type.to_dict()}


@dataclass(frozen=True)
class Signature:
    """Function declaration: ``signature add(a: number, b: number) -> number``"""

    name: str
    parameters: Tuple[Parameter, ...]
    return_type: TypeExpr

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "signature",
            "name": self.name,
            "parameters": [param.to_dict() for param in self.parameters],
            "returnType": self.return_type.to_dict(),
        }


@dataclass(frozen=True)
class Example:
    """Input/output sample: ``example add(2, 3) = 5``"""

    name: str
    literals: Tuple[LiteralExpr, ...]
    result: LiteralExpr

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "example",
            "name": self.name,
            "literals": [literal.to_dict() for literal in self.literals],
            "result": self.result.to_dict(),
        }


@dataclass(frozen=True)
class Expression:
    """Bare call: ``foo(bar(1), 2)``"""

    name: str
    mix: Tuple["MixItem", ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "expression",
            "name": self.name,
            "mix": [item.to_dict() for item in self.mix],
        }


MixItem = Union[Expression, LiteralExpr]
Statement = Union[Signature, Example, Expression]
