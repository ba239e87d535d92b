"""JSON encoding and decoding of Mirror AST nodes.

Every node serializes through its ``to_dict()``; tagged variants carry a
``kind`` discriminator so :func:`node_from_dict` can rebuild them exactly.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from .ast import (
    BoolLiteral,
    DictLiteral,
    DictType,
    Example,
    Expression,
    GroupedProgram,
    GroupedSignature,
    ListLiteral,
    ListType,
    LiteralExpr,
    MixItem,
    NumberLiteral,
    Parameter,
    PrimitiveType,
    Program,
    Signature,
    StringLiteral,
    TypeExpr,
)

__all__ = [
    "type_from_dict",
    "literal_from_dict",
    "node_from_dict",
    "program_from_dict",
    "grouped_program_from_dict",
    "dumps",
    "loads",
]


def type_from_dict(data: Dict[str, Any]) -> TypeExpr:
    kind = data.get("kind")
    if kind == "primitive":
        return PrimitiveType(data["name"])
    if kind == "list":
        return ListType(type_from_dict(data["inner"]))
    if kind == "dict":
        return DictType(type_from_dict(data["inner"]))
    raise ValueError(f"Unknown type kind: {kind!r}")


def literal_from_dict(data: Dict[str, Any]) -> LiteralExpr:
    kind = data.get("kind")
    if kind == "bool":
        return BoolLiteral(data["value"])
    if kind == "number":
        return NumberLiteral(data["value"])
    if kind == "string":
        return StringLiteral(data["value"])
    if kind == "list":
        return ListLiteral(literal_from_dict(data["value"]))
    if kind == "dict":
        return DictLiteral(literal_from_dict(data["key"]), literal_from_dict(data["value"]))
    raise ValueError(f"Unknown literal kind: {kind!r}")


def _mix_item_from_dict(data: Dict[str, Any]) -> MixItem:
    if data.get("kind") == "expression":
        return node_from_dict(data)
    return literal_from_dict(data)


def node_from_dict(data: Dict[str, Any]):
    """Rebuild a statement node from its ``to_dict()`` form."""
    kind = data.get("kind")
    if kind == "signature":
        parameters = tuple(
            Parameter(param["name"], type_from_dict(param["type"])) for param in data["parameters"]
        )
        return_type = type_from_dict(data["returnType"])
        if "examples" in data:
            return GroupedSignature(
                data["name"],
                parameters,
                return_type,
                tuple(node_from_dict(example) for example in data["examples"]),
            )
        return Signature(data["name"], parameters, return_type)
    if kind == "example":
        return Example(
            data["name"],
            tuple(literal_from_dict(item) for item in data["literals"]),
            literal_from_dict(data["result"]),
        )
    if kind == "expression":
        return Expression(data["name"], tuple(_mix_item_from_dict(item) for item in data["mix"]))
    raise ValueError(f"Unknown statement kind: {kind!r}")


def program_from_dict(data: Dict[str, Any]) -> Program:
    return Program(tuple(node_from_dict(stmt) for stmt in data.get("statements", [])))


def grouped_program_from_dict(data: Dict[str, Any]) -> GroupedProgram:
    return GroupedProgram(
        signatures=tuple(node_from_dict(sig) for sig in data.get("signatures", [])),
        expressions=tuple(node_from_dict(expr) for expr in data.get("expressions", [])),
    )


def dumps(node: Any, indent: Optional[int] = 2) -> str:
    """Serialize a node, a program, or a list of nodes to JSON text."""
    if isinstance(node, (list, tuple)):
        payload = [item.to_dict() for item in node]
    else:
        payload = node.to_dict()
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def loads(text: str):
    """Inverse of :func:`dumps` for programs, grouped programs and statements."""
    data = json.loads(text)
    if isinstance(data, list):
        return [node_from_dict(item) for item in data]
    if "statements" in data:
        return program_from_dict(data)
    if "signatures" in data:
        return grouped_program_from_dict(data)
    return node_from_dict(data)
