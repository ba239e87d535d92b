"""AST node definitions for the Mirror specification language.

All nodes are frozen dataclasses.  Each closed family is exposed as a
``Union`` alias (``TypeExpr``, ``LiteralExpr``, ``Statement``) and consumers
dispatch with ``isinstance``.
"""

from .literals import (
    BoolLiteral,
    DictLiteral,
    ListLiteral,
    LiteralExpr,
    NumberLiteral,
    StringLiteral,
)
from .program import GroupedProgram, GroupedSignature, Program
from .statements import Example, Expression, MixItem, Parameter, Signature, Statement
from .types import PRIMITIVE_TYPE_NAMES, DictType, ListType, PrimitiveType, TypeExpr

__all__ = [
    "PRIMITIVE_TYPE_NAMES",
    "PrimitiveType",
    "ListType",
    "DictType",
    "TypeExpr",
    "BoolLiteral",
    "NumberLiteral",
    "StringLiteral",
    "ListLiteral",
    "DictLiteral",
    "LiteralExpr",
    "Parameter",
    "Signature",
    "Example",
    "Expression",
    "MixItem",
    "Statement",
    "Program",
    "GroupedSignature",
    "GroupedProgram",
]
