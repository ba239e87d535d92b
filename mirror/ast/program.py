"""Program containers: the parser output and the grouped compiler input."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Tuple

from .statements import Example, Expression, Signature, Statement

__all__ = ["Program", "GroupedSignature", "GroupedProgram"]


@dataclass(frozen=True)
class Program:
    """Statements in source order."""

    statements: Tuple[Statement, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index: int) -> Statement:
        return self.statements[index]

    @property
    def signatures(self) -> List[Signature]:
        return [stmt for stmt in self.statements if isinstance(stmt, Signature)]

    @property
    def examples(self) -> List[Example]:
        return [stmt for stmt in self.statements if isinstance(stmt, Example)]

    @property
    def expressions(self) -> List[Expression]:
        return [stmt for stmt in self.statements if isinstance(stmt, Expression)]

    def to_dict(self) -> Dict[str, Any]:
        return {"statements": [stmt.to_dict() for stmt in self.statements]}


@dataclass(frozen=True)
class GroupedSignature(Signature):
    """A signature together with every example that shares its name."""

    examples: Tuple[Example, ...] = field(default_factory=tuple)

    @classmethod
    def from_signature(cls, signature: Signature, examples: Tuple[Example, ...]) -> "GroupedSignature":
        return cls(
            name=signature.name,
            parameters=signature.parameters,
            return_type=signature.return_type,
            examples=examples,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["examples"] = [example.to_dict() for example in self.examples]
        return data


@dataclass(frozen=True)
class GroupedProgram:
    """Grouped signatures plus the bare expressions, in source order."""

    signatures: Tuple[GroupedSignature, ...] = field(default_factory=tuple)
    expressions: Tuple[Expression, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "signatures": [sig.to_dict() for sig in self.signatures],
            "expressions": [expr.to_dict() for expr in self.expressions],
        }
