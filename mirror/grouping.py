"""Associate signatures with their examples.

The grouper is a pure function over a parsed program: it never fails and
never mutates its input.
"""

from __future__ import annotations

from typing import Iterable, List

from .ast import Example, Expression, GroupedProgram, GroupedSignature, Signature, Statement

__all__ = ["group_signatures_with_examples", "extract_expressions", "group_program"]


def group_signatures_with_examples(statements: Iterable[Statement]) -> List[GroupedSignature]:
    """Attach to each signature every example with the same name.

    Examples keep their source order and duplicates are kept. An example whose
    name matches no signature is dropped from the result; a signature without
    examples gets an empty tuple. Runs in O(signatures * examples).
    """
    statements = list(statements)
    signatures = [stmt for stmt in statements if isinstance(stmt, Signature)]
    examples = [stmt for stmt in statements if isinstance(stmt, Example)]
    return [
        GroupedSignature.from_signature(
            signature,
            tuple(example for example in examples if example.name == signature.name),
        )
        for signature in signatures
    ]


def extract_expressions(statements: Iterable[Statement]) -> List[Expression]:
    """Bare expression statements, untouched and in source order."""
    return [stmt for stmt in statements if isinstance(stmt, Expression)]


def group_program(statements: Iterable[Statement]) -> GroupedProgram:
    statements = list(statements)
    return GroupedProgram(
        signatures=tuple(group_signatures_with_examples(statements)),
        expressions=tuple(extract_expressions(statements)),
    )
