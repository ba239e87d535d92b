"""Literal value grammar.

    literal := 'true' | 'false' | NUMBER | STRING
             | '[' literal ']'
             | '{' literal ':' literal '}'
"""

from __future__ import annotations

import re

from ..ast import (
    BoolLiteral,
    DictLiteral,
    ListLiteral,
    LiteralExpr,
    NumberLiteral,
    StringLiteral,
)

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def unquote(token: str) -> str:
    """Strip surrounding quotes and decode backslash escapes."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), token[1:-1])


def to_number(token: str):
    if "." in token:
        return float(token)
    return int(token)


class LiteralParserMixin:
    """Mixin for parsing example arguments, results and expression arguments."""

    def parse_literal(self) -> LiteralExpr:
        if self.match("true", "false"):
            return BoolLiteral(self.previous().value == "true")

        if self.match_number():
            return NumberLiteral(to_number(self.previous().value))

        if self.match_string():
            return StringLiteral(unquote(self.previous().value))

        if self.match("["):
            value = self.parse_literal()
            self.consume("]", "list literal")
            return ListLiteral(value)

        if self.match("{"):
            key = self.parse_literal()
            self.consume(":", "dict literal")
            value = self.parse_literal()
            self.consume("}", "dict literal")
            return DictLiteral(key, value)

        raise self.expected_error(
            ["literal"],
            hint='Literals are true, false, numbers, "strings", [literal] and {literal: literal}',
        )
