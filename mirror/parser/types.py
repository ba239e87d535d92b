"""Type expression grammar.

    type := 'string' | 'number' | 'bool'
          | 'list' '[' type ']'
          | 'dict' '{' type '}'
"""

from __future__ import annotations

from ..ast import PRIMITIVE_TYPE_NAMES, DictType, ListType, PrimitiveType, TypeExpr


class TypeParserMixin:
    """Mixin for parsing parameter and return types."""

    def parse_type(self) -> TypeExpr:
        if self.match(*PRIMITIVE_TYPE_NAMES):
            return PrimitiveType(self.previous().value)

        # "list[" and "dict{" arrive as two tokens each
        if self.check("list") and self._peek_next() == "[":
            self.advance()
            self.advance()
            inner = self.parse_type()
            self.consume("]", "list type")
            return ListType(inner)

        if self.check("dict") and self._peek_next() == "{":
            self.advance()
            self.advance()
            inner = self.parse_type()
            self.consume("}", "dict type")
            return DictType(inner)

        raise self.expected_error(
            ["type"],
            hint="Valid types are string, number, bool, list[<type>] and dict{<type>}",
        )

    def _peek_next(self):
        index = self.token_pos + 1
        if index < len(self.tokens):
            return self.tokens[index].value
        return None
