"""Statement grammar.

    signature-stmt  := 'signature' IDENT '(' parameter (',' parameter)* ')' '->' type
    parameter       := IDENT ':' type
    example-stmt    := 'example' IDENT '(' literal (',' literal)* ')' '=' literal
    expression-stmt := IDENT '(' mix-item (',' mix-item)* ')'
    mix-item        := expression-stmt | literal
"""

from __future__ import annotations

from typing import Callable, List, Tuple, TypeVar

from ..ast import Example, Expression, MixItem, Parameter, Signature, Statement
from ..errors import UnexpectedTokenError

T = TypeVar("T")


class StatementParserMixin:
    """Mixin for parsing top-level statements."""

    def parse_statement(self) -> Statement:
        if self.match("signature"):
            return self.parse_signature()
        if self.match("example"):
            return self.parse_example()
        if self.peek_identifier():
            return self.parse_expression()

        found = self.describe_current()
        line, column = self._error_position()
        raise UnexpectedTokenError(
            f"Unexpected token: {found}",
            expected=["'signature'", "'example'", "identifier"],
            found=found,
            path=self.path,
            line=line,
            column=column,
            hint="Statements start with 'signature', 'example' or a call such as name(...)",
        )

    def parse_signature(self) -> Signature:
        name = self.consume_identifier("signature name")
        self.consume("(", "signature")
        parameters = self._parse_delimited(self.parse_parameter, "parameter list")
        self.consume("->", "signature")
        return_type = self.parse_type()
        return Signature(name, parameters, return_type)

    def parse_parameter(self) -> Parameter:
        name = self.consume_identifier("parameter")
        self.consume(":", "parameter")
        return Parameter(name, self.parse_type())

    def parse_example(self) -> Example:
        name = self.consume_identifier("example name")
        self.consume("(", "example")
        literals = self._parse_delimited(self.parse_literal, "example arguments")
        self.consume("=", "example")
        result = self.parse_literal()
        return Example(name, literals, result)

    def parse_expression(self) -> Expression:
        name = self.consume_identifier("expression")
        self.consume("(", "expression")
        mix = self._parse_delimited(self._parse_mix_item, "expression arguments")
        return Expression(name, mix)

    def _parse_mix_item(self) -> MixItem:
        if self.peek_identifier():
            return self.parse_expression()
        return self.parse_literal()

    def _parse_delimited(self, parse_item: Callable[[], T], context: str) -> Tuple[T, ...]:
        """Parse ``item (',' item)* ')'``; the opening paren is already consumed."""
        items: List[T] = [parse_item()]
        while True:
            if self.match(","):
                items.append(parse_item())
            elif self.match(")"):
                return tuple(items)
            else:
                raise self.expected_error(["','", "')'"], context)
