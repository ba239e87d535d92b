"""Cursor operations over the token stream."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from ..errors import ExpectedConstructError, describe_expected
from .tokenizer import Token

__all__ = ["TokenOperationsMixin", "is_identifier", "LITERAL_KEYWORDS"]


_IDENTIFIER_RE = re.compile(r"^[a-zA-Z_]\w*$")
_NUMBER_RE = re.compile(r"^[0-9]+(\.[0-9]+)?$")

LITERAL_KEYWORDS = ("true", "false")


def is_identifier(value: Optional[str]) -> bool:
    """Identifier-shaped and not a boolean literal."""
    if value is None or value in LITERAL_KEYWORDS:
        return False
    return bool(_IDENTIFIER_RE.match(value))


class TokenOperationsMixin:
    """Mixin providing token manipulation operations.

    Expects ``self.tokens`` (a list of :class:`Token`) and ``self.token_pos``.
    """

    tokens: List[Token]
    token_pos: int
    path: Optional[str]

    def is_at_end(self) -> bool:
        return self.token_pos >= len(self.tokens)

    def current_token(self) -> Optional[Token]:
        if self.token_pos < len(self.tokens):
            return self.tokens[self.token_pos]
        return None

    def peek(self) -> Optional[str]:
        """Value of the current token, ``None`` at end of input."""
        token = self.current_token()
        return token.value if token is not None else None

    def previous(self) -> Token:
        return self.tokens[self.token_pos - 1]

    def advance(self) -> Token:
        if not self.is_at_end():
            self.token_pos += 1
        return self.previous()

    def check(self, value: str) -> bool:
        return self.peek() == value

    def match(self, *values: str) -> bool:
        """Consume the current token if it equals any of ``values``."""
        for value in values:
            if self.check(value):
                self.advance()
                return True
        return False

    def match_number(self) -> bool:
        token = self.peek()
        if token is not None and _NUMBER_RE.match(token):
            self.advance()
            return True
        return False

    def match_string(self) -> bool:
        token = self.peek()
        if token is not None and len(token) >= 2 and token[0] == '"' and token[-1] == '"':
            self.advance()
            return True
        return False

    def peek_identifier(self) -> bool:
        return is_identifier(self.peek())

    def consume(self, value: str, context: Optional[str] = None) -> Token:
        if self.check(value):
            return self.advance()
        raise self.expected_error([f"'{value}'"], context)

    def consume_identifier(self, context: Optional[str] = None) -> str:
        if self.peek_identifier():
            return self.advance().value
        raise self.expected_error(
            ["identifier"],
            context,
            hint="Identifiers start with a letter or underscore; 'true' and 'false' are reserved",
        )

    def describe_current(self) -> str:
        token = self.peek()
        return "end of input" if token is None else f"'{token}'"

    def expected_error(
        self,
        expected: Sequence[str],
        context: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> ExpectedConstructError:
        """Build the error for an unmet expectation at the cursor."""
        where = f" in {context}" if context else ""
        found = self.describe_current()
        line, column = self._error_position()
        return ExpectedConstructError(
            f"Expected {describe_expected(expected)}{where}, but got {found}",
            expected=expected,
            found=found,
            path=self.path,
            line=line,
            column=column,
            hint=hint,
        )

    def _error_position(self):
        token = self.current_token()
        if token is not None:
            return token.line, token.column
        if self.tokens:
            last = self.tokens[-1]
            return last.line, last.column + len(last.value)
        return 1, 1
