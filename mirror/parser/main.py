"""Composition class for the Mirror statement parser."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..ast import Program, Statement
from ..errors import NestingTooDeepError
from .literals import LiteralParserMixin
from .statements import StatementParserMixin
from .tokenizer import Token, TokenizerMixin
from .tokens import TokenOperationsMixin
from .types import TypeParserMixin

logger = logging.getLogger(__name__)


class MirrorParser(
    TokenizerMixin,
    TokenOperationsMixin,
    TypeParserMixin,
    LiteralParserMixin,
    StatementParserMixin,
):
    """
    Recursive-descent parser for Mirror specification files.

    Supported Constructs:
        Signatures:
            signature add(a: number, b: number) -> number
            signature keys(d: dict{number}) -> list[string]
        Examples:
            example add(2, 3) = 5
            example keys({"a": 1}) = ["a"]
        Expressions:
            add(add(1, 2), 3)

    Architecture:
        - TokenizerMixin: regex tokenization with source positions
        - TokenOperationsMixin: cursor operations (peek, match, consume)
        - TypeParserMixin: type expressions
        - LiteralParserMixin: literal values
        - StatementParserMixin: statement dispatch and statement rules

    Parsing is all-or-nothing: the first error aborts with a
    :class:`~mirror.errors.MirrorSyntaxError` and no partial program.
    Nesting is bounded only by the interpreter recursion limit; input nested
    past it raises :class:`~mirror.errors.NestingTooDeepError`.
    A parser instance holds the cursor for one source text; create a new one
    per parse.
    """

    def __init__(self, source: str, path: Optional[str] = None):
        self.source = source
        self.path = path
        self.tokens: List[Token] = self._tokenize(source)
        self.token_pos: int = 0

    def parse(self) -> Program:
        statements: List[Statement] = []
        try:
            while not self.is_at_end():
                statements.append(self.parse_statement())
        except RecursionError:
            raise self._nesting_error() from None
        logger.debug(
            "Parsed %d statement(s) from %d token(s)%s",
            len(statements),
            len(self.tokens),
            f" in {self.path}" if self.path else "",
        )
        return Program(tuple(statements))

    def _nesting_error(self) -> NestingTooDeepError:
        # The cursor still points at the token where recursion gave out.
        found = self.describe_current()
        line, column = self._error_position()
        return NestingTooDeepError(
            f"Nesting too deep at {found}",
            found=found,
            path=self.path,
            line=line,
            column=column,
            hint="Reduce the nesting of list[...], dict{...}, [...], {...} or call(...) constructs",
        )


def parse(source: str, path: Optional[str] = None) -> Program:
    """Parse Mirror source text into a :class:`Program`."""
    return MirrorParser(source, path=path).parse()
