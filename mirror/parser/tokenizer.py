"""Tokenization for Mirror source text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

__all__ = ["Token", "TokenizerMixin", "tokenize"]


# Order matters: fractional numbers before word runs so "2.5" stays whole,
# "->" before the single-character fallback.
_TOKEN_PATTERN = re.compile(
    r'[0-9]+\.[0-9]+'
    r'|[A-Za-z0-9_]+'
    r'|->'
    r'|[.,:()\[\]{}]'
    r'|"(?:\\.|[^"\\])*"'
    r'|\S'
)


@dataclass(frozen=True)
class Token:
    """Lexical unit with its source position (line and column are 1-based)."""

    value: str
    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return self.value


def tokenize(source: str) -> List[Token]:
    """Split ``source`` into tokens.

    Never fails: characters outside the grammar become one-character tokens
    and are rejected later by the parser.
    """
    tokens: List[Token] = []
    line = 1
    line_start = 0
    scanned = 0
    for match in _TOKEN_PATTERN.finditer(source):
        start = match.start()
        newlines = source.count("\n", scanned, start)
        if newlines:
            line += newlines
            line_start = source.rfind("\n", scanned, start) + 1
        text = match.group(0)
        tokens.append(Token(text, start, line, start - line_start + 1))
        # string tokens may span lines
        inner_newlines = text.count("\n")
        if inner_newlines:
            line += inner_newlines
            line_start = start + text.rfind("\n") + 1
        scanned = match.end()
    return tokens


class TokenizerMixin:
    """Mixin providing tokenization for the statement parser."""

    def _tokenize(self, source: str) -> List[Token]:
        return tokenize(source)
