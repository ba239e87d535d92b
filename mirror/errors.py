"""Unified error model for Mirror.

Every failure surfaced to users derives from :class:`MirrorError`.  Syntax
errors carry the expected construct(s) and the token actually found so the
message can be shown verbatim by the CLI and the compiler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class ErrorLocation:
    """Position in a Mirror source; any field may be unknown."""

    path: Optional[str] = None
    line: Optional[int] = None
    column: Optional[int] = None

    def __bool__(self) -> bool:
        return self.path is not None or self.line is not None

    def __str__(self) -> str:
        if self.line is None:
            return self.path or ""
        if self.path:
            position = str(self.line) if self.column is None else f"{self.line}:{self.column}"
            return f"{self.path}:{position}"
        if self.column is None:
            return f"line {self.line}"
        return f"line {self.line}, column {self.column}"


class MirrorError(Exception):
    """Base class for all parser, compiler and configuration errors.

    ``str(error)`` is the bare message; :meth:`format` adds the location,
    the error code and the hint, e.g.
    ``Expected type, but got 'int' (math.mirror:1:16; EXPECTED_CONSTRUCT) Hint: ...``.
    """

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(path, line, column)
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    @property
    def path(self) -> Optional[str]:
        return self.location.path

    @property
    def line(self) -> Optional[int]:
        return self.location.line

    @property
    def column(self) -> Optional[int]:
        return self.location.column

    def format(self) -> str:
        details = [str(self.location)] if self.location else []
        if self.code:
            details.append(self.code)
        text = f"{self.message} ({'; '.join(details)})" if details else self.message
        return f"{text} Hint: {self.hint}" if self.hint else text


class MirrorSyntaxError(MirrorError):
    """Raised when the parser encounters invalid syntax."""

    code = "SYNTAX_ERROR"

    def __init__(
        self,
        message: str,
        *,
        expected: Optional[Sequence[str]] = None,
        found: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(message, **kwargs)
        self.expected: List[str] = list(expected or [])
        self.found = found


class UnexpectedTokenError(MirrorSyntaxError):
    """No top-level statement rule matches the next token."""

    code = "UNEXPECTED_TOKEN"


class ExpectedConstructError(MirrorSyntaxError):
    """A specific token, identifier, type or literal was required but missing."""

    code = "EXPECTED_CONSTRUCT"


class NestingTooDeepError(MirrorSyntaxError):
    """Types, literals or calls are nested deeper than the parser can follow."""

    code = "NESTING_TOO_DEEP"


class CompilationError(MirrorError):
    """Raised when the generation step of a compile fails."""

    code = "COMPILATION_FAILED"


class ConfigError(MirrorError):
    """Raised for unreadable or invalid configuration."""

    code = "CONFIG_ERROR"


def describe_expected(expected: Sequence[str]) -> str:
    """Render ``["','", "')'"]`` as ``',' or ')'``."""
    if not expected:
        return "a token"
    if len(expected) == 1:
        return expected[0]
    return ", ".join(expected[:-1]) + f" or {expected[-1]}"


__all__ = [
    "ErrorLocation",
    "MirrorError",
    "MirrorSyntaxError",
    "UnexpectedTokenError",
    "ExpectedConstructError",
    "NestingTooDeepError",
    "CompilationError",
    "ConfigError",
    "describe_expected",
]
