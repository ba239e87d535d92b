"""
Mirror specification language.

Mirror describes functions by their typed signatures and a handful of
input/output examples::

    signature add(a: number, b: number) -> number
    example add(2, 3) = 5
    add(add(1, 2), 3)

The package is organised into several modules:

* ``parser`` – tokenizer and recursive-descent parser producing a
  :class:`~mirror.ast.Program`.
* ``ast`` – frozen dataclasses for types, literals and statements.
* ``grouping`` – attaches examples to the signature they illustrate.
* ``serialization`` – lossless JSON form of every node.
* ``llm`` and ``compiler`` – turn a grouped program into a prompt and ask
  a locally hosted model to write the implementation.
* ``cli`` – the ``mirror`` command.
"""

from importlib import metadata as _metadata

from .errors import (
    CompilationError,
    ConfigError,
    ExpectedConstructError,
    MirrorError,
    MirrorSyntaxError,
    NestingTooDeepError,
    UnexpectedTokenError,
)
from .grouping import extract_expressions, group_program, group_signatures_with_examples
from .parser import MirrorParser, parse, tokenize

try:  # pragma: no cover - metadata is missing when running from a source tree
    __version__ = _metadata.version("mirror-lang")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    "MirrorParser",
    "parse",
    "tokenize",
    "group_signatures_with_examples",
    "extract_expressions",
    "group_program",
    "MirrorError",
    "MirrorSyntaxError",
    "UnexpectedTokenError",
    "ExpectedConstructError",
    "NestingTooDeepError",
    "CompilationError",
    "ConfigError",
]
