"""Mirror parser package.

Tokenizer, cursor operations and grammar rules are split into mixins that
:class:`MirrorParser` composes.
"""

from .main import MirrorParser, parse
from .tokenizer import Token, tokenize

__all__ = ["MirrorParser", "parse", "Token", "tokenize"]
