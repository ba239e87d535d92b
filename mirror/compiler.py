"""Compile Mirror source into generated code through a language model."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .ast import GroupedProgram
from .errors import CompilationError
from .grouping import group_program
from .llm import BaseLLM, LLMError
from .parser import parse
from .prompts import build_prompt

logger = logging.getLogger(__name__)


@dataclass
class CompilationResult:
    code: str
    prompt: str
    grouped: GroupedProgram
    model: str


class MirrorCompiler:
    """Parse, group, prompt, generate.

    Syntax errors propagate unchanged so their message reaches the user
    verbatim; failures of the model call become :class:`CompilationError`.
    """

    def __init__(self, llm: BaseLLM, language: str = "JavaScript"):
        self.llm = llm
        self.language = language

    def prepare(self, source: str, path: Optional[str] = None) -> CompilationResult:
        """Everything up to the model call; ``code`` is left empty."""
        program = parse(source, path=path)
        grouped = group_program(program)
        logger.info(
            "Grouped %d signature(s) and %d expression(s)",
            len(grouped.signatures),
            len(grouped.expressions),
        )
        prompt = build_prompt(grouped, language=self.language)
        return CompilationResult(code="", prompt=prompt, grouped=grouped, model=self.llm.model)

    def compile_result(self, source: str, path: Optional[str] = None) -> CompilationResult:
        result = self.prepare(source, path=path)
        try:
            response = self.llm.generate(result.prompt)
        except LLMError as exc:
            raise CompilationError(f"Compilation failed: {exc}", path=path) from exc
        logger.info("Generated %d character(s) with model %s", len(response.text), response.model)
        result.code = response.text
        result.model = response.model
        return result

    def compile(self, source: str, path: Optional[str] = None) -> str:
        return self.compile_result(source, path=path).code


__all__ = ["MirrorCompiler", "CompilationResult"]
