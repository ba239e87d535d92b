"""Instruction template sent to the code-generation model."""

from __future__ import annotations

import json
import textwrap

from .ast import GroupedProgram

PROMPT_TEMPLATE = textwrap.dedent(
    """\
    I want you to generate the function body in {language} for the function signature that I give you.
    I will also give you several examples of inputs with the expected results. Do not use any additional libraries. Do not give any explanation.
    Do not format it as Markdown. Only give the function and the function call expressions afterwards if applicable. Do not include ANY extraneous text.

    {signatures}
    {expressions}


    Generate {language} code that satisfies these function signatures, examples, and expressions."""
)


def build_prompt(grouped: GroupedProgram, language: str = "JavaScript") -> str:
    """Render the grouped program into the generation instructions."""
    payload = grouped.to_dict()
    return PROMPT_TEMPLATE.format(
        language=language,
        signatures=json.dumps(payload["signatures"], indent=2, ensure_ascii=False),
        expressions=json.dumps(payload["expressions"], indent=2, ensure_ascii=False),
    )


__all__ = ["PROMPT_TEMPLATE", "build_prompt"]
