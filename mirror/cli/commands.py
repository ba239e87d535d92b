"""Subcommand implementations for the ``mirror`` CLI.

Each command receives the parsed arguments and the resolved
:class:`~mirror.config.MirrorConfig`, writes its result to stdout and
returns an exit code.  Errors are raised and formatted by ``main``.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

from ..compiler import MirrorCompiler
from ..config import MirrorConfig
from ..grouping import group_program
from ..llm import LocalChatLLM
from ..parser import parse, tokenize
from .errors import CLIError, CLIFileNotFoundError

logger = logging.getLogger(__name__)


def read_source(location: str) -> Tuple[str, Optional[str]]:
    """Return ``(text, path)``; ``-`` reads standard input."""
    if location == "-":
        try:
            return sys.stdin.read(), None
        except UnicodeDecodeError as exc:
            raise _encoding_error("standard input", exc) from exc
    path = Path(location)
    if not path.is_file():
        raise CLIFileNotFoundError(
            f"Source file not found: {location}",
            hint="Pass the path to a Mirror file, or '-' to read standard input",
        )
    try:
        return path.read_text(encoding="utf-8"), str(path)
    except UnicodeDecodeError as exc:
        raise _encoding_error(location, exc) from exc


def _encoding_error(source: str, exc: UnicodeDecodeError) -> CLIError:
    return CLIError(
        f"Cannot read {source}: not valid UTF-8 (byte 0x{exc.object[exc.start]:02x} at offset {exc.start})",
        code="CLI_ENCODING_ERROR",
        hint="Mirror sources must be UTF-8 text",
    )


def _indent(args) -> Optional[int]:
    return args.indent if args.indent and args.indent > 0 else None


def cmd_tokens(args, config: MirrorConfig) -> int:
    source, _ = read_source(args.file)
    for token in tokenize(source):
        print(f"{token.line}:{token.column}\t{token.value}")
    return 0


def cmd_parse(args, config: MirrorConfig) -> int:
    source, path = read_source(args.file)
    program = parse(source, path=path)
    payload = group_program(program).to_dict() if args.grouped else program.to_dict()
    print(json.dumps(payload, indent=_indent(args), ensure_ascii=False))
    return 0


def cmd_compile(args, config: MirrorConfig) -> int:
    source, path = read_source(args.file)
    with LocalChatLLM(config.model, config.llm_config()) as llm:
        compiler = MirrorCompiler(llm, language=config.language)
        if args.dry_run:
            print(compiler.prepare(source, path=path).prompt)
            return 0
        code = compiler.compile(source, path=path)

    if args.output:
        Path(args.output).write_text(code, encoding="utf-8")
        logger.info("Wrote generated code to %s", args.output)
    else:
        print(code)
    return 0


def cmd_models(args, config: MirrorConfig) -> int:
    with LocalChatLLM(config.model, config.llm_config()) as llm:
        for name in llm.list_models():
            print(name)
    return 0


__all__ = ["read_source", "cmd_tokens", "cmd_parse", "cmd_compile", "cmd_models"]
