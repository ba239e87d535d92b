"""
Mirror CLI entry point.

Commands:
    mirror tokens FILE          print the token stream with positions
    mirror parse FILE           print the AST as JSON (``--grouped`` to group)
    mirror compile FILE         generate code through a local model
    mirror models               list models offered by the local server
"""

import argparse
import logging
import sys
from typing import List, Optional

from .. import __version__
from ..config import LOG_LEVELS, load_config
from ..errors import MirrorError
from ..llm import LLMError
from .commands import cmd_compile, cmd_models, cmd_parse, cmd_tokens
from .errors import CLIError, cli_verbose_enabled, format_cli_error

logger = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    """Attach a stderr handler to the ``mirror`` logger once."""
    numeric_level = getattr(logging, level_name.upper(), logging.WARNING)
    package_logger = logging.getLogger("mirror")
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        package_logger.addHandler(handler)
        # Prevent duplicate messages through the root logger
        package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mirror",
        description="Mirror specification language – describe functions by signature and example",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="Path to a mirror.toml configuration file")
    parser.add_argument(
        "--log-level",
        choices=list(LOG_LEVELS),
        default=None,
        help="Logging level (or set MIRROR_LOG_LEVEL; default: warning)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print tracebacks with errors (or set MIRROR_VERBOSE=1)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    tokens_parser = subparsers.add_parser("tokens", help="Print the token stream")
    tokens_parser.add_argument("file", help="Mirror source file, or '-' for stdin")
    tokens_parser.set_defaults(func=cmd_tokens)

    parse_parser = subparsers.add_parser("parse", help="Print the parsed program as JSON")
    parse_parser.add_argument("file", help="Mirror source file, or '-' for stdin")
    parse_parser.add_argument(
        "--grouped",
        action="store_true",
        help="Attach examples to their signatures and list expressions separately",
    )
    parse_parser.add_argument("--indent", type=int, default=2, help="JSON indentation (0 for compact)")
    parse_parser.set_defaults(func=cmd_parse)

    compile_parser = subparsers.add_parser("compile", help="Generate code with a local model")
    compile_parser.add_argument("file", help="Mirror source file, or '-' for stdin")
    compile_parser.add_argument("--model", "-m", default=None, help="Model name sent to the server")
    compile_parser.add_argument("--base-url", default=None, help="Server base URL, e.g. http://127.0.0.1:1234/v1")
    compile_parser.add_argument("--language", default=None, help="Target language (default: JavaScript)")
    compile_parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    compile_parser.add_argument("--output", "-o", default=None, help="Write generated code to this file")
    compile_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the prompt instead of calling the model",
    )
    compile_parser.set_defaults(func=cmd_compile)

    models_parser = subparsers.add_parser("models", help="List models offered by the server")
    models_parser.add_argument("--base-url", default=None, help="Server base URL")
    models_parser.set_defaults(func=cmd_models)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI and return its exit code.

    Exit codes: 0 success, 1 language/model/configuration error,
    2 invalid command line (raised by argparse).

    Examples:
        >>> main(['parse', 'add.mirror', '--grouped'])  # doctest: +SKIP
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    verbose = cli_verbose_enabled(args.verbose)

    try:
        config = load_config(
            path=args.config,
            overrides={
                "model": getattr(args, "model", None),
                "base_url": getattr(args, "base_url", None),
                "language": getattr(args, "language", None),
                "timeout": getattr(args, "timeout", None),
                "log_level": args.log_level,
            },
        )
    except MirrorError as exc:
        _configure_logging(args.log_level or "warning")
        print(format_cli_error(exc, verbose=verbose), file=sys.stderr)
        return 1

    _configure_logging(config.log_level)
    logger.debug("Running '%s' with model %s at %s", args.command, config.model, config.base_url)

    try:
        return args.func(args, config)
    except (MirrorError, LLMError, CLIError) as exc:
        print(format_cli_error(exc, verbose=verbose), file=sys.stderr)
        return 1


__all__ = ["main", "build_parser"]
