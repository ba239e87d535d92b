"""Error formatting for the Mirror CLI."""

import os
import traceback
from typing import Optional

from ..errors import MirrorError
from ..llm import LLMError


class CLIError(Exception):
    """
    Command-level failure that is not a language or model error.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code
        hint: Optional suggestion for resolving the error
    """

    def __init__(self, message: str, *, code: str = "CLI_ERROR", hint: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint

    def format(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class CLIFileNotFoundError(CLIError):
    """Source file given on the command line does not exist."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("code", "CLI_FILE_NOT_FOUND")
        super().__init__(message, **kwargs)


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """
    Format an exception for stderr.

    Mirror and CLI errors keep their own message unchanged; model errors add
    the HTTP status when known.

    Examples:
        >>> print(format_cli_error(CLIError("No input", hint="Pass a file or '-'")))
        Error: No input
        Hint: Pass a file or '-'
    """
    if isinstance(exc, (MirrorError, CLIError)):
        text = exc.format()
    elif isinstance(exc, LLMError):
        text = str(exc)
        if exc.status_code is not None:
            text = f"{text} (HTTP {exc.status_code})"
    else:
        text = f"{type(exc).__name__}: {exc}"

    output = f"Error: {text}"
    if verbose:
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        output = f"{output}\n\n{trace.rstrip()}"
    return output


def _env_flag(name: str) -> bool:
    value = os.getenv(name)
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


def cli_verbose_enabled(verbose_flag: bool = False) -> bool:
    """``--verbose`` or a truthy ``MIRROR_VERBOSE`` adds tracebacks to errors."""
    return verbose_flag or _env_flag("MIRROR_VERBOSE")
