"""
Errors reported by the llite command line tool.

Every command funnels failures into :func:`handle_cli_exception`, which
prints a single message on stderr and exits with status 1. Translation
errors from :mod:`llite.errors` keep their own ``format()`` rendering;
CLI errors add a code and an optional hint.
"""

import os
import sys
import traceback
from typing import NoReturn, Optional

from llite.errors import LLiteError

# Verbose tracebacks keep at most this many trailing characters
TRACE_LIMIT = 4000

_TRUTHY = {"1", "true", "yes", "on"}


class CLIError(Exception):
    """A command line failure with a stable code and an optional hint."""

    code = "CLI_ERROR"

    def __init__(self, message: str, *, hint: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        if code is not None:
            self.code = code


class CLIConfigError(CLIError):
    """The workspace configuration cannot be used."""

    code = "CLI_CONFIG_ERROR"


class CLIValidationError(CLIError):
    """Arguments are missing, inconsistent or out of range."""

    code = "CLI_VALIDATION_ERROR"


class CLIFileNotFoundError(CLIError):
    code = "CLI_FILE_NOT_FOUND"


class CLIRuntimeError(CLIError):
    """Reading, decoding or writing a file failed."""

    code = "CLI_RUNTIME_ERROR"


def _trace(exc: BaseException) -> str:
    trace = "".join(traceback.format_exception(exc)).rstrip()
    if len(trace) <= TRACE_LIMIT:
        return trace
    return f"...{trace[-TRACE_LIMIT:]}"


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """
    Render ``exc`` for the terminal.

    In verbose mode the exception that caused a CLI error and the full
    traceback are appended.

    Examples:
        >>> print(format_cli_error(CLIValidationError("Invalid indent", hint="Use 1 or more")))
        Error [CLI_VALIDATION_ERROR]: Invalid indent
        Hint: Use 1 or more
    """
    if isinstance(exc, CLIError):
        lines = [f"Error [{exc.code}]: {exc.message}"]
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
    elif isinstance(exc, LLiteError):
        lines = [f"Error: {exc.format()}"]
    else:
        lines = [f"Error: {exc.__class__.__name__}: {exc}"]

    if verbose:
        cause = exc.__cause__
        if cause is not None:
            lines.append(f"Caused by: {cause.__class__.__name__}: {cause}")
        lines.append("")
        lines.append(_trace(exc))
    return "\n".join(lines)


def env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def handle_cli_exception(exc: BaseException, *, verbose: bool = False) -> NoReturn:
    """
    Print ``exc`` and exit with status 1.

    ``LLITE_RERAISE`` (or ``LLITE_DEBUG``) re-raises instead, and
    ``LLITE_VERBOSE`` behaves like ``--verbose``.
    """
    if env_flag("LLITE_RERAISE") or env_flag("LLITE_DEBUG"):
        raise exc
    verbose = verbose or env_flag("LLITE_VERBOSE")
    print(format_cli_error(exc, verbose=verbose), file=sys.stderr)
    sys.exit(1)


__all__ = [
    "CLIError",
    "CLIConfigError",
    "CLIValidationError",
    "CLIFileNotFoundError",
    "CLIRuntimeError",
    "format_cli_error",
    "env_flag",
    "handle_cli_exception",
]
