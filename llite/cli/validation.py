"""
Validation of CLI arguments and resolution of translator options.

Command-line flags take precedence over the ``[defaults]`` section of the
workspace configuration.
"""

import argparse
import os
from pathlib import Path
from typing import Any, Optional

from llite.config import TranslateDefaults, WorkspaceConfig
from llite.errors import OptionsError
from llite.languages import find_language, suggest_language, supported_languages
from llite.options import CodeStyle, Indented, Options, Surrounded

from .errors import CLIValidationError


def validate_path(value: Any, *, allow_none: bool = False, must_exist: bool = False) -> Optional[Path]:
    """
    Validate and convert value to Path.

    Raises:
        CLIValidationError: If value is not path-like or does not exist when must_exist=True

    Examples:
        >>> validate_path("/tmp/file.txt")
        PosixPath('/tmp/file.txt')
        >>> validate_path(None, allow_none=True) is None
        True
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Path value cannot be None",
            hint="Provide a valid file path"
        )

    if isinstance(value, (str, os.PathLike)):
        path = Path(value)

        if must_exist and not path.exists():
            raise CLIValidationError(
                f"Path does not exist: {path}",
                hint="Ensure the file exists before running this command"
            )

        return path

    raise CLIValidationError(
        f"Expected path-like value, got {type(value).__name__}",
        hint="Provide a string or Path object"
    )


def validate_int(
    value: Any,
    *,
    allow_none: bool = False,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None
) -> Optional[int]:
    """
    Validate an integer with optional range checking.

    Examples:
        >>> validate_int(4, min_value=1)
        4
        >>> validate_int(0, min_value=1)
        Traceback (most recent call last):
        ...
        llite.cli.errors.CLIValidationError: Value 0 is below minimum 1
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError(
            "Integer value cannot be None",
            hint="Provide a valid integer"
        )

    if not isinstance(value, int) or isinstance(value, bool):
        raise CLIValidationError(
            f"Expected integer value, got {type(value).__name__}",
            hint="Provide an integer value"
        )

    if min_value is not None and value < min_value:
        raise CLIValidationError(
            f"Value {value} is below minimum {min_value}",
            hint=f"Use a value of at least {min_value}"
        )

    if max_value is not None and value > max_value:
        raise CLIValidationError(
            f"Value {value} is above maximum {max_value}",
            hint=f"Use a value of at most {max_value}"
        )

    return value


def resolve_narrative_delimiters(args: argparse.Namespace, config: WorkspaceConfig) -> tuple[str, str]:
    """
    Pick the narrative delimiters from ``-l`` or ``-p``/``-c``.

    Falls back to ``defaults.language`` when neither is given.
    """
    language = getattr(args, "language", None)
    narrative_open = getattr(args, "narrative_open", None)
    narrative_close = getattr(args, "narrative_close", None)

    if language is None and narrative_open is None and narrative_close is None:
        language = config.defaults.language

    if language is not None:
        symbols = find_language(language, config.languages)
        if symbols is None:
            suggestion = suggest_language(language, config.languages)
            hint = (
                f"Did you mean '{suggestion}'?"
                if suggestion
                else f"Supported languages: {', '.join(supported_languages(config.languages))}"
            )
            raise CLIValidationError(f"{language} is not a supported language", hint=hint)
        return symbols.start, symbols.end

    if not narrative_open or not narrative_close:
        raise CLIValidationError(
            "You need to specify either -l, or both -p and -c",
            hint="Run 'llite languages' to list the language presets"
        )
    return narrative_open, narrative_close


def resolve_code_style(
    args: argparse.Namespace,
    defaults: TranslateDefaults,
    *,
    required: bool = True,
) -> CodeStyle:
    """
    Pick the code style from ``-i`` or ``-P``/``-C``, then from defaults.

    When ``required`` is False a missing style falls back to ``Indented(4)``.
    """
    indent = getattr(args, "indent", None)
    code_open = getattr(args, "code_open", None)
    code_close = getattr(args, "code_close", None)

    if indent is not None:
        return Indented(validate_int(indent, min_value=1))
    if code_open is not None or code_close is not None:
        if code_open is None or code_close is None:
            raise CLIValidationError(
                "You need to specify both -P and -C",
                hint="Pass the line opening and the line closing a code block"
            )
        return Surrounded(code_open, code_close)

    if defaults.indent is not None:
        return Indented(validate_int(defaults.indent, min_value=1))
    if defaults.code_open is not None and defaults.code_close is not None:
        return Surrounded(defaults.code_open, defaults.code_close)

    if not required:
        return Indented()
    raise CLIValidationError(
        "You need to specify either -i, or both -P and -C",
        hint="For example: -i 4, or -P '```c' -C '```'"
    )


def build_options(
    args: argparse.Namespace,
    config: WorkspaceConfig,
    *,
    code_style_required: bool = True,
) -> Options:
    start, end = resolve_narrative_delimiters(args, config)
    code_style = resolve_code_style(args, config.defaults, required=code_style_required)
    try:
        return Options(start, end, code_style)
    except OptionsError as exc:
        raise CLIValidationError(exc.message, hint=exc.hint) from exc


def default_output_path(source: Path, extension: str = ".mkd") -> Path:
    """
    Input path with its extension replaced.

    Examples:
        >>> default_output_path(Path("docs/intro.fsx")).as_posix()
        'docs/intro.mkd'
    """
    return source.with_suffix(extension)


__all__ = [
    "validate_path",
    "validate_int",
    "resolve_narrative_delimiters",
    "resolve_code_style",
    "build_options",
    "default_output_path",
]
