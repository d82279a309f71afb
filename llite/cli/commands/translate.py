"""
Translate command implementation.

Reads a literate source file, translates it to Markdown and writes the
result next to the input (or to ``--output``).
"""

import argparse
import logging
import sys
from pathlib import Path

from llite.translator import strip_bom, translate

from ..context import get_cli_context
from ..errors import CLIFileNotFoundError, CLIRuntimeError, handle_cli_exception
from ..output import print_success
from ..validation import build_options, default_output_path, validate_path

logger = logging.getLogger(__name__)


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """
    Read a source file as text, dropping a leading byte order mark.

    Line endings are preserved as they are on disk.
    """
    if not path.is_file():
        raise CLIFileNotFoundError(
            f"Input file not found: {path}",
            hint="Check the path of the file to translate"
        )
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CLIRuntimeError(f"Cannot read {path}: {exc.strerror}") from exc
    try:
        text = data.decode(encoding)
    except UnicodeDecodeError as exc:
        raise CLIRuntimeError(
            f"{path} is not valid {encoding} (byte {exc.start})",
            hint="Set defaults.encoding in llite.toml to the file encoding"
        ) from exc
    return strip_bom(text)


def write_output(path: Path, text: str, encoding: str = "utf-8") -> None:
    try:
        data = text.encode(encoding)
    except UnicodeEncodeError as exc:
        raise CLIRuntimeError(
            f"Cannot write {path} as {encoding}: {exc.object[exc.start]!r} cannot be encoded",
            hint="Set defaults.encoding in llite.toml to an encoding such as utf-8"
        ) from exc
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as exc:
        raise CLIRuntimeError(f"Cannot write {path}: {exc.strerror}") from exc


def cmd_translate(args: argparse.Namespace) -> None:
    """
    Handle the 'translate' subcommand.

    Args:
        args: Parsed command-line arguments containing:
            - file: Source file to translate
            - output: Output path, '-' for stdout (optional)
            - language / narrative_open / narrative_close
            - indent / code_open / code_close

    Raises:
        SystemExit: On any error, after printing a formatted message
    """
    try:
        ctx = get_cli_context(args)
        defaults = ctx.config.defaults
        source_path = validate_path(args.file)
        options = build_options(args, ctx.config)

        source = read_source(source_path, defaults.encoding)
        logger.info("Translating %s", source_path)
        result = translate(options, source, path=str(source_path))

        if args.output == "-":
            sys.stdout.write(result)
            return

        output_path = (
            validate_path(args.output)
            if args.output
            else default_output_path(source_path, defaults.output_extension)
        )
        if output_path.resolve() == source_path.resolve():
            raise CLIRuntimeError(
                f"Refusing to overwrite the input file {source_path}",
                hint="Pass a different --output path"
            )
        write_output(output_path, result, defaults.encoding)
        print_success(f"Wrote {output_path}")

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
