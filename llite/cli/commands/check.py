"""
Check command implementation.

Runs the tokenizer, parser and flattener over each file and reports
unbalanced narrative comments without writing any output.
"""

import argparse
import sys

from llite.errors import LLiteError
from llite.flatten import blockize

from ..context import get_cli_context
from ..errors import CLIError, handle_cli_exception
from ..output import print_error, print_success
from ..validation import build_options, validate_path
from .translate import read_source


def cmd_check(args: argparse.Namespace) -> None:
    """
    Handle the 'check' subcommand.

    Exits with status 1 when at least one file fails.
    """
    try:
        ctx = get_cli_context(args)
        options = build_options(args, ctx.config, code_style_required=False)
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
        return

    failures = 0
    for file_arg in args.files:
        path = validate_path(file_arg)
        try:
            source = read_source(path, ctx.config.defaults.encoding)
            blocks = blockize(options, source, path=str(path))
        except LLiteError as exc:
            failures += 1
            print_error(exc.format())
            continue
        except CLIError as exc:
            failures += 1
            print_error(f"{path}: {exc.message}")
            continue
        print_success(f"{path}: {len(blocks)} blocks")

    if failures:
        print(f"{failures} of {len(args.files)} files failed", file=sys.stderr)
        sys.exit(1)
