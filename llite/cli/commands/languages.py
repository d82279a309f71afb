"""Languages command: list narrative delimiter presets."""

import argparse

from llite.languages import describe_languages

from ..context import get_cli_context
from ..errors import handle_cli_exception


def cmd_languages(args: argparse.Namespace) -> None:
    """Print every built-in and configured language preset."""
    try:
        ctx = get_cli_context(args)
        print(describe_languages(ctx.config.languages))
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
