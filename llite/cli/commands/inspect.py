"""
Inspect command implementation.

Prints the intermediate results of the translation pipeline for a file.
"""

import argparse

from llite.flatten import flatten
from llite.lexer import tokenize
from llite.parser import parse
from llite.phases import process_phases

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..output import print_blocks, print_chunks, print_tokens
from ..validation import build_options, validate_path
from .translate import read_source

STAGES = ("tokens", "chunks", "blocks", "phases")


def cmd_inspect(args: argparse.Namespace) -> None:
    """Handle the 'inspect' subcommand."""
    try:
        ctx = get_cli_context(args)
        path = validate_path(args.file)
        options = build_options(args, ctx.config, code_style_required=args.stage == "phases")
        source = read_source(path, ctx.config.defaults.encoding)

        tokens = tokenize(options, source)
        if args.stage == "tokens":
            print_tokens(tokens)
            return

        chunks = parse(options, tokens, path=str(path))
        if args.stage == "chunks":
            print_chunks(chunks)
            return

        blocks = flatten(options, chunks, path=str(path))
        if args.stage == "phases":
            blocks = process_phases(options, blocks)
        print_blocks(blocks)

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
