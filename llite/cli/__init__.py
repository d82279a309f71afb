"""
llite CLI entry point.

Builds the argument parser, loads the workspace configuration and
dispatches to the command modules.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from llite import __version__
from llite.config import load_workspace_config
from llite.errors import ConfigFileError

from .commands import STAGES, cmd_check, cmd_inspect, cmd_languages, cmd_translate
from .context import CLIContext
from .errors import CLIConfigError, handle_cli_exception

COMMANDS = {'translate', 'check', 'inspect', 'languages'}

# Options taken before the command, with the number of values they consume
_GLOBAL_OPTIONS = {'--config': 1, '--log-level': 1, '--verbose': 0}


def _configure_logging(args: argparse.Namespace) -> None:
    """Configure the 'llite' logger from --log-level or LLITE_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('LLITE_LOG_LEVEL', 'warning')
    ).lower()

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    logger = logging.getLogger('llite')
    logger.setLevel(level_map.get(log_level, logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(handler)
        logger.propagate = False


def _add_narrative_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group('narrative delimiters (either -l, or -p and -c)')
    group.add_argument('-l', '--language', help='Language preset supplying the narrative delimiters')
    group.add_argument('-p', '--narrative-open', dest='narrative_open', metavar='NO',
                       help='String opening a narrative comment')
    group.add_argument('-c', '--narrative-close', dest='narrative_close', metavar='NC',
                       help='String closing a narrative comment')


def _add_code_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_argument_group('code blocks (either -i, or -P and -C)')
    group.add_argument('-i', '--indent', type=int, metavar='N', help='Indent the code by N spaces')
    group.add_argument('-P', '--code-open', dest='code_open', metavar='CO',
                       help='Line opening a code block, e.g. ```c')
    group.add_argument('-C', '--code-close', dest='code_close', metavar='CC',
                       help='Line closing a code block, e.g. ```')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate source code with narrative comments into Markdown",
        prog="llite"
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    parser.add_argument('--config', default=None, help='Path to an llite.toml configuration file')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set LLITE_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set LLITE_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    translate_parser = subparsers.add_parser('translate', help='Translate a source file into Markdown')
    translate_parser.add_argument('file', help='Input file to process')
    translate_parser.add_argument(
        '-o', '--output', default=None, metavar='FILE',
        help="Defaults to the input file name with .mkd extension; '-' writes to stdout"
    )
    _add_narrative_arguments(translate_parser)
    _add_code_arguments(translate_parser)
    translate_parser.set_defaults(func=cmd_translate)

    check_parser = subparsers.add_parser('check', help='Check narrative comments are balanced')
    check_parser.add_argument('files', nargs='+', help='Files to check')
    _add_narrative_arguments(check_parser)
    check_parser.set_defaults(func=cmd_check)

    inspect_parser = subparsers.add_parser('inspect', help='Print intermediate translation stages')
    inspect_parser.add_argument('file', help='Input file to inspect')
    inspect_parser.add_argument('--stage', choices=STAGES, default='blocks',
                                help='Pipeline stage to print (default: blocks)')
    _add_narrative_arguments(inspect_parser)
    _add_code_arguments(inspect_parser)
    inspect_parser.set_defaults(func=cmd_inspect)

    languages_parser = subparsers.add_parser('languages', help='List language presets')
    languages_parser.set_defaults(func=cmd_languages)

    return parser


def _normalize_legacy_invocation(argv: List[str]) -> List[str]:
    """
    Rewrite ``llite [OPTIONS] FILE [OPTIONS]`` into ``llite translate ...``.

    Global options in front stay ahead of the inserted command. The rewrite
    only happens when no command is given and some non-option argument is
    an existing file.
    """
    index = 0
    while index < len(argv) and argv[index] in _GLOBAL_OPTIONS:
        index += 1 + _GLOBAL_OPTIONS[argv[index]]
    rest = argv[index:]
    if not rest or rest[0] in COMMANDS or rest[0] in ('-h', '--help', '--version'):
        return argv
    if not any(not arg.startswith('-') and Path(arg).is_file() for arg in rest):
        return argv
    print(
        "Note: Using legacy invocation. Consider using 'llite translate' instead.",
        file=sys.stderr
    )
    return argv[:index] + ['translate'] + rest


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['translate', 'intro.fsx', '-l', 'fsharp', '-i', '4'])  # doctest: +SKIP
        ✓ Wrote intro.mkd
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = _normalize_legacy_invocation(list(argv))

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    _configure_logging(args)

    workspace_root = Path.cwd()
    config_path = Path(args.config).resolve() if args.config else None
    try:
        config = load_workspace_config(workspace_root, config_path)
    except ConfigFileError as exc:
        handle_cli_exception(
            CLIConfigError(exc.format(), hint="Fix or remove the configuration file"),
            verbose=args.verbose,
        )
        return

    args.cli_context = CLIContext(
        workspace_root=workspace_root,
        config=config,
        verbose=args.verbose,
    )

    args.func(args)


__all__ = ["main", "build_parser", "COMMANDS"]


if __name__ == '__main__':  # pragma: no cover
    main()
