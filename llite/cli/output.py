"""Console output helpers for CLI commands."""

import sys
from typing import Iterable

from llite.flatten import Block
from llite.lexer import Token
from llite.parser import Chunk


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Wrote intro.mkd")
        ✓ Wrote intro.mkd
    """
    print(f"✓ {message}")


def print_error(message: str) -> None:
    """Print error message with cross prefix to stderr."""
    print(f"✗ {message}", file=sys.stderr)


def print_tokens(tokens: Iterable[Token]) -> None:
    for token in tokens:
        line = f"{token.line:>5}  {token.type.name}"
        if token.value:
            line = f"{line:<20} {token.value!r}"
        print(line)


def print_chunks(chunks: Iterable[Chunk]) -> None:
    for index, chunk in enumerate(chunks):
        first_line = chunk.tokens[0].line if chunk.tokens else "-"
        print(f"[{index}] {chunk.kind.name} (line {first_line}, {len(chunk.tokens)} tokens)")
        for token in chunk.tokens:
            print(f"      {token!r}")


def print_blocks(blocks: Iterable[Block]) -> None:
    for index, block in enumerate(blocks):
        print(f"[{index}] {block.kind.name} {block.text!r}")
