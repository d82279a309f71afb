"""Post-processing phases applied to the flattened block list.

Phases run in a fixed order:

1. ``remove_empty_blocks`` drops blocks made only of whitespace
2. ``merge_blocks`` joins neighbouring blocks of the same kind
3. ``add_code_tags`` lays out code and narrative for Markdown
"""

from __future__ import annotations

import logging
from typing import Callable, List, Sequence

from .errors import InternalInvariantError
from .flatten import Block, BlockKind
from .options import Indented, Options, Surrounded

logger = logging.getLogger(__name__)

# str.isspace() also accepts Unicode spaces; only ASCII whitespace counts here.
ASCII_WHITESPACE = " \t\n\r\f\v"

Phase = Callable[[Options, List[Block]], List[Block]]


def is_blank(text: str) -> bool:
    """True when ``text`` is empty or made only of ASCII whitespace."""
    return not text.strip(ASCII_WHITESPACE)


def remove_empty_blocks(options: Options, blocks: Sequence[Block]) -> List[Block]:
    return [block for block in blocks if not is_blank(block.text)]


def merge_blocks(options: Options, blocks: Sequence[Block]) -> List[Block]:
    """Join each run of same-kind blocks with newlines."""
    merged: List[Block] = []
    for block in blocks:
        if merged and merged[-1].kind is block.kind:
            merged[-1] = merged[-1].with_text(f"{merged[-1].text}\n{block.text}")
        else:
            merged.append(block)
    return merged


def indent(n: int, text: str) -> str:
    """Prefix every line of ``text`` with ``n`` spaces."""
    padding = " " * n
    return padding + text.replace("\n", "\n" + padding)


def _indent_block(style: Indented, block: Block) -> Block:
    if block.kind is BlockKind.CODE:
        return block.with_text(indent(style.n, block.text))
    return block


def _surround_block(style: Surrounded, block: Block) -> Block:
    body = block.text.strip(ASCII_WHITESPACE)
    if block.kind is BlockKind.CODE:
        return block.with_text(f"\n{style.start}\n{body}\n{style.end}\n")
    return block.with_text(f"\n{body}\n")


def add_code_tags(options: Options, blocks: Sequence[Block]) -> List[Block]:
    style = options.code_style
    if isinstance(style, Indented):
        return [_indent_block(style, block) for block in blocks]
    if isinstance(style, Surrounded):
        return [_surround_block(style, block) for block in blocks]
    raise InternalInvariantError(f"Unknown code style {type(style).__name__}")


PHASES: List[Phase] = [
    remove_empty_blocks,
    merge_blocks,
    add_code_tags,
]


def process_phases(options: Options, blocks: Sequence[Block]) -> List[Block]:
    """Run every phase in order and return the final block list."""
    result = list(blocks)
    for phase in PHASES:
        result = phase(options, result)
        logger.debug("Phase %s left %d blocks", phase.__name__, len(result))
    return result


__all__ = [
    "ASCII_WHITESPACE",
    "PHASES",
    "is_blank",
    "remove_empty_blocks",
    "merge_blocks",
    "indent",
    "add_code_tags",
    "process_phases",
]
