"""Collapse parsed chunks into narrative and code blocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional

from .errors import InternalInvariantError
from .lexer import Token, TokenType, tokenize
from .options import Options
from .parser import Chunk, ChunkKind, parse

logger = logging.getLogger(__name__)


class BlockKind(Enum):
    NARRATIVE = auto()
    CODE = auto()


@dataclass(frozen=True)
class Block:
    """Atomic unit of output: a piece of prose or a piece of code."""

    kind: BlockKind
    text: str

    def with_text(self, text: str) -> "Block":
        return Block(self.kind, text)


def _narrative_token_text(token: Token, path: Optional[str]) -> str:
    if token.type is TokenType.TEXT:
        return token.value
    raise InternalInvariantError(
        f"Narrative delimiter at line {token.line} cannot be nested in a narrative comment",
        path=path,
        line=token.line,
    )


def _code_token_text(options: Options, token: Token, path: Optional[str]) -> str:
    if token.type is TokenType.TEXT:
        return token.value
    if token.type is TokenType.CLOSE_COMMENT:
        return options.end_narrative
    raise InternalInvariantError(
        f"Opening narrative delimiter at line {token.line} cannot be part of code",
        path=path,
        line=token.line,
        hint="Perhaps a string in the code contains an opening narrative delimiter?",
    )


def flatten_chunk(options: Options, chunk: Chunk, *, path: Optional[str] = None) -> Block:
    if chunk.kind is ChunkKind.NARRATIVE:
        text = "".join(_narrative_token_text(token, path) for token in chunk.tokens)
        return Block(BlockKind.NARRATIVE, text)
    text = "".join(_code_token_text(options, token, path) for token in chunk.tokens)
    return Block(BlockKind.CODE, text)


def flatten(options: Options, chunks: Iterable[Chunk], *, path: Optional[str] = None) -> List[Block]:
    """Turn every chunk into one block of the same kind."""
    blocks = [flatten_chunk(options, chunk, path=path) for chunk in chunks]
    logger.debug("Flattened %d blocks", len(blocks))
    return blocks


def blockize(options: Options, source: str, *, path: Optional[str] = None) -> List[Block]:
    """Tokenize, parse and flatten ``source`` in one go."""
    tokens = tokenize(options, source)
    chunks = parse(options, tokens, path=path)
    return flatten(options, chunks, path=path)


def render_blocks(options: Options, blocks: Iterable[Block]) -> str:
    """Rebuild source text from blocks, wrapping narratives in their delimiters."""
    parts: List[str] = []
    for block in blocks:
        if block.kind is BlockKind.NARRATIVE:
            parts.append(f"{options.start_narrative}{block.text}{options.end_narrative}")
        else:
            parts.append(block.text)
    return "".join(parts)


__all__ = ["BlockKind", "Block", "flatten_chunk", "flatten", "blockize", "render_blocks"]
