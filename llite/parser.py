"""Recursive descent parser grouping tokens into narrative and code chunks.

Grammar::

    document  := (narrative | code)*
    narrative := OPEN_COMMENT TEXT* CLOSE_COMMENT
    code      := TEXT (TEXT | CLOSE_COMMENT)*

A closing delimiter inside code is kept and later written back verbatim.
A closing delimiter before any code, nested opening delimiters and
unterminated narratives are errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from .errors import (
    NestedNarrativeError,
    StrayNarrativeCloseError,
    UnclosedNarrativeError,
)
from .lexer import Token, TokenType
from .options import Options

logger = logging.getLogger(__name__)


class ChunkKind(Enum):
    NARRATIVE = auto()
    CODE = auto()


@dataclass(frozen=True)
class Chunk:
    """A run of tokens belonging to one narrative comment or one code region."""

    kind: ChunkKind
    tokens: List[Token] = field(default_factory=list)


class NarrativeParser:
    """Parser over a token list with a single token of lookahead."""

    def __init__(self, tokens: List[Token], *, path: Optional[str] = None):
        self.tokens = tokens
        self.path = path
        self.pos = 0

    # ====================================================================
    # Token Management
    # ====================================================================

    def current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Token:
        token = self.current()
        if token is None:
            raise UnclosedNarrativeError("Unexpected end of input", path=self.path)
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        token = self.current()
        return token is not None and token.type in types

    # ====================================================================
    # Grammar
    # ====================================================================

    def parse(self) -> List[Chunk]:
        """Parse all tokens into an ordered list of chunks."""
        chunks: List[Chunk] = []
        while self.current() is not None:
            token = self.current()
            if token.type is TokenType.OPEN_COMMENT:
                chunks.append(self.parse_narrative())
            elif token.type is TokenType.CLOSE_COMMENT:
                raise StrayNarrativeCloseError(
                    f"Closing narrative delimiter at line {token.line} has no matching opening delimiter",
                    path=self.path,
                    line=token.line,
                )
            else:
                chunks.append(self.parse_code())

        logger.debug("Parsed %d tokens into %d chunks", len(self.tokens), len(chunks))
        return chunks

    def parse_narrative(self) -> Chunk:
        opening = self.advance()
        body: List[Token] = []
        while True:
            token = self.current()
            if token is None:
                raise UnclosedNarrativeError(
                    f"Narrative comment opened at line {opening.line} is never closed",
                    path=self.path,
                    line=opening.line,
                )
            if token.type is TokenType.OPEN_COMMENT:
                raise NestedNarrativeError(
                    f"Narrative comment opened at line {token.line} inside the narrative "
                    f"comment opened at line {opening.line}",
                    path=self.path,
                    line=token.line,
                )
            self.advance()
            if token.type is TokenType.CLOSE_COMMENT:
                return Chunk(ChunkKind.NARRATIVE, body)
            body.append(token)

    def parse_code(self) -> Chunk:
        body = [self.advance()]
        while self.match(TokenType.TEXT, TokenType.CLOSE_COMMENT):
            body.append(self.advance())
        return Chunk(ChunkKind.CODE, body)


def parse(options: Options, tokens: List[Token], *, path: Optional[str] = None) -> List[Chunk]:
    """
    Group ``tokens`` into narrative and code chunks.

    Args:
        options: Translator options (kept for a uniform stage signature)
        tokens: Output of :func:`llite.lexer.tokenize`
        path: Optional file path for error reporting

    Returns:
        Chunks in source order

    Raises:
        UnclosedNarrativeError: If input ends inside a narrative comment
        NestedNarrativeError: If a narrative comment is opened inside another
        StrayNarrativeCloseError: If a closing delimiter appears before any code
    """
    return NarrativeParser(tokens, path=path).parse()


__all__ = ["ChunkKind", "Chunk", "NarrativeParser", "parse"]
