"""Lexical analyzer (tokenizer) for narrative comments.

Splits source text into opening delimiters, closing delimiters and the
text runs between them. Delimiters are matched literally; the lexer has no
knowledge of the host language and never fails.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List

from .options import Options

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types produced by the lexer."""

    OPEN_COMMENT = auto()
    CLOSE_COMMENT = auto()
    TEXT = auto()


@dataclass(frozen=True)
class Token:
    """A single token with the line on which it starts.

    ``value`` holds the text of ``TEXT`` tokens and is empty for delimiters.
    """

    type: TokenType
    line: int
    value: str = ""

    def __repr__(self) -> str:
        if self.type is TokenType.TEXT:
            return f"Token({self.type.name}, {self.value!r}, {self.line})"
        return f"Token({self.type.name}, {self.line})"


class Lexer:
    """Left-to-right scanner over a source string."""

    def __init__(self, source: str, options: Options):
        self.source = source
        self.start = options.start_narrative
        self.end = options.end_narrative
        self.pos = 0
        self.line = 1
        self.tokens: List[Token] = []

    def tokenize(self) -> List[Token]:
        """Tokenize the whole source."""
        while self.pos < len(self.source):
            if self.source.startswith(self.start, self.pos):
                self.tokens.append(Token(TokenType.OPEN_COMMENT, self.line))
                self.pos += len(self.start)
            elif self.source.startswith(self.end, self.pos):
                self.tokens.append(Token(TokenType.CLOSE_COMMENT, self.line))
                self.pos += len(self.end)
            else:
                self.read_text()

        logger.debug("Tokenized %d characters into %d tokens", len(self.source), len(self.tokens))
        return self.tokens

    def read_text(self) -> None:
        """Consume a maximal run of text up to the next delimiter."""
        stop = self._next_delimiter(self.pos + 1)
        text = self.source[self.pos:stop]
        self.tokens.append(Token(TokenType.TEXT, self.line, text))
        self.line += text.count("\n")
        self.pos = stop

    def _next_delimiter(self, offset: int) -> int:
        candidates = [
            found
            for found in (self.source.find(self.start, offset), self.source.find(self.end, offset))
            if found != -1
        ]
        return min(candidates) if candidates else len(self.source)


def tokenize(options: Options, source: str) -> List[Token]:
    """
    Tokenize ``source`` into narrative delimiters and text runs.

    Args:
        options: Translator options holding the narrative delimiters
        source: Source text to scan

    Returns:
        Ordered list of tokens

    Example:
        ```python
        opts = Options("(**", "**)", Indented(4))
        [t.type.name for t in tokenize(opts, "a (** b **)")]
        # ['TEXT', 'OPEN_COMMENT', 'TEXT', 'CLOSE_COMMENT']
        ```
    """
    return Lexer(source, options).tokenize()


def render_tokens(options: Options, tokens: Iterable[Token]) -> str:
    """Rebuild source text from tokens, writing delimiters back literally."""
    parts: List[str] = []
    for token in tokens:
        parts.append(render_token(options, token))
    return "".join(parts)


def render_token(options: Options, token: Token) -> str:
    if token.type is TokenType.OPEN_COMMENT:
        return options.start_narrative
    if token.type is TokenType.CLOSE_COMMENT:
        return options.end_narrative
    return token.value


__all__ = ["TokenType", "Token", "Lexer", "tokenize", "render_tokens", "render_token"]
