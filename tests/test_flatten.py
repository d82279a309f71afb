"""Tests for flattening chunks into blocks."""

from __future__ import annotations

import pytest

from llite.errors import InternalInvariantError
from llite.flatten import Block, BlockKind, blockize, flatten, render_blocks
from llite.lexer import Token, TokenType
from llite.parser import Chunk, ChunkKind


def test_blocks_reproduce_source(fsharp_options, round_trip_source: str) -> None:
    blocks = blockize(fsharp_options, round_trip_source)
    assert render_blocks(fsharp_options, blocks) == round_trip_source


def test_one_block_per_chunk(fsharp_options) -> None:
    blocks = blockize(fsharp_options, "before (** inside **) after")

    assert blocks == [
        Block(BlockKind.CODE, "before "),
        Block(BlockKind.NARRATIVE, " inside "),
        Block(BlockKind.CODE, " after"),
    ]


def test_stray_close_in_code_is_written_back(c_options) -> None:
    blocks = blockize(c_options, "int a; **/ int b;")
    assert blocks == [Block(BlockKind.CODE, "int a; **/ int b;")]


def test_empty_narrative_becomes_empty_block(fsharp_options) -> None:
    assert blockize(fsharp_options, "(****)") == [Block(BlockKind.NARRATIVE, "")]


@pytest.mark.parametrize("token_type", [TokenType.OPEN_COMMENT, TokenType.CLOSE_COMMENT])
def test_delimiter_inside_narrative_chunk_is_an_invariant_violation(fsharp_options, token_type) -> None:
    chunk = Chunk(ChunkKind.NARRATIVE, [Token(TokenType.TEXT, 1, "a"), Token(token_type, 7)])

    with pytest.raises(InternalInvariantError) as exc_info:
        flatten(fsharp_options, [chunk])

    assert exc_info.value.line == 7


def test_open_inside_code_chunk_is_an_invariant_violation(fsharp_options) -> None:
    chunk = Chunk(ChunkKind.CODE, [Token(TokenType.OPEN_COMMENT, 3)])

    with pytest.raises(InternalInvariantError) as exc_info:
        flatten(fsharp_options, [chunk], path="x.fsx")

    assert exc_info.value.line == 3
    assert exc_info.value.path == "x.fsx"
    assert exc_info.value.hint
