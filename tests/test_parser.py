"""Tests for grouping tokens into narrative and code chunks."""

from __future__ import annotations

import pytest

from llite.errors import (
    NarrativeSyntaxError,
    NestedNarrativeError,
    StrayNarrativeCloseError,
    UnclosedNarrativeError,
)
from llite.lexer import Token, TokenType, render_tokens, tokenize
from llite.parser import Chunk, ChunkKind, parse


def parse_source(options, source: str, path: str = None):
    return parse(options, tokenize(options, source), path=path)


def render_chunks(options, chunks) -> str:
    parts = []
    for chunk in chunks:
        text = render_tokens(options, chunk.tokens)
        if chunk.kind is ChunkKind.NARRATIVE:
            text = f"{options.start_narrative}{text}{options.end_narrative}"
        parts.append(text)
    return "".join(parts)


def test_chunks_reproduce_source(fsharp_options, round_trip_source: str) -> None:
    chunks = parse_source(fsharp_options, round_trip_source)
    assert render_chunks(fsharp_options, chunks) == round_trip_source


def test_chunks_keep_source_order(fsharp_options) -> None:
    chunks = parse_source(fsharp_options, "code (** one **) more (** two **)")

    assert [chunk.kind for chunk in chunks] == [
        ChunkKind.CODE,
        ChunkKind.NARRATIVE,
        ChunkKind.CODE,
        ChunkKind.NARRATIVE,
    ]
    assert chunks[1].tokens == [Token(TokenType.TEXT, 1, " one ")]


def test_empty_narrative_has_no_tokens(fsharp_options) -> None:
    assert parse_source(fsharp_options, "(****)") == [Chunk(ChunkKind.NARRATIVE, [])]


def test_empty_source_has_no_chunks(fsharp_options) -> None:
    assert parse_source(fsharp_options, "") == []


def test_close_inside_code_is_kept(fsharp_options) -> None:
    chunks = parse_source(fsharp_options, "a **) b")

    assert len(chunks) == 1
    assert chunks[0].kind is ChunkKind.CODE
    assert [token.type for token in chunks[0].tokens] == [
        TokenType.TEXT,
        TokenType.CLOSE_COMMENT,
        TokenType.TEXT,
    ]


def test_unclosed_narrative(fsharp_options) -> None:
    with pytest.raises(UnclosedNarrativeError) as exc_info:
        parse_source(fsharp_options, "code\n(** foo")

    assert exc_info.value.line == 2
    assert exc_info.value.code == "UNCLOSED_NARRATIVE"


def test_nested_narrative(fsharp_options) -> None:
    with pytest.raises(NestedNarrativeError) as exc_info:
        parse_source(fsharp_options, "(** (** x **) **)")

    assert exc_info.value.line == 1


def test_nested_narrative_reports_inner_line(fsharp_options) -> None:
    with pytest.raises(NestedNarrativeError) as exc_info:
        parse_source(fsharp_options, "(** outer\n\n(** inner **)")

    assert exc_info.value.line == 3


def test_stray_close_at_start(fsharp_options) -> None:
    with pytest.raises(StrayNarrativeCloseError) as exc_info:
        parse_source(fsharp_options, "**)")

    assert exc_info.value.line == 1


def test_close_right_after_narrative_is_stray(fsharp_options) -> None:
    with pytest.raises(StrayNarrativeCloseError):
        parse_source(fsharp_options, "(** a **)**)")


@pytest.mark.parametrize(
    "source",
    ["(** foo", "(** (** x **) **)", "**)", "x (** y"],
)
def test_structural_errors_share_a_base_class(fsharp_options, source: str) -> None:
    with pytest.raises(NarrativeSyntaxError):
        parse_source(fsharp_options, source)


def test_errors_carry_the_path(fsharp_options) -> None:
    with pytest.raises(UnclosedNarrativeError) as exc_info:
        parse_source(fsharp_options, "(** foo", path="notes.fsx")

    assert exc_info.value.path == "notes.fsx"
    assert "notes.fsx:1" in exc_info.value.format()
    assert "UNCLOSED_NARRATIVE" in exc_info.value.format()
