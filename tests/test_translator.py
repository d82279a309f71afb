"""End-to-end tests for translate()."""

from __future__ import annotations

import pytest

from llite import translate
from llite.errors import (
    LLiteError,
    NarrativeSyntaxError,
    NestedNarrativeError,
    StrayNarrativeCloseError,
    UnclosedNarrativeError,
)
from llite.flatten import Block, BlockKind
from llite.translator import UTF8_BOM, stringify, strip_bom


@pytest.mark.parametrize(
    "source, expected",
    [
        (" bb ", "\n````fsharp\nbb\n````\n"),
        ("(** bb **)", "\nbb\n"),
        ("bb (** aa **)", "\n````fsharp\nbb\n````\n\naa\n"),
        ("(**abc**)(**def**)", "\nabc\ndef\n"),
        ("(**  **) aa", "\n````fsharp\naa\n````\n"),
    ],
)
def test_translate_surrounded(fsharp_options, source: str, expected: str) -> None:
    assert translate(fsharp_options, source) == expected


def test_translate_indented(indented_options) -> None:
    result = translate(indented_options, "code1\n(** note **)\ncode2")

    assert result == "    code1\n     note     \n    code2"


def test_translate_indented_code_lines_gain_indent(indented_options) -> None:
    result = translate(indented_options, "let a = 1\nlet b = 2")
    assert result == "    let a = 1\n    let b = 2"


def test_translate_empty_source(fsharp_options) -> None:
    assert translate(fsharp_options, "") == ""


def test_translate_whitespace_only_source(fsharp_options) -> None:
    assert translate(fsharp_options, " \n\t\r\n ") == ""


def test_translate_literate_document(fsharp_options) -> None:
    source = (
        "(**\n"
        "Introduction\n"
        "============\n"
        "**)\n"
        "let x = 1\n"
        "\n"
        "(** Some more prose. **)\n"
        "let y = x + 1\n"
    )

    assert translate(fsharp_options, source) == (
        "\nIntroduction\n============\n"
        "\n````fsharp\nlet x = 1\n````\n"
        "\nSome more prose.\n"
        "\n````fsharp\nlet y = x + 1\n````\n"
    )


def test_translate_keeps_stray_close_in_code(fsharp_options) -> None:
    result = translate(fsharp_options, "let x = 1 **) 2")
    assert result == "\n````fsharp\nlet x = 1 **) 2\n````\n"


def test_translate_passes_non_ascii_through(c_options) -> None:
    result = translate(c_options, "/** Überblick **/ int größe;")
    assert result == "\nÜberblick\n\n```c\nint größe;\n```\n"


@pytest.mark.parametrize(
    "source, error, line",
    [
        ("(** foo", UnclosedNarrativeError, 1),
        ("code\n\n(** foo\n", UnclosedNarrativeError, 3),
        ("(** (** x **) **)", NestedNarrativeError, 1),
        ("**)", StrayNarrativeCloseError, 1),
    ],
)
def test_translate_errors(fsharp_options, source: str, error: type, line: int) -> None:
    with pytest.raises(error) as excinfo:
        translate(fsharp_options, source)

    assert isinstance(excinfo.value, NarrativeSyntaxError)
    assert isinstance(excinfo.value, LLiteError)
    assert excinfo.value.line == line


def test_translate_error_carries_path(fsharp_options) -> None:
    with pytest.raises(UnclosedNarrativeError) as excinfo:
        translate(fsharp_options, "x\n(** open", path="docs/intro.fsx")

    formatted = excinfo.value.format()
    assert "docs/intro.fsx:2" in formatted
    assert "UNCLOSED_NARRATIVE" in formatted
    assert "Hint:" in formatted


def test_stringify_concatenates_in_order() -> None:
    blocks = [Block(BlockKind.NARRATIVE, "\nintro\n"), Block(BlockKind.CODE, "\n```\nx\n```\n")]
    assert stringify(blocks) == "\nintro\n\n```\nx\n```\n"


def test_stringify_empty() -> None:
    assert stringify([]) == ""


def test_strip_bom() -> None:
    assert strip_bom(UTF8_BOM + "(** a **)") == "(** a **)"
    assert strip_bom("(** a **)") == "(** a **)"
    assert strip_bom("a" + UTF8_BOM) == "a" + UTF8_BOM


def test_stringify_keeps_leading_indent() -> None:
    assert stringify([Block(BlockKind.CODE, "    x = 1")]) == "    x = 1"
