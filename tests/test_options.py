"""Tests for translator options validation."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from llite.errors import LLiteError, OptionsError
from llite.options import Indented, Options, Surrounded


def test_options_are_immutable(fsharp_options) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        fsharp_options.start_narrative = "/**"


def test_indented_defaults_to_four() -> None:
    assert Indented().n == 4


@pytest.mark.parametrize("n", [0, -2])
def test_indented_rejects_non_positive(n: int) -> None:
    with pytest.raises(OptionsError) as excinfo:
        Indented(n)
    assert excinfo.value.code == "INVALID_OPTIONS"


@pytest.mark.parametrize("n", ["4", 2.5, True])
def test_indented_rejects_non_integers(n) -> None:
    with pytest.raises(OptionsError):
        Indented(n)


def test_surrounded_requires_strings() -> None:
    with pytest.raises(OptionsError):
        Surrounded("```", None)


def test_surrounded_accepts_empty_strings() -> None:
    assert Surrounded("", "").start == ""


@pytest.mark.parametrize(
    "start, end",
    [
        ("", "**)"),
        ("(**", ""),
        ("(**", "(**"),
    ],
)
def test_options_reject_bad_delimiters(start: str, end: str) -> None:
    with pytest.raises(OptionsError) as excinfo:
        Options(start, end, Indented())
    assert isinstance(excinfo.value, LLiteError)
    assert excinfo.value.hint


def test_options_reject_unknown_code_style() -> None:
    with pytest.raises(OptionsError):
        Options("(**", "**)", "fenced")


def test_overlapping_delimiters_log_a_warning(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("llite"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="llite.options"):
        Options("**", "**)", Indented(2))

    assert "overlap" in caplog.text


def test_distinct_delimiters_do_not_warn(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("llite"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="llite.options"):
        Options("(**", "**)", Indented(2))

    assert caplog.records == []
