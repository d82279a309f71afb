"""Shared pytest fixtures for llite tests."""

import pytest

from llite.options import Indented, Options, Surrounded


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "cli: mark test as exercising the command line interface")


@pytest.fixture
def fsharp_options():
    """F# delimiters with fenced code blocks."""
    return Options("(**", "**)", Surrounded("````fsharp", "````"))


@pytest.fixture
def indented_options():
    """F# delimiters with code indented by four spaces."""
    return Options("(**", "**)", Indented(4))


@pytest.fixture
def c_options():
    return Options("/**", "**/", Surrounded("```c", "```"))


# Sources used by the round-trip tests of several stages
ROUND_TRIP_SOURCES = [
    "before (** inside **) after",
    "(** aaf  faf **)(** afaf **)",
    "",
    "(****)",
    "fafdaf",
    "afadf afafa (** afaf **)",
    "let x = 1 **) stray close in code",
    "line 1\nline 2\n(** note\nspanning lines **)\ncode ünïcödé\n",
]


@pytest.fixture(params=ROUND_TRIP_SOURCES)
def round_trip_source(request):
    return request.param
