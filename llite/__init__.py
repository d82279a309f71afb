"""
llite: a literate programming translator.

Source files keep their prose inside *narrative comments*, delimited by
a configurable pair of strings such as ``(**`` and ``**)``. llite turns
such a file into a Markdown document where the narrative becomes plain
prose and everything else becomes a code block, either indented or
surrounded by fence lines.

The code is organised into several modules:

* ``lexer`` – splits the source into delimiters and text runs.
* ``parser`` – groups tokens into narrative and code chunks and rejects
  unbalanced delimiters.
* ``flatten`` – collapses chunks into blocks of text.
* ``phases`` – cleans, merges and lays out blocks for Markdown.
* ``translator`` – the ``translate`` entry point.
* ``cli`` – the ``llite`` command line tool, with language presets from
  ``languages`` and workspace settings from ``config``.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata

from .errors import (
    ConfigFileError,
    InternalInvariantError,
    LLiteError,
    NarrativeSyntaxError,
    NestedNarrativeError,
    OptionsError,
    StrayNarrativeCloseError,
    UnclosedNarrativeError,
)
from .options import Indented, Options, Surrounded
from .translator import translate


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata fallback for editable installs
    __version__ = _metadata.version("llite")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"

__all__ = [
    "__version__",
    "translate",
    "Options",
    "Indented",
    "Surrounded",
    "LLiteError",
    "OptionsError",
    "NarrativeSyntaxError",
    "UnclosedNarrativeError",
    "NestedNarrativeError",
    "StrayNarrativeCloseError",
    "ConfigFileError",
    "InternalInvariantError",
]
