"""Narrative delimiter presets for common languages.

A preset maps a language name to the pair of delimiters that open and
close a narrative comment in that language. Workspace configuration may
add or override presets (see :mod:`llite.config`).
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional


@dataclass(frozen=True)
class LanguageSymbols:
    language: str
    start: str
    end: str


BUILTIN_LANGUAGES: Dict[str, LanguageSymbols] = {
    "fsharp": LanguageSymbols("fsharp", "(**", "**)"),
    "c": LanguageSymbols("c", "/**", "**/"),
    "csharp": LanguageSymbols("csharp", "/**", "**/"),
    "java": LanguageSymbols("java", "/**", "**/"),
}


def language_table(extra: Optional[Mapping[str, LanguageSymbols]] = None) -> Dict[str, LanguageSymbols]:
    """Built-in presets updated with ``extra`` (later entries win)."""
    table = dict(BUILTIN_LANGUAGES)
    if extra:
        table.update(extra)
    return table


def find_language(
    name: str, extra: Optional[Mapping[str, LanguageSymbols]] = None
) -> Optional[LanguageSymbols]:
    """Look up a preset by exact name."""
    return language_table(extra).get(name)


def supported_languages(extra: Optional[Mapping[str, LanguageSymbols]] = None) -> List[str]:
    return sorted(language_table(extra))


def suggest_language(
    unknown: str, extra: Optional[Mapping[str, LanguageSymbols]] = None
) -> Optional[str]:
    """
    Suggest the closest known language for a misspelled name.

    Examples:
        >>> suggest_language('fsharpp')
        'fsharp'
        >>> suggest_language('cobol') is None
        True
    """
    candidates = supported_languages(extra)
    lowered = unknown.lower()
    if lowered in candidates:
        return lowered
    close_matches = difflib.get_close_matches(lowered, candidates, n=1, cutoff=0.6)
    return close_matches[0] if close_matches else None


def describe_languages(extra: Optional[Mapping[str, LanguageSymbols]] = None) -> str:
    """One line per preset: name and its delimiters."""
    table = language_table(extra)
    width = max(len(name) for name in table)
    lines = []
    for name in sorted(table):
        symbols = table[name]
        lines.append(f"{name.ljust(width)}  {symbols.start} ... {symbols.end}")
    return "\n".join(lines)


__all__ = [
    "LanguageSymbols",
    "BUILTIN_LANGUAGES",
    "language_table",
    "find_language",
    "supported_languages",
    "suggest_language",
    "describe_languages",
]
