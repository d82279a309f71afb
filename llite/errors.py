"""Unified error model for llite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorLocation:
    path: Optional[str] = None
    line: Optional[int] = None

    def describe(self) -> str:
        if self.path and self.line is not None:
            return f"{self.path}:{self.line}"
        if self.path:
            return self.path
        if self.line is not None:
            return f"line {self.line}"
        return "unknown location"


class LLiteError(Exception):
    """Base class for all translation errors surfaced to users."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        line: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.location = ErrorLocation(path=path, line=line)
        self.path = path
        self.line = line
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        location_desc = self.location.describe()
        if location_desc != "unknown location":
            meta_parts.append(location_desc)
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class OptionsError(LLiteError):
    """Raised when translator options are inconsistent."""

    code = "INVALID_OPTIONS"


class ConfigFileError(LLiteError):
    """Raised when a workspace configuration file cannot be used."""

    code = "CONFIG_FILE_ERROR"


class NarrativeSyntaxError(LLiteError):
    """Raised when narrative delimiters are not properly balanced."""

    code = "NARRATIVE_SYNTAX_ERROR"


class UnclosedNarrativeError(NarrativeSyntaxError):
    """End of input reached inside a narrative comment."""

    code = "UNCLOSED_NARRATIVE"
    hint = "Add the closing narrative delimiter after the last narrative comment"


class NestedNarrativeError(NarrativeSyntaxError):
    """A narrative comment was opened inside another one."""

    code = "NESTED_NARRATIVE"
    hint = "Narrative comments cannot be nested; close the outer one first"


class StrayNarrativeCloseError(NarrativeSyntaxError):
    """A narrative comment was closed before any was opened."""

    code = "STRAY_NARRATIVE_CLOSE"
    hint = "Remove the closing delimiter or open a narrative comment before it"


class InternalInvariantError(LLiteError):
    """Raised when a pipeline stage receives input a previous stage must not produce."""

    code = "INTERNAL_INVARIANT"
    hint = "This is an internal error - please report it"


__all__ = [
    "ErrorLocation",
    "LLiteError",
    "OptionsError",
    "ConfigFileError",
    "NarrativeSyntaxError",
    "UnclosedNarrativeError",
    "NestedNarrativeError",
    "StrayNarrativeCloseError",
    "InternalInvariantError",
]
