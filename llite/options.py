"""Translator options: narrative delimiters and how code blocks are emitted."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from .errors import OptionsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Indented:
    """Emit code blocks indented by ``n`` spaces."""

    n: int = 4

    def __post_init__(self) -> None:
        if not isinstance(self.n, int) or isinstance(self.n, bool):
            raise OptionsError(f"Indentation must be an integer, got {type(self.n).__name__}")
        if self.n < 1:
            raise OptionsError(
                f"Indentation must be at least 1, got {self.n}",
                hint="Use a positive number of spaces",
            )


@dataclass(frozen=True)
class Surrounded:
    """Emit code blocks between a start and an end line (e.g. a code fence)."""

    start: str
    end: str

    def __post_init__(self) -> None:
        for label, value in (("start", self.start), ("end", self.end)):
            if not isinstance(value, str):
                raise OptionsError(
                    f"Code {label} string must be a str, got {type(value).__name__}"
                )


CodeStyle = Union[Indented, Surrounded]


@dataclass(frozen=True)
class Options:
    """
    Immutable configuration for a single translation.

    Attributes:
        start_narrative: Delimiter opening a narrative comment
        end_narrative: Delimiter closing a narrative comment
        code_style: ``Indented`` or ``Surrounded``
    """

    start_narrative: str
    end_narrative: str
    code_style: CodeStyle

    def __post_init__(self) -> None:
        if not self.start_narrative or not self.end_narrative:
            raise OptionsError(
                "Narrative delimiters cannot be empty",
                hint="Pick a language preset or pass both narrative delimiters",
            )
        if self.start_narrative == self.end_narrative:
            raise OptionsError(
                f"Opening and closing narrative delimiters are both {self.start_narrative!r}",
                hint="Use two different delimiters",
            )
        if not isinstance(self.code_style, (Indented, Surrounded)):
            raise OptionsError(
                f"Unsupported code style {type(self.code_style).__name__}"
            )
        if self.end_narrative.startswith(self.start_narrative) or self.start_narrative.startswith(
            self.end_narrative
        ):
            # The lexer matches the opening delimiter first.
            logger.warning(
                "Narrative delimiters %r and %r overlap; the opening delimiter always wins",
                self.start_narrative,
                self.end_narrative,
            )


__all__ = ["Options", "Indented", "Surrounded", "CodeStyle"]
