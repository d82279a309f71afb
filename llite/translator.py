"""Translation entry point tying the pipeline together."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .flatten import Block, blockize
from .options import Options
from .phases import process_phases

logger = logging.getLogger(__name__)

UTF8_BOM = "\ufeff"


def stringify(blocks: Iterable[Block]) -> str:
    """
    Concatenate block texts in order.

    Leading whitespace is kept: a surrounded document starts with the
    newline written by the code tags, an indented one with the indent
    of its first code line.
    """
    # Not stripped: " bb " must become "\n````fsharp\nbb\n````\n", newline first.
    return "".join(block.text for block in blocks)


def strip_bom(source: str) -> str:
    """Remove a UTF-8 byte order mark decoded as the first character."""
    return source[1:] if source.startswith(UTF8_BOM) else source


def translate(options: Options, source: str, *, path: Optional[str] = None) -> str:
    """
    Translate a literate source file into Markdown.

    Narrative comments become prose and everything else becomes code
    blocks laid out according to ``options.code_style``.

    Args:
        options: Delimiters and code style
        source: Full source text
        path: Optional file path attached to diagnostics

    Returns:
        The translated document

    Raises:
        NarrativeSyntaxError: If narrative delimiters are unbalanced
        InternalInvariantError: If a pipeline stage breaks its contract

    Example:
        ```python
        options = Options("(**", "**)", Surrounded("````fsharp", "````"))
        translate(options, "bb (** aa **)")
        # '\\n````fsharp\\nbb\\n````\\n\\naa\\n'
        ```
    """
    blocks = blockize(options, source, path=path)
    blocks = process_phases(options, blocks)
    output = stringify(blocks)
    logger.debug("Translated %s: %d blocks, %d characters", path or "<string>", len(blocks), len(output))
    return output


__all__ = ["translate", "stringify", "strip_bom", "UTF8_BOM"]
