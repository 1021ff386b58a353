# archgraph/c4_fmt.py
from __future__ import annotations

import re
from typing import Optional

from .constants import MISSING_TEXT

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def mermaid_block(code: str) -> str:
    """Wrap Mermaid source in a Markdown Mermaid code fence."""
    return "```mermaid\n" + code.rstrip() + "\n```\n"


def c4_text(text: str) -> str:
    """Make text safe inside a quoted C4 macro argument.

    Only a double quote or a line break would end the argument early; all
    other characters are kept as written.
    """
    return _LINE_BREAK_RE.sub(" ", str(text)).replace('"', "#quot;")


def c4_str(text: Optional[str]) -> str:
    """Quote a macro argument; None renders as the literal `undefined`."""
    if text is None:
        return f'"{MISSING_TEXT}"'
    return f'"{c4_text(text)}"'


def c4_call(macro: str, alias: str, *args: str) -> str:
    return f"{macro}({','.join((alias,) + args)})"
