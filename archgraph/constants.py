# archgraph/constants.py
from __future__ import annotations

# Removed from element names when deriving identifiers: any Unicode whitespace
# plus the punctuation below.
ID_STRIP_PATTERN: str = r"[\s.,!?/\\:;*$%#\"'&()=]+"

# Relation endpoints: dot-separated, non-empty alphanumeric segments.
ID_PATTERN: str = r"^[a-zA-Z0-9]+(\.[a-zA-Z0-9]+)*$"

C4_HEADER = "C4Context"

# Rendered in place of an absent description/technology.
MISSING_TEXT = "undefined"

# Top-level lists concatenated across the parts of a split model directory.
MERGED_SECTIONS: tuple[str, ...] = ("nodes", "links")

MODEL_SUFFIXES: tuple[str, ...] = (".yaml", ".yml")

MARKDOWN_TITLE_DEFAULT = "Context: {focal_id}"
