# archgraph/resolve.py
from __future__ import annotations

from typing import Optional, Sequence

from .ids import child_id
from .model import Element


def _find(nodes: Sequence[Element], candidate: str) -> Optional[Element]:
    for node in nodes:
        if node.id == candidate:
            return node
    return None


def resolve(nodes: Sequence[Element], identifier: str) -> Optional[Element]:
    """Find the element with `identifier` by descending one id segment at a time.

    Returns None when any segment is missing. Never raises.
    """
    current: Sequence[Element] = nodes
    prefix = ""
    while True:
        if prefix:
            if not identifier.startswith(prefix + "."):
                return None
            remainder = identifier[len(prefix) + 1:]
        else:
            remainder = identifier

        candidate = child_id(prefix, remainder.split(".", 1)[0])
        match = _find(current, candidate)
        if match is None:
            return None
        if candidate == identifier:
            return match

        current = match.nodes
        prefix = candidate
