# archgraph/model_view.py
from __future__ import annotations

from typing import Iterable, Iterator

from .model import Element


def iter_elements(nodes: Iterable[Element]) -> Iterator[Element]:
    """Yield every element of the forest, depth-first, parents before children."""
    for node in nodes:
        yield node
        yield from iter_elements(node.nodes)


def display_name(element: Element) -> str:
    """Human label for an element, falling back to the last id segment."""
    if element.name:
        return element.name
    return element.id.split(".")[-1]
