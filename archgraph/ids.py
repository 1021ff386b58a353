# archgraph/ids.py
from __future__ import annotations

import dataclasses
import re
from typing import Iterable

from .constants import ID_PATTERN, ID_STRIP_PATTERN
from .errors import DuplicateIdentifierError, EmptyIdentifierError
from .model import Element

ID_RE = re.compile(ID_PATTERN)

_STRIP_RE = re.compile(ID_STRIP_PATTERN)


def sanitize(name: str) -> str:
    """Drop whitespace and punctuation from a human name ("Cart API" -> "CartAPI").

    Every run of stripped characters is removed, not only the first one.
    """
    return _STRIP_RE.sub("", name)


def is_valid_identifier(value: str) -> bool:
    return ID_RE.fullmatch(value) is not None


def child_id(namespace: str, segment: str) -> str:
    return f"{namespace}.{segment}" if namespace else segment


def assign_ids(nodes: Iterable[Element], namespace: str = "") -> tuple[Element, ...]:
    """Return copies of `nodes` (recursively) carrying their qualified ids."""
    out: list[Element] = []
    for node in nodes:
        node_id = child_id(namespace, sanitize(node.name))
        out.append(
            dataclasses.replace(
                node,
                id=node_id,
                nodes=assign_ids(node.nodes, node_id),
            )
        )
    return tuple(out)


def check_identifiers(nodes: Iterable[Element], namespace: str = "") -> None:
    """Reject empty ids and sibling collisions in an id-assigned tree."""
    seen: dict[str, Element] = {}
    for node in nodes:
        if not sanitize(node.name):
            raise EmptyIdentifierError(node.name, namespace)
        if node.id in seen:
            raise DuplicateIdentifierError(node.id, (seen[node.id].name, node.name))
        seen[node.id] = node
        check_identifiers(node.nodes, node.id)
