# archgraph/model.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ElementType(str, Enum):
    ORGANISATION = "organisation"
    DEPARTMENT = "department"
    DOMAIN = "domain"
    TEAM = "team"
    SERVICE = "service"
    APPLICATION = "application"
    DATABASE = "database"
    QUEUE = "queue"


@dataclass(frozen=True)
class Element:
    """A node of the containment tree.

    `id` is empty until the element has passed through `ids.assign_ids()`;
    identifiers supplied by the input are never kept.
    """

    name: str
    type: ElementType
    description: Optional[str] = None
    technology: Optional[str] = None
    deployment: Optional[str] = None
    nodes: tuple[Element, ...] = ()
    id: str = ""


@dataclass(frozen=True)
class Relation:
    """Directed edge between two element ids (`from` -> `to` in the input)."""

    source: str
    target: str
    description: Optional[str] = None
    technology: Optional[str] = None

    def touches(self, identifier: str) -> bool:
        return identifier in (self.source, self.target)


@dataclass(frozen=True)
class GraphValue:
    """Typed input returned by `schema.validate()`."""

    nodes: tuple[Element, ...]
    links: tuple[Relation, ...] = field(default_factory=tuple)
