# archgraph/graph.py
from __future__ import annotations

from typing import Any, Iterator, Optional

from . import schema
from .diagrams.c4 import C4RenderConfig, gen_c4_context, links_for
from .ids import assign_ids, check_identifiers
from .links import validate_links
from .model import Element, GraphValue, Relation
from .model_view import iter_elements
from .resolve import resolve


class Graph:
    """Architecture graph: an element containment forest plus relations.

    Construction validates the raw value, assigns ids and checks every
    relation endpoint; any violation raises a `GraphError` subclass. The
    resulting object is not modified afterwards.
    """

    def __init__(self, raw: Any) -> None:
        value = raw if isinstance(raw, GraphValue) else schema.validate(raw)

        nodes = assign_ids(value.nodes)
        check_identifiers(nodes)
        validate_links(nodes, value.links)

        self.nodes: tuple[Element, ...] = nodes
        self.links: tuple[Relation, ...] = tuple(value.links)

    def get_node_by_id(self, identifier: str) -> Optional[Element]:
        return resolve(self.nodes, identifier)

    def links_for(self, identifier: str) -> list[Relation]:
        return links_for(self.links, identifier)

    def iter_elements(self) -> Iterator[Element]:
        return iter_elements(self.nodes)

    def c4_diagram(self, identifier: str, cfg: C4RenderConfig = C4RenderConfig()) -> str:
        return gen_c4_context(self.nodes, self.links, identifier, cfg=cfg)
