# archgraph/diagrams/c4.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..c4_fmt import c4_call, c4_str
from ..constants import C4_HEADER
from ..errors import ElementNotFoundError
from ..model import Element, ElementType, Relation
from ..model_view import display_name
from ..resolve import resolve

# Container-like types and the suffix appended to the `Container` macro.
CONTAINER_SUFFIX: dict[ElementType, str] = {
    ElementType.APPLICATION: "",
    ElementType.DATABASE: "Db",
    ElementType.QUEUE: "Queue",
}

SYSTEM_TYPES: frozenset[ElementType] = frozenset(
    {
        ElementType.ORGANISATION,
        ElementType.DEPARTMENT,
        ElementType.DOMAIN,
        ElementType.TEAM,
        ElementType.SERVICE,
    }
)

# Every element type must be rendered by exactly one branch of render_element().
if set(ElementType) != SYSTEM_TYPES | set(CONTAINER_SUFFIX) or SYSTEM_TYPES & set(CONTAINER_SUFFIX):
    raise RuntimeError("each ElementType must map to exactly one C4 macro")


@dataclass(frozen=True)
class C4RenderConfig:
    """Render options for the focal-element context diagram.

    include_elements: also declare the focal element and every element linked
    to it, before the relations. The default output holds relations only.
    """

    include_elements: bool = False


def container_technology(element: Element) -> str:
    """`technology/deployment`, or whichever of the two is set, or ""."""
    tech = element.technology or ""
    deployment = element.deployment or ""
    if tech and deployment:
        return f"{tech}/{deployment}"
    return deployment or tech


def render_element(element: Element) -> str:
    if element.type in CONTAINER_SUFFIX:
        return c4_call(
            "Container" + CONTAINER_SUFFIX[element.type],
            element.id,
            c4_str(display_name(element)),
            c4_str(container_technology(element)),
            c4_str(element.description),
        )
    return c4_call(
        "System",
        element.id,
        c4_str(display_name(element)),
        c4_str(element.description),
    )


def render_relation(link: Relation) -> str:
    return c4_call(
        "Rel",
        link.source,
        link.target,
        c4_str(link.description),
        c4_str(link.technology),
    )


def links_for(links: Sequence[Relation], identifier: str) -> list[Relation]:
    """Relations starting or ending at `identifier`, in input order."""
    return [link for link in links if link.touches(identifier)]


def _require(nodes: Sequence[Element], identifier: str, *, context: str) -> Element:
    element: Optional[Element] = resolve(nodes, identifier)
    if element is None:
        raise ElementNotFoundError(identifier, context=context)
    return element


def gen_c4_context(
    nodes: Sequence[Element],
    links: Sequence[Relation],
    focal_id: str,
    *,
    cfg: C4RenderConfig = C4RenderConfig(),
) -> str:
    """Generate a Mermaid C4 *Context* diagram around one focal element.

    Only relations touching `focal_id` are rendered, in input order.
    """
    focal = _require(nodes, focal_id, context="element")

    selected = links_for(links, focal_id)

    linked: list[Element] = []
    seen: set[str] = {focal.id}
    for link in selected:
        for endpoint in (link.source, link.target):
            element = _require(nodes, endpoint, context="linked element")
            if element.id not in seen:
                seen.add(element.id)
                linked.append(element)

    lines: list[str] = [C4_HEADER]
    if cfg.include_elements:
        lines.append(render_element(focal))
        lines.extend(render_element(e) for e in linked)

    lines.extend(render_relation(link) for link in selected)
    return "\n".join(lines)
