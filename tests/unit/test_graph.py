import pytest

from archgraph import (
    C4RenderConfig,
    DanglingReferenceError,
    DuplicateIdentifierError,
    ElementNotFoundError,
    Graph,
    InvalidIdentifierSyntaxError,
    SchemaValidationError,
)
from archgraph.ids import sanitize
from archgraph.schema import validate

SHOP = {
    "nodes": [
        {
            "name": "Shop",
            "type": "application",
            "nodes": [{"name": "Cart API", "type": "service"}],
        }
    ]
}


def with_links(*links):
    return {**SHOP, "links": list(links)}


def test_ids_derived_from_names():
    graph = Graph(SHOP)
    assert [e.id for e in graph.iter_elements()] == ["Shop", "Shop.CartAPI"]


def test_every_id_is_sanitized_name_under_parent():
    raw = {
        "nodes": [
            {
                "name": "Acme Corp.",
                "type": "organisation",
                "nodes": [
                    {
                        "name": "R&D",
                        "type": "department",
                        "nodes": [{"name": "Team (Core)", "type": "team"}],
                    }
                ],
            }
        ]
    }
    graph = Graph(raw)

    def walk(nodes, parent_id):
        for node in nodes:
            assert node.id
            expected = sanitize(node.name)
            if parent_id:
                expected = f"{parent_id}.{expected}"
            assert node.id == expected
            walk(node.nodes, node.id)

    walk(graph.nodes, "")
    assert graph.get_node_by_id("AcmeCorp.RD.TeamCore").name == "Team (Core)"


def test_graph_does_not_mutate_raw_input():
    raw = {"nodes": [{"name": "Shop", "type": "team", "id": "keep.me"}]}
    Graph(raw)
    assert raw["nodes"][0]["id"] == "keep.me"


def test_resolver_round_trip_through_graph():
    graph = Graph(SHOP)
    for element in graph.iter_elements():
        assert graph.get_node_by_id(element.id) is element


def test_links_resolve_after_construction():
    graph = Graph(with_links({"from": "Shop", "to": "Shop.CartAPI"}))
    for link in graph.links:
        assert graph.get_node_by_id(link.source) is not None
        assert graph.get_node_by_id(link.target) is not None


def test_c4_diagram_for_focal_element():
    graph = Graph(with_links({"from": "Shop", "to": "Shop.CartAPI"}))
    out = graph.c4_diagram("Shop")

    assert out.splitlines()[0] == "C4Context"
    assert 'Rel(Shop,Shop.CartAPI,"undefined","undefined")' in out.splitlines()


def test_c4_diagram_with_elements():
    graph = Graph(with_links({"from": "Shop", "to": "Shop.CartAPI", "technology": "HTTP"}))
    out = graph.c4_diagram("Shop.CartAPI", C4RenderConfig(include_elements=True))
    assert out.splitlines() == [
        "C4Context",
        'System(Shop.CartAPI,"Cart API","undefined")',
        'Container(Shop,"Shop","","undefined")',
        'Rel(Shop,Shop.CartAPI,"undefined","HTTP")',
    ]


def test_c4_diagram_unknown_element():
    graph = Graph(SHOP)
    with pytest.raises(ElementNotFoundError):
        graph.c4_diagram("Warehouse")


def test_dangling_link_fails_construction():
    with pytest.raises(DanglingReferenceError) as exc_info:
        Graph(with_links({"from": "Shop", "to": "Shop.Unknown"}))
    assert exc_info.value.identifier == "Shop.Unknown"
    assert "Shop.Unknown" in str(exc_info.value)


def test_link_by_human_name_fails_syntax_check():
    with pytest.raises(InvalidIdentifierSyntaxError):
        Graph(with_links({"from": "Shop", "to": "Shop.Cart API"}))


def test_sibling_collision_fails_construction():
    raw = {
        "nodes": [
            {"name": "Cart API", "type": "service"},
            {"name": "CartAPI", "type": "service"},
        ]
    }
    with pytest.raises(DuplicateIdentifierError):
        Graph(raw)


def test_schema_errors_surface_from_constructor():
    with pytest.raises(SchemaValidationError):
        Graph({"nodes": [{"name": "Shop"}]})


def test_links_for_preserves_input_order():
    graph = Graph(
        with_links(
            {"from": "Shop.CartAPI", "to": "Shop", "description": "first"},
            {"from": "Shop.CartAPI", "to": "Shop.CartAPI", "description": "skip"},
            {"from": "Shop", "to": "Shop.CartAPI", "description": "second"},
        )
    )
    assert [link.description for link in graph.links_for("Shop")] == ["first", "second"]


def test_graph_accepts_validated_value():
    raw = with_links({"from": "Shop", "to": "Shop.CartAPI"})
    assert Graph(validate(raw)).nodes == Graph(raw).nodes


def test_non_breaking_space_in_name_yields_linkable_id():
    raw = {
        "nodes": [
            {
                "name": "Shop",
                "type": "application",
                "nodes": [{"name": "Cart\u00a0API", "type": "service"}],
            }
        ],
        "links": [{"from": "Shop", "to": "Shop.CartAPI"}],
    }
    graph = Graph(raw)
    assert graph.get_node_by_id("Shop.CartAPI").name == "Cart\u00a0API"
