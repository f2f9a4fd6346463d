# tests/conftest.py
"""
Shared test fixtures.
Stub graph: social network with 15 nodes and 25 edges, contains cycles.
Small shapes (path, star, triangles) for targeted algorithm tests.
"""
import pytest

from graphkit import Graph, GraphConfig, SpringConfig


# ── Node definitions: id, label, category (city) ─────────────────
_NODES = [
    ("n1",  "Alice",  "Paris"),
    ("n2",  "Bob",    "London"),
    ("n3",  "Carol",  "Paris"),
    ("n4",  "David",  "Berlin"),
    ("n5",  "Eve",    "Pancevo"),
    ("n6",  "Frank",  "Rome"),
    ("n7",  "Grace",  "Berlin"),
    ("n8",  "Hank",   "London"),
    ("n9",  "Iris",   "Paris"),
    ("n10", "Jack",   "Rome"),
    ("n11", "Karen",  "Pancevo"),
    ("n12", "Leo",    "Berlin"),
    ("n13", "Mia",    "London"),
    ("n14", "Nathan", "Paris"),
    ("n15", "Olivia", "Pancevo"),
]

# ── Edge definitions: node1, node2, weight, label ────────────────
_EDGES = [
    ("n1",  "n2",  0.9,  "friend"),
    ("n1",  "n3",  0.7,  "colleague"),
    ("n2",  "n4",  0.8,  "friend"),
    ("n3",  "n5",  0.6,  "mentor"),
    ("n4",  "n6",  0.5,  "colleague"),
    ("n5",  "n7",  0.95, "friend"),
    ("n6",  "n8",  0.4,  "friend"),
    ("n7",  "n9",  0.85, "mentor"),
    ("n8",  "n10", 0.3,  "colleague"),
    ("n9",  "n11", 0.75, "friend"),
    ("n10", "n12", 1.0,  "family"),
    ("n11", "n13", 0.65, "friend"),
    ("n12", "n14", 0.55, "colleague"),
    ("n13", "n15", 0.7,  "friend"),
    ("n14", "n1",  0.9,  "family"),
    ("n2",  "n7",  0.6,  "colleague"),
    ("n3",  "n8",  0.8,  "friend"),
    ("n4",  "n9",  0.7,  "mentor"),
    ("n5",  "n10", 0.45, "colleague"),
    ("n6",  "n11", 0.6,  "friend"),
    ("n7",  "n12", 0.5,  "colleague"),
    ("n8",  "n13", 0.75, "friend"),
    ("n9",  "n14", 0.55, "mentor"),
    ("n10", "n15", 0.65, "friend"),
    # Cycle: n15 - n1 (closes the loop back to Alice)
    ("n15", "n1",  0.8,  "friend"),
]


def _build_graph(graph_id: str = "stub_social") -> Graph:
    g = Graph(graph_id)

    for node_id, label, city in _NODES:
        g.add_node(node_id, label=label, category=city)

    for id1, id2, weight, label in _EDGES:
        g.add_edge(id1, id2, weight=weight, label=label)

    return g


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def stub_graph() -> Graph:
    """Full stub graph: 15 nodes, 25 edges."""
    return _build_graph()


@pytest.fixture
def path_graph() -> Graph:
    """
    Unweighted path:

        A -- B -- C -- D
    """
    g = Graph("path")
    g.add_edge("A", "B")
    g.add_edge("B", "C")
    g.add_edge("C", "D")
    return g


@pytest.fixture
def star_graph() -> Graph:
    """Hub with five leaves, every edge pointing from the leaf into the hub."""
    g = Graph("star")
    g.add_node("hub")
    for i in range(5):
        g.add_edge(f"leaf{i}", "hub")
    return g


@pytest.fixture
def two_triangles() -> Graph:
    """Two disjoint triangles: a-b-c and x-y-z."""
    g = Graph("triangles")
    for id1, id2 in [("a", "b"), ("b", "c"), ("c", "a"),
                     ("x", "y"), ("y", "z"), ("z", "x")]:
        g.add_edge(id1, id2)
    return g


@pytest.fixture
def seeded_config() -> GraphConfig:
    """Short, reproducible spring layout."""
    return GraphConfig(iterations=50, spring=SpringConfig(seed=7))
