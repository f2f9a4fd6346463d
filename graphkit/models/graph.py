"""
    Graph model - complete graph model.

    Owns nodes, edges and adjacency, and is the entry point for traversal,
    shortest paths, centrality, set algebra and layout.
"""
import logging
from copy import deepcopy
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from ..config import GraphConfig
from ..layout import Bounds, Layout, create_layout
from ..services import cluster, proximity, traversal
from .edge import Edge
from .node import Node

logger = logging.getLogger(__name__)


class Graph:
    """
        Class for graph representation.

        Nodes are stored by id; edges are kept in insertion order and
        indexed from both endpoints in the adjacency map, which holds at
        most one edge per unordered pair of nodes.  Edge direction
        (node1 -> node2) is only used by directed traversal and directed
        cost maps.
    """

    def __init__(self, graph_id: str = "graph", config: Optional[GraphConfig] = None):
        """
        Initialize a graph.
        Args:
            graph_id: Identifier of the graph
            config: Layout and node defaults (``GraphConfig()`` when omitted)
        """
        self.graph_id = graph_id
        self.config = config or GraphConfig()
        self.nodes: Dict[str, Node] = {}  # node_id -> Node
        self.edges: List[Edge] = []
        self._adjacency: Dict[str, Dict[str, Edge]] = {}  # node_id -> {neighbor_id: Edge}
        self.root: Optional[str] = None

        self.layout: Layout = create_layout(
            self.config.layout,
            self,
            self.config.iterations,
            self._layout_config(self.config.layout),
        )
        # Style table for the rendering layer: style name -> properties.
        self.styles: Dict[str, Dict[str, Any]] = {"default": {}}

        # Fade-in accumulator and screen offset, updated by update()/center().
        self.alpha = 0.0
        self.x = 0.0
        self.y = 0.0

    def _layout_config(self, name: str) -> Any:
        return deepcopy(getattr(self.config, name, None))

    # ── Distance (layout space -> screen space) ──────────────────

    @property
    def d(self) -> float:
        return self.config.node_radius * 2.5 * self.config.distance

    @property
    def distance(self) -> float:
        return self.config.distance

    @distance.setter
    def distance(self, value: float) -> None:
        self.config.distance = value

    # ── Nodes ────────────────────────────────────────────────────

    def add_node(
            self,
            node_id: Any,
            radius: Optional[float] = None,
            style: Optional[str] = None,
            category: Optional[str] = None,
            label: Optional[str] = None,
            root: bool = False
    ) -> Node:
        """
        Add node from id and return the node object.
        If the id already exists, the existing node is returned unchanged.
        """
        node_id = str(node_id)
        if node_id in self.nodes:
            return self.nodes[node_id]

        node = Node(
            node_id,
            radius=self.config.node_radius if radius is None else radius,
            style=style or "default",
            category=category or "",
            label=label,
        )
        self.nodes[node_id] = node
        self._adjacency[node_id] = {}
        if root:
            self.root = node_id

        self._invalidate()
        return node

    def add_nodes(self, node_ids: Iterable[Any]) -> None:
        """Add nodes from a list of id's."""
        for node_id in node_ids:
            self.add_node(node_id)

    def import_node(self, node: Node, root: bool = False) -> Node:
        """
        Add a copy of a node from another graph: attributes and position.
        Like ``add_node``, an existing id is returned unchanged.
        """
        if node.id in self.nodes:
            return self.nodes[node.id]
        n = self.add_node(node.id, radius=node.radius, style=node.style,
                          category=node.category, label=node.label, root=root)
        n.vx = node.vx
        n.vy = node.vy
        return n

    def remove_node(self, node_id: Any) -> None:
        """Remove a node and all connected edges."""
        node_id = str(node_id)
        if node_id not in self.nodes:
            return

        # Detach from every neighbor's adjacency
        for neighbor_id in self._adjacency.pop(node_id):
            self._adjacency[neighbor_id].pop(node_id, None)

        self.edges = [e for e in self.edges if node_id not in (e.node1, e.node2)]
        del self.nodes[node_id]
        if self.root == node_id:
            self.root = None

        self._invalidate()

    def node(self, node_id: Any) -> Optional[Node]:
        """Returns the node with the given id, or None."""
        return self.nodes.get(str(node_id))

    def get_all_nodes(self) -> List[Node]:
        return list(self.nodes.values())

    # ── Edges ────────────────────────────────────────────────────

    def add_edge(
            self,
            id1: Any,
            id2: Any,
            weight: float = 0.0,
            length: float = 1.0,
            label: str = ""
    ) -> Optional[Edge]:
        """
        Add weighted (0.0-1.0) edge between nodes, creating them if necessary.
        The weight represents the importance of the connection (not the cost).

        Returns:
            The new edge; the existing edge if the two nodes are already
            connected (in either direction); None for a self-loop.
        """
        id1, id2 = str(id1), str(id2)
        if id1 == id2:
            return None

        self.add_node(id1)
        self.add_node(id2)

        existing = self._adjacency[id1].get(id2)
        if existing is not None:
            return existing

        edge = Edge(id1, id2, weight=weight, length=length, label=label)
        self.edges.append(edge)
        self._adjacency[id1][id2] = edge
        self._adjacency[id2][id1] = edge

        self._invalidate()
        return edge

    def remove_edge(self, id1: Any, id2: Any) -> None:
        """Remove edges between nodes with given id's."""
        id1, id2 = str(id1), str(id2)
        if self.edge(id1, id2) is None:
            return

        self.edges = [e for e in self.edges if not e.connects_nodes(id1, id2)]
        self._adjacency[id1].pop(id2, None)
        self._adjacency[id2].pop(id1, None)

        self._invalidate()

    def edge(self, id1: Any, id2: Any) -> Optional[Edge]:
        """Returns the edge between the nodes with given id1 and id2, or None."""
        return self._adjacency.get(str(id1), {}).get(str(id2))

    def get_all_edges(self) -> List[Edge]:
        return list(self.edges)

    # ── Adjacency queries ────────────────────────────────────────

    def links(self, node_id: Any) -> Dict[str, Edge]:
        """Neighbor id -> connecting edge, in the order the links were made."""
        return dict(self._adjacency.get(str(node_id), {}))

    def neighbors(self, node_id: Any) -> List[Node]:
        """Get all neighboring nodes"""
        return [self.nodes[n] for n in self._adjacency.get(str(node_id), {})]

    def is_leaf(self, node_id: Any) -> bool:
        return len(self._adjacency.get(str(node_id), {})) == 1

    def leaves(self) -> List[Node]:
        """Returns a list of nodes that have only one connection."""
        return [n for n in self.nodes.values() if self.is_leaf(n.id)]

    def fringe(self, depth: int = 2) -> List[Node]:
        """Returns a list of leaves, nodes connected to leaves, etc."""
        nodes: List[Node] = []
        for leaf in self.leaves():
            nodes.extend(cluster.flatten(self, leaf, depth - 1))
        return cluster.unique(nodes)

    def nodes_by_category(self, category: str) -> List[Node]:
        """Returns nodes with the given category attribute."""
        return [n for n in self.nodes.values() if n.category == category]

    def prune(self, depth: int = 0) -> None:
        """Removes all nodes with less or equal links than depth."""
        for node_id in [n for n, links in self._adjacency.items() if len(links) <= depth]:
            self.remove_node(node_id)

    def can_reach(self, id1: Any, id2: Any, directed: bool = False) -> bool:
        """
        Returns True if the node with id2 can be reached from id1.
        With ``directed``, edges are only followed from node1 to node2.
        """
        return traversal.can_reach(self, id1, id2, traversal.directed if directed else None)

    # ── Whole-graph lifecycle ────────────────────────────────────

    def copy(self, empty: bool = False) -> 'Graph':
        """
        Create an independent copy of the graph (by default with nodes and edges).
        With ``empty``, only the configuration, layout and styles are copied.
        """
        g = Graph(self.graph_id, deepcopy(self.config))
        g.layout = self.layout.copy(g)
        g.styles = deepcopy(self.styles)

        if not empty:
            for n in self.nodes.values():
                g.import_node(n, root=(n.id == self.root))
            for e in self.edges:
                g.add_edge(e.node1, e.node2, weight=e.weight, length=e.length, label=e.label)

        return g

    def clear(self) -> None:
        """Remove nodes and edges and reset the layout."""
        self.nodes = {}
        self.edges = []
        self._adjacency = {}
        self.root = None

        self.layout.reset()
        self.alpha = 0.0
        logger.info("Graph %s cleared.", self.graph_id)

    def _invalidate(self) -> None:
        """Structure changed: cached centrality scores are stale."""
        for node in self.nodes.values():
            node.invalidate()

    # ── Proximity ────────────────────────────────────────────────

    def shortest_path(self, id1: Any, id2: Any,
                      heuristic: Optional[Callable[[str, str], float]] = None,
                      directed: bool = False) -> Optional[List[str]]:
        """Returns a list of node id's connecting the two nodes, or None."""
        return proximity.dijkstra_shortest_path(self, id1, id2, heuristic, directed)

    def betweenness_centrality(self, normalized: bool = True, directed: bool = False) -> Dict[str, float]:
        """
        Calculates betweenness centrality and returns a node id -> weight dictionary.
        Node betweenness weights are updated in the process.
        """
        bc = proximity.brandes_betweenness_centrality(self, normalized, directed)
        for node_id, score in bc.items():
            self.nodes[node_id].betweenness = score
        return bc

    def eigenvector_centrality(
            self,
            normalized: bool = True,
            reversed: bool = True,
            rating: Optional[Dict[str, float]] = None,
            start: Optional[Dict[str, float]] = None,
            iterations: int = 100,
            tolerance: float = 0.0001
    ) -> Dict[str, float]:
        """
        Calculates eigenvector centrality and returns a node id -> weight dictionary.
        Node eigenvalue weights are updated in the process.
        """
        ec = proximity.eigenvector_centrality(
            self, normalized, reversed, rating, start, iterations, tolerance
        )
        for node_id, score in ec.items():
            self.nodes[node_id].eigenvalue = score
        return ec

    def node_betweenness(self, node_id: Any) -> Optional[float]:
        """Cached betweenness of a node, computed on first access."""
        node = self.node(node_id)
        if node is None:
            return None
        if node.betweenness is None:
            self.betweenness_centrality()
        return node.betweenness

    def node_eigenvalue(self, node_id: Any) -> Optional[float]:
        """Cached eigenvalue of a node, computed on first access."""
        node = self.node(node_id)
        if node is None:
            return None
        if node.eigenvalue is None:
            self.eigenvector_centrality()
        return node.eigenvalue

    def nodes_by_betweenness(self, threshold: float = 0.0) -> List[Node]:
        """
        Returns nodes sorted by betweenness centrality.
        Nodes with a lot of passing traffic will be at the front of the list.
        """
        scored = [(n, self.node_betweenness(n.id)) for n in self.nodes.values()]
        scored = [(n, s) for n, s in scored if s > threshold]
        scored.sort(key=lambda item: item[1], reverse=True)
        return [n for n, _ in scored]

    nodes_by_traffic = nodes_by_betweenness

    def nodes_by_eigenvalue(self, threshold: float = 0.0) -> List[Node]:
        """
        Returns nodes sorted by eigenvector centrality.
        Nodes with a lot of incoming traffic will be at the front of the list.
        """
        scored = [(n, self.node_eigenvalue(n.id)) for n in self.nodes.values()]
        scored = [(n, s) for n, s in scored if s > threshold]
        scored.sort(key=lambda item: item[1], reverse=True)
        return [n for n, _ in scored]

    nodes_by_weight = nodes_by_eigenvalue

    # ── Density ──────────────────────────────────────────────────

    @property
    def density(self) -> float:
        """The number of edges in relation to the total number of possible edges."""
        n = len(self.nodes)
        if n < 2:
            return 0.0
        return 2.0 * len(self.edges) / (n * (n - 1))

    def is_complete(self) -> bool:
        return self.density == 1.0

    def is_dense(self) -> bool:
        return self.density > 0.65

    def is_sparse(self) -> bool:
        return self.density < 0.35

    # ── Cluster ──────────────────────────────────────────────────

    def flatten(self, node_id: Any, distance: int = 1) -> List[Node]:
        return cluster.flatten(self, node_id, distance)

    def subgraph(self, ids: Any, distance: int = 1) -> 'Graph':
        """Subgraph of the given id(s) or predicate, flattened to ``distance``."""
        return cluster.subgraph(self, ids, distance)

    def is_clique(self) -> bool:
        return cluster.is_clique(self)

    def clique(self, node_id: Any, distance: int = 0) -> 'Graph':
        return cluster.subgraph(self, cluster.clique(self, node_id), distance)

    def cliques(self, threshold: int = 3, distance: int = 0) -> List['Graph']:
        return [cluster.subgraph(self, ids, distance) for ids in cluster.cliques(self, threshold)]

    def split(self) -> List['Graph']:
        """Splits the graph into its connected components, biggest first."""
        return cluster.partition(self)

    def join(self, graph: 'Graph') -> 'Graph':
        """A copy of this graph with the nodes and edges of the other graph added."""
        g = self.copy()
        for n in graph.nodes.values():
            g.import_node(n, root=(g.root is None and n.id == graph.root))
        for e in graph.edges:
            g.add_edge(e.node1, e.node2, weight=e.weight, length=e.length, label=e.label)
        return g

    def intersect(self, graph: 'Graph') -> 'Graph':
        """Nodes (and edges between them) present in both graphs."""
        ids = cluster.intersection(list(self.nodes), list(graph.nodes))
        return cluster.subgraph(self.join(graph), ids, 0)

    def subtract(self, graph: 'Graph') -> 'Graph':
        """Nodes (and edges between them) present in this graph but not the other."""
        ids = cluster.difference(list(self.nodes), list(graph.nodes))
        return cluster.subgraph(self.join(graph), ids, 0)

    __or__ = join
    __and__ = intersect
    __sub__ = subtract

    # ── Layout ───────────────────────────────────────────────────

    def prepare(self) -> None:
        self.layout.prepare()

    def iterate(self) -> bool:
        return self.layout.iterate()

    def solve(self) -> None:
        """Iterates the graph layout until done."""
        self.layout.solve()
        self.alpha = 1.0

    def is_done(self) -> bool:
        return self.layout.is_done()

    def bounds(self) -> Bounds:
        return self.layout.bounds()

    def update(self, iterations: int = 10) -> bool:
        """
        Advance the layout by one frame.

        The graph fades in when initially constructed.  The first frame
        prepares the layout, the second takes one step, and later frames
        take more and more steps (at most ``iterations``) as the layout
        progresses.

        Returns:
            True while the layout is not done.
        """
        self.alpha = min(self.alpha + 0.05, 1.0)

        if self.layout.i == 0:
            self.layout.prepare()
            self.layout.i += 1
        elif self.layout.i == 1:
            self.layout.iterate()
        elif self.layout.i < self.layout.n:
            steps = min(iterations, self.layout.i // 10 + 1)
            for _ in range(steps):
                self.layout.iterate()

        return not self.layout.is_done()

    def center(self, width: float, height: float) -> Tuple[float, float]:
        """Set and return the offset that centers the graph in a width x height area."""
        b = self.bounds()
        self.x = (width - b.max_x * self.d - b.min_x * self.d) / 2
        self.y = (height - b.max_y * self.d - b.min_y * self.d) / 2
        return self.x, self.y

    def position(self, node_id: Any) -> Optional[Tuple[float, float]]:
        """Absolute position of a node: layout position scaled by ``d`` plus offset."""
        node = self.node(node_id)
        if node is None:
            return None
        return self.x + node.vx * self.d, self.y + node.vy * self.d

    # ── Container protocol ───────────────────────────────────────

    def get_number_of_nodes(self) -> int:
        return len(self.nodes)

    def get_number_of_edges(self) -> int:
        return len(self.edges)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: Any) -> bool:
        if isinstance(node_id, Node):
            node_id = node_id.id
        return str(node_id) in self.nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self.nodes.values()))

    def __repr__(self) -> str:
        return f"Graph({self.graph_id}, nodes={len(self.nodes)}, edges={len(self.edges)})"
