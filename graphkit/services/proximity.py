"""
    Proximity - cost maps, shortest paths and centrality.

    All algorithms work on the cost map produced by :func:`adjacency`, where
    the cost of moving over an edge is ``1 - weight / 2`` (heavier edges are
    cheaper) plus an optional heuristic.
"""
import heapq
import logging
import random
from itertools import count
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

if TYPE_CHECKING:
    from ..models.graph import Graph

logger = logging.getLogger(__name__)

CostMap = Dict[str, Dict[str, float]]
Heuristic = Callable[[str, str], float]


def adjacency(
        graph: 'Graph',
        directed: bool = False,
        reversed: bool = False,
        stochastic: bool = False,
        heuristic: Optional[Heuristic] = None
) -> CostMap:
    """
    An edge cost map indexed by node id's.

    A dictionary indexed by id1 in which each value is a dictionary of
    connected id2's linking to the cost of moving from id1 to id2.

    Args:
        graph:      Graph to map.
        directed:   If True, edges go from node1 to node2 only.
        reversed:   If True, node2 is treated as the source of each edge.
        stochastic: If True, the costs of each row sum to 1.
        heuristic:  Function (id1, id2) -> additional movement cost.
    """
    costs: CostMap = {node_id: {} for node_id in graph.nodes}

    for edge in graph.edges:
        id1, id2 = edge.get_source_target()
        if reversed:
            id1, id2 = id2, id1

        cost = 1.0 - edge.weight * 0.5
        if heuristic:
            cost += heuristic(id1, id2)
        costs[id1][id2] = cost

        if not directed:
            costs[id2][id1] = cost

    if stochastic:
        for id1, row in costs.items():
            total = sum(row.values())
            if total:
                for id2 in row:
                    row[id2] = row[id2] / total

    return costs


def dijkstra_shortest_path(
        graph: 'Graph',
        id1: str,
        id2: str,
        heuristic: Optional[Heuristic] = None,
        directed: bool = False
) -> Optional[List[str]]:
    """
    Dijkstra algorithm for finding the least-cost path between two nodes.

    Returns:
        The list of node ids from id1 to id2 (both included), or None when
        either node is unknown or id2 cannot be reached from id1.
    """
    id1, id2 = str(id1), str(id2)
    if id1 not in graph.nodes or id2 not in graph.nodes:
        return None
    if id1 == id2:
        return [id1]

    costs = adjacency(graph, directed=directed, heuristic=heuristic)

    # Heap of (cost, tie-breaker, node id, path to node); the counter keeps
    # equal-cost entries in insertion order.
    order = count()
    queue = [(0.0, next(order), id1, [id1])]
    visited = set()

    while queue:
        cost, _, v, path = heapq.heappop(queue)
        if v in visited:
            continue
        visited.add(v)

        if v == id2:
            logger.debug("Shortest path %s -> %s: %s (cost %.3f)", id1, id2, path, cost)
            return path

        for w, vw_cost in costs[v].items():
            if w not in visited:
                heapq.heappush(queue, (cost + vw_cost, next(order), w, path + [w]))

    logger.debug("No path from %s to %s", id1, id2)
    return None


def brandes_betweenness_centrality(
        graph: 'Graph',
        normalized: bool = True,
        directed: bool = False
) -> Dict[str, float]:
    """
    Betweenness centrality for nodes in the graph.

    Betweenness centrality measures the number of shortest paths that pass
    through a node.  Nodes in high-density areas get a good score.

    Brandes' algorithm: a Dijkstra expansion from every source counts the
    shortest paths (sigma) and records predecessors, then dependencies
    (delta) are accumulated in reverse finishing order.

    Returns:
        Node id -> score; in [0, 1] when normalized.
    """
    costs = adjacency(graph, directed=directed)
    betweenness: Dict[str, float] = dict.fromkeys(graph.nodes, 0.0)

    for s in graph.nodes:
        stack: List[str] = []
        predecessors: Dict[str, List[str]] = {v: [] for v in graph.nodes}
        sigma: Dict[str, float] = dict.fromkeys(graph.nodes, 0.0)
        sigma[s] = 1.0
        dist: Dict[str, float] = {}
        seen: Dict[str, float] = {s: 0.0}

        order = count()
        queue = [(0.0, next(order), s, s)]
        while queue:
            d, _, pred, v = heapq.heappop(queue)
            if v in dist:
                continue  # already searched this node
            if v != pred:
                sigma[v] += sigma[pred]  # count paths
            stack.append(v)
            dist[v] = d

            for w, vw_cost in costs[v].items():
                vw_dist = d + vw_cost
                if w not in dist and (w not in seen or vw_dist < seen[w]):
                    seen[w] = vw_dist
                    heapq.heappush(queue, (vw_dist, next(order), v, w))
                    sigma[w] = 0.0
                    predecessors[w] = [v]
                elif vw_dist == seen.get(w):  # equal paths
                    sigma[w] += sigma[v]
                    predecessors[w].append(v)

        delta: Dict[str, float] = dict.fromkeys(graph.nodes, 0.0)
        while stack:
            w = stack.pop()
            for v in predecessors[w]:
                delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
            if w != s:
                betweenness[w] += delta[w]

    if normalized:
        # Normalize between 0 and 1.
        m = max(betweenness.values(), default=0.0) or 1.0
        for node_id in betweenness:
            betweenness[node_id] = betweenness[node_id] / m

    logger.debug("Betweenness computed for %d nodes", len(betweenness))
    return betweenness


def _normalize(x: Dict[str, float]) -> None:
    s = sum(x.values())
    if s != 0:
        s = 1.0 / s
    for k in x:
        x[k] = x[k] * s


def eigenvector_centrality(
        graph: 'Graph',
        normalized: bool = True,
        reversed: bool = True,
        rating: Optional[Dict[str, float]] = None,
        start: Optional[Dict[str, float]] = None,
        iterations: int = 100,
        tolerance: float = 0.0001
) -> Dict[str, float]:
    """
    Eigenvector centrality for nodes in the graph (like Google's PageRank).

    Eigenvector centrality measures the importance of a node in a directed
    network.  It rewards nodes with a high potential of (indirectly)
    connecting to high-scoring nodes.  With ``reversed`` (the default) a
    node scores through its incoming edges, and nodes without incoming
    edges score zero; pass ``reversed=False`` to measure outgoing edges.

    The eigenvector is found by power iteration, which has no guarantee of
    convergence.  When the iteration budget runs out a warning is logged
    and every node scores 0.

    Args:
        rating:     Node id -> importance multiplier (default 1).
        start:      Node id -> starting value; random when omitted.
        iterations: Maximum number of power iterations.
        tolerance:  Per-node convergence tolerance.
    """
    if not graph.nodes:
        return {}
    rating = rating or {}
    n_nodes = len(graph.nodes)
    costs = adjacency(graph, directed=True, reversed=reversed)

    if start is None:
        x = {node_id: random.random() for node_id in graph.nodes}
    else:
        x = {node_id: float(start.get(node_id, 0.0)) for node_id in graph.nodes}
    _normalize(x)

    # Power method: y = Ax multiplication.
    for i in range(iterations):
        x0 = x
        x = dict.fromkeys(x0, 0.0)
        for n in x:
            r = rating.get(n, 1.0)
            for nbr, cost in costs[n].items():
                x[n] += 0.01 + x0[nbr] * cost * r
        _normalize(x)

        e = sum(abs(x[n] - x0[n]) for n in x)
        if e < n_nodes * tolerance:
            logger.debug("Eigenvector centrality converged after %d iterations", i + 1)
            if normalized:
                # Normalize between 0 and 1.
                m = max(x.values(), default=0.0) or 1.0
                x = {n: v / m for n, v in x.items()}
            return x

    logger.warning("Node weight is 0 because eigenvector_centrality() "
                   "did not converge in %d iterations.", iterations)
    return dict.fromkeys(graph.nodes, 0.0)
