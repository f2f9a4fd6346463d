"""
    Depth-first reachability search over a Graph.

    The visited set is local to each search, so two unrelated searches on the
    same graph never see each other's markers and no reset is needed between
    calls.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, Iterator, List, Optional, Set, Tuple

from ..models.edge import Edge
from ..models.node import Node
from .exceptions import TraversalError

if TYPE_CHECKING:
    from ..models.graph import Graph

logger = logging.getLogger(__name__)

Visit = Callable[[Node], bool]
Traversable = Callable[[Node, Edge], bool]


def directed(node: Node, edge: Edge) -> bool:
    """Traversable that only follows an edge from its first endpoint."""
    return node.id == edge.node1


def _resolve_root(graph: 'Graph', root: Any) -> Node:
    if root is None:
        raise TraversalError("depth_first_search requires a root node.")
    node_id = root.id if isinstance(root, Node) else str(root)
    node = graph.node(node_id)
    if node is None:
        raise TraversalError(f"Root node {node_id} not in graph")
    return node


def depth_first_search(
        graph: 'Graph',
        root: Any,
        visit: Optional[Visit] = None,
        traversable: Optional[Traversable] = None
) -> bool:
    """
    Simple, multi-purpose depth-first search.

    Visits all the nodes connected to the root, depth-first.
    The visit function is called on each node; when it returns True the
    search stops and ``depth_first_search`` returns True.
    The traversable function takes the current node and the connecting edge
    and returns True if the search may follow that edge to the next node.
    For directed edges use :func:`directed`.

    Args:
        graph:       Graph to search.
        root:        Node (or node id) the search starts from.
        visit:       Stop condition, called once per reached node.
        traversable: Edge filter, called with (current node, edge).

    Returns:
        True if ``visit`` returned True for some reachable node.

    Raises:
        TraversalError: If root is missing or not in the graph.
    """
    start = _resolve_root(graph, root)
    visit = visit or (lambda node: False)
    traversable = traversable or (lambda node, edge: True)
    visited: Set[str] = set()

    if visit(start):
        return True
    visited.add(start.id)

    # Stack of (node, its remaining links); the top is the node being expanded.
    stack: List[Tuple[Node, Iterator[Tuple[str, Edge]]]] = [
        (start, iter(graph.links(start.id).items()))
    ]
    while stack:
        node, links = stack[-1]
        for neighbor_id, edge in links:
            if not traversable(node, edge) or neighbor_id in visited:
                continue
            neighbor = graph.nodes[neighbor_id]
            if visit(neighbor):
                return True
            visited.add(neighbor_id)
            stack.append((neighbor, iter(graph.links(neighbor_id).items())))
            break
        else:
            stack.pop()
    return False


def can_reach(
        graph: 'Graph',
        source: Any,
        target: Any,
        traversable: Optional[Traversable] = None
) -> bool:
    """Return True if target can be reached from source over traversable edges."""
    target_id = target.id if isinstance(target, Node) else str(target)
    reached = depth_first_search(
        graph,
        source,
        visit=lambda node: node.id == target_id,
        traversable=traversable,
    )
    logger.debug("can_reach %s -> %s: %s", source, target_id, reached)
    return reached
