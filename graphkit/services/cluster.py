"""
    Cluster - set algebra over node neighborhoods and subgraph extraction.

    Sequences handled here are plain lists of ids or Nodes; since a Node
    compares equal to its id, the two can be mixed freely.
"""
import logging
from typing import TYPE_CHECKING, Any, Callable, Iterable, List, Optional, Sequence

from ..models.node import Node

if TYPE_CHECKING:
    from ..models.graph import Graph

logger = logging.getLogger(__name__)


def unique(items: Iterable[Any]) -> List[Any]:
    """Returns a copy of the list without duplicates, keeping first occurrences."""
    return list(dict.fromkeys(items))


def flatten(graph: 'Graph', node: Optional[Any] = None, distance: int = 1) -> List[Node]:
    """
    Recursively lists the node and its links.

    Distance of 0 will return the given [node].
    Distance of 1 will return a list of the node and all its links.
    Distance of 2 will also include the linked nodes' links, etc.
    Without a node, all the nodes in the graph are returned.
    """
    if node is None:
        return list(graph.nodes.values())

    node_id = node.id if isinstance(node, Node) else str(node)
    start = graph.node(node_id)
    if start is None:
        return []

    flattened = [start]
    if distance >= 1:
        for neighbor_id in graph.links(node_id):
            flattened.extend(flatten(graph, neighbor_id, distance - 1))
    return unique(flattened)


def intersection(a: Sequence[Any], b: Sequence[Any]) -> List[Any]:
    """a & b -> elements that appear in a as well as in b."""
    b = set(b)
    return unique(x for x in a if x in b)


def union(a: Sequence[Any], b: Sequence[Any]) -> List[Any]:
    """a | b -> all elements from a and all the elements from b."""
    return unique(list(a) + list(b))


def difference(a: Sequence[Any], b: Sequence[Any]) -> List[Any]:
    """a - b -> elements that appear in a but not in b."""
    b = set(b)
    return unique(x for x in a if x not in b)


def _selected_ids(graph: 'Graph', ids: Any) -> List[str]:
    """Resolve an id, a Node, a list of either, or a predicate into node ids."""
    if isinstance(ids, (str, Node)):
        ids = [ids]
    elif callable(ids):
        # A function returning True or False for each node in the graph.
        predicate: Callable[[Node], bool] = ids
        ids = [node for node in graph.nodes.values() if predicate(node)]
    return [x.id if isinstance(x, Node) else str(x) for x in ids]


def subgraph(graph: 'Graph', ids: Any, distance: int = 1) -> 'Graph':
    """
    Creates the subgraph of the flattened node with given id (or list of id's).

    Every selected node is flattened to the given distance; the resulting
    nodes are copied into a new graph (which carries the source graph's
    configuration), followed by all the edges between them.

    Args:
        graph:    Source graph.
        ids:      A node id, a Node, an iterable of either, or a predicate
                  called with each node of the graph.
        distance: Neighborhood depth added around each selected node.
    """
    g = graph.copy(empty=True)

    for node_id in _selected_ids(graph, ids):
        for n in flatten(graph, node_id, distance):
            g.import_node(n, root=(n.id == graph.root))

    for e in graph.edges:
        if e.node1 in g.nodes and e.node2 in g.nodes:
            g.add_edge(e.node1, e.node2, weight=e.weight, length=e.length, label=e.label)

    logger.debug("Subgraph of %s: %d nodes, %d edges",
                 graph.graph_id, g.get_number_of_nodes(), g.get_number_of_edges())
    return g


def is_clique(graph: 'Graph') -> bool:
    """A clique is a set of nodes in which each node is connected to all other nodes."""
    return graph.density >= 1.0


def clique(graph: 'Graph', node_id: Any) -> List[str]:
    """
    Returns a clique containing the node with given id.

    Greedy, single pass: every node connected to all the members found so
    far joins the clique.  This is not necessarily the largest clique the
    node belongs to.
    """
    node_id = str(node_id)
    if node_id not in graph.nodes:
        return []

    members = [node_id]
    for candidate in graph.nodes:
        if candidate == node_id:
            continue
        if all(graph.edge(candidate, member) is not None for member in members):
            members.append(candidate)
    return members


def cliques(graph: 'Graph', threshold: int = 3) -> List[List[str]]:
    """Returns all the cliques in the graph of at least the given size, as sorted id lists."""
    found: List[List[str]] = []
    for node_id in graph.nodes:
        members = sorted(clique(graph, node_id))
        if len(members) >= threshold and members not in found:
            found.append(members)
    return found


def partition(graph: 'Graph') -> List['Graph']:
    """
    Splits unconnected subgraphs.

    For each node in the graph, make a list of its id and all directly
    connected id's.  Lists sharing an id belong to the same component and
    are merged until no two lists overlap.  Returns one subgraph per
    component, sorted by size (biggest first).
    """
    components: List[List[str]] = []
    for node_id in graph.nodes:
        candidate = [n.id for n in flatten(graph, node_id, 1)]
        for i, component in enumerate(components):
            if intersection(component, candidate):
                components[i] = union(component, candidate)
                break
        else:
            components.append(candidate)

    # If 1 is directly connected to 2 and 3, and 4 to 5 and 6, these are
    # separate lists.  If 7 is connected to 3 and 6, it joins [1, 2, 3]
    # and both lists now overlap on 6: keep merging until stable.
    merged = True
    while merged:
        merged = False
        for i in range(len(components)):
            for j in range(i + 1, len(components)):
                if intersection(components[i], components[j]):
                    components[i] = union(components[i], components[j])
                    del components[j]
                    merged = True
                    break
            if merged:
                break

    subgraphs = [subgraph(graph, component, 0) for component in components]
    subgraphs.sort(key=lambda g: g.get_number_of_nodes(), reverse=True)
    return subgraphs
