"""
    Edge model - representation of an edge between nodes.
"""
from typing import Any, Tuple

from ..types import clamp


class Edge:
    """
        Class for an edge between two nodes.

        The weight (0.0-1.0) is the importance of the connection, not its
        cost.  The length (1.0 or more) multiplies the spring rest length.
        Endpoints are stored as node ids; ``node1 -> node2`` is the edge's
        direction, which only matters for directed traversal.
    """

    def __init__(
            self,
            node1: Any,
            node2: Any,
            weight: float = 0.0,
            length: float = 1.0,
            label: str = ""
    ):
        """
        Initialize an edge.

        Args:
            node1: Id of the first (source) node
            node2: Id of the second (target) node
            weight: Connection importance, clamped into [0, 1]
            length: Spring length multiplier, at least 1
            label: Edge label
        """
        self.node1 = str(node1)
        self.node2 = str(node2)
        self.weight = clamp(float(weight or 0.0), 0.0, 1.0)
        self.length = max(1.0, float(length or 1.0))
        self.label = label or ""

    def get_source_target(self) -> Tuple[str, str]:
        """Get source and target node ids"""
        return self.node1, self.node2

    def connects_nodes(self, id1: Any, id2: Any) -> bool:
        """Check if edge connects two nodes, in either direction"""
        ids = {str(id1), str(id2)}
        return ids == {self.node1, self.node2}

    def __repr__(self) -> str:
        """String representation of edge"""
        return f"Edge({self.node1} -> {self.node2}, weight={self.weight}, length={self.length})"
