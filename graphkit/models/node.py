"""
    Node model - representation of a node in the graph
"""
from typing import Any, Dict, List, Optional

from ..types import ValueType


class Node:
    """
    A node with a unique id in the graph.

    Its layout position (``vx``, ``vy``) is calculated by the graph's layout.
    The radius, style, category and label describe the node for consumers;
    the cached centrality scores are ``None`` until the graph recomputes them.
    Nodes do not reference their graph: topology lives in the Graph.
    """

    # Node fields that can be queried by name, with their value types.
    FIELD_TYPES: Dict[str, ValueType] = {
        'id': ValueType.STR,
        'label': ValueType.STR,
        'category': ValueType.STR,
        'style': ValueType.STR,
        'radius': ValueType.FLOAT,
        'betweenness': ValueType.FLOAT,
        'eigenvalue': ValueType.FLOAT,
    }

    def __init__(
            self,
            node_id: Any,
            radius: float = 8.0,
            style: str = "default",
            category: str = "",
            label: Optional[str] = None
    ):
        """
        Initialize a node.

        Args:
            node_id: Unique identifier of the node (will be converted to str)
            radius: Node radius
            style: Name of the style the node is drawn with
            category: Free-form category tag
            label: Display label (defaults to the id)
        """
        # Ensure ID is always a string for consistency in comparisons
        self._id = str(node_id)
        self.radius = float(radius)
        self.style = style
        self.category = category
        self.label = label if label else self._id

        # Layout-space position and accumulated force
        self.vx = 0.0
        self.vy = 0.0
        self.force: List[float] = [0.0, 0.0]

        self.betweenness: Optional[float] = None
        self.eigenvalue: Optional[float] = None

    @property
    def id(self) -> str:
        return self._id

    def get_attribute(self, key: str) -> Any:
        """Get a queryable field value by name (see ``FIELD_TYPES``)."""
        if key not in self.FIELD_TYPES:
            return None
        return getattr(self, key)

    def reset_force(self) -> None:
        self.force[0] = 0.0
        self.force[1] = 0.0

    def invalidate(self) -> None:
        """Drop the cached centrality scores."""
        self.betweenness = None
        self.eigenvalue = None

    def __repr__(self) -> str:
        return f"Node({self._id}, label={self.label}, category={self.category})"

    def __str__(self) -> str:
        return self._id

    def __eq__(self, other) -> bool:
        """Two nodes are equal if they have the same ID"""
        if isinstance(other, Node):
            return self._id == other._id
        if isinstance(other, str):
            return self._id == other
        return False

    def __hash__(self) -> int:
        """Hash node by ID"""
        return hash(self._id)
