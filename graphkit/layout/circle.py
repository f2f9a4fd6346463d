"""
    CircleLayout - nodes arranged on concentric rings by traffic.
"""
import math
from typing import TYPE_CHECKING, List, Optional

from ..config import CircleConfig
from ..models.node import Node
from .base import Layout

if TYPE_CHECKING:
    from ..models.graph import Graph


class CircleLayout(Layout):
    """
    Simple layout with nodes arranged on one or more circles.

    Nodes are sorted by betweenness centrality: nodes with a lot of passing
    traffic sit on the inner rings, and outer rings hold quadratically more
    nodes.  The rings expand each step until they reach ``config.radius``.
    """

    type = "circle"

    def __init__(self, graph: 'Graph', iterations: int = 1000, config: Optional[CircleConfig] = None):
        super().__init__(graph, iterations, config or CircleConfig())

    def rings(self) -> List[List[Node]]:
        """Bucket the nodes, highest traffic first, into at most ``orbits`` rings."""
        nodes = self.graph.nodes_by_betweenness(-1)
        count = len(nodes)
        orbits = max(1, self.config.orbits)

        rings = []
        for i in range(orbits):
            if not nodes:
                break
            if i == orbits - 1:
                size = len(nodes)
            else:
                size = max(1, int(count / (orbits - i) ** 2))
            rings.append(nodes[:size])
            nodes = nodes[size:]
        return rings

    def _step(self) -> None:
        if not self.graph.nodes:
            return

        rings = self.rings()
        node_radius = self.graph.config.node_radius
        # Ring radii expand each step.
        expansion = math.sin(math.pi / 2 * (self.i + 1) / self.n)

        for index, ring in enumerate(rings, start=1):
            # Inner rings have a smaller radius.
            r = self.config.radius * expansion * index / len(rings)

            # Node diameter / circumference determines how many nodes fit on the ring.
            circumference = self.config.radius * self.graph.d * 2 * math.pi * index / len(rings)

            a = self.config.angle
            t = 2 * math.pi / len(ring)
            if circumference > 0:
                s = node_radius * 2 / circumference * 2
                t = min(2 * math.pi * s, t)
            for node in ring:
                node.vx = r * math.cos(a)
                node.vy = r * math.sin(a)
                a += t
