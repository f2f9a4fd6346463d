"""
    SpringLayout - force-based layout in which edges are regarded as springs.

    Nodes repulse each other like charges, edges pull their endpoints
    together, and each step moves every node by its (clamped) net force.
"""
import math
import random
from dataclasses import replace
from typing import TYPE_CHECKING, Optional, Tuple

from ..config import SpringConfig
from ..models.node import Node
from ..types import clamp
from .base import Layout

if TYPE_CHECKING:
    from ..models.graph import Graph


class SpringLayout(Layout):
    """
    Force-directed layout.

    Parameters (see ``SpringConfig``) can be changed at any time with
    ``tweak()``; they take effect from the next step.
    """

    type = "spring"

    def __init__(self, graph: 'Graph', iterations: int = 1000, config: Optional[SpringConfig] = None):
        super().__init__(graph, iterations, config or SpringConfig())
        self._random = random.Random(self.config.seed)

    def tweak(self, **params) -> None:
        """Replace layout parameters, e.g. ``tweak(k=3, repulsion=20)``."""
        self.config = replace(self.config, **params)
        if 'seed' in params:
            self._random = random.Random(self.config.seed)

    def _step(self) -> None:
        nodes = list(self.graph.nodes.values())

        # Forces on all nodes due to node-node repulsions.
        for i, n1 in enumerate(nodes):
            for n2 in nodes[i + 1:]:
                self._repulse(n1, n2)

        # Forces on nodes due to edge attractions.
        for edge in self.graph.edges:
            self._attract(
                self.graph.nodes[edge.node1],
                self.graph.nodes[edge.node2],
                self.config.weight * edge.weight,
                1.0 / edge.length,
            )

        # Move by given force.
        d = self.config.d
        for node in nodes:
            node.vx += clamp(self.config.force * node.force[0], -d, d)
            node.vy += clamp(self.config.force * node.force[1], -d, d)
            node.reset_force()

    def _distance(self, n1: Node, n2: Node) -> Tuple[float, float, float]:
        dx = n2.vx - n1.vx
        dy = n2.vy - n1.vy
        d2 = dx * dx + dy * dy

        if d2 < 0.01:
            dx = self._random.random() * 0.1 + 0.1
            dy = self._random.random() * 0.1 + 0.1
            d2 = dx * dx + dy * dy

        return dx, dy, math.sqrt(d2)

    def _repulse(self, n1: Node, n2: Node) -> None:
        dx, dy, d = self._distance(n1, n2)

        if d < self.config.repulsion:
            f = self.config.k ** 2 / d ** 2
            n2.force[0] += f * dx
            n2.force[1] += f * dy
            n1.force[0] -= f * dx
            n1.force[1] -= f * dy

    def _attract(self, n1: Node, n2: Node, weight: float = 0.0, length: float = 1.0) -> None:
        dx, dy, d = self._distance(n1, n2)
        d = min(d, self.config.repulsion)

        # Take the edge's weight into account.
        k = self.config.k
        f = (d ** 2 - k ** 2) / k * length
        f *= weight * 0.5 + 1
        f /= d

        n2.force[0] -= f * dx
        n2.force[1] -= f * dy
        n1.force[0] += f * dx
        n1.force[1] += f * dy
