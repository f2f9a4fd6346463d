"""
    Abstract base class for layouts.
    Defines the "Contract" that all layout strategies must follow.
"""
import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

if TYPE_CHECKING:
    from ..models.graph import Graph

logger = logging.getLogger(__name__)


class Bounds(NamedTuple):
    """Envelope of all node positions, in layout space."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float


class Layout(ABC):
    """
        Graph visualizer that calculates relative node positions.
        Pattern: Strategy (for node placement), Template Method (``iterate``).

        A layout advances one bounded step per ``iterate()`` call, so an
        interactive caller can spread the work over animation frames.
        ``i`` is the current step and ``n`` the number of steps to take.
    """

    type: str = ""

    def __init__(self, graph: 'Graph', iterations: int = 1000, config: Optional[Any] = None):
        """
        Args:
            graph:      Graph whose nodes are placed.
            iterations: Number of steps before the layout is done.
            config:     Strategy-specific parameters.
        """
        self.graph = graph
        self.i = 0
        self.n = iterations
        self.config = config

    def copy(self, graph: 'Graph') -> 'Layout':
        """Returns a copy of the layout (and its parameters) for the given graph."""
        return type(self)(graph, self.n, deepcopy(self.config))

    def prepare(self) -> None:
        """Zero every node's position and force. Call once before the first step."""
        for node in self.graph.nodes.values():
            node.vx = 0.0
            node.vy = 0.0
            node.reset_force()

    def bounds(self) -> Bounds:
        """Returns the min/max coordinates over all node positions."""
        nodes = list(self.graph.nodes.values())
        if not nodes:
            return Bounds(0.0, 0.0, 0.0, 0.0)
        return Bounds(
            min(n.vx for n in nodes),
            min(n.vy for n in nodes),
            max(n.vx for n in nodes),
            max(n.vy for n in nodes),
        )

    def is_done(self) -> bool:
        return self.i >= self.n

    def iterate(self) -> bool:
        """
        Advance the layout by exactly one step.

        Returns:
            True once the layout has taken all of its steps.  Calling
            ``iterate()`` on a finished layout changes nothing.
        """
        if self.is_done():
            return True
        self._step()
        self.i += 1
        return self.is_done()

    def solve(self) -> None:
        """Iterate until done."""
        while not self.is_done():
            self.iterate()
        logger.info("%s layout solved in %d steps (%d nodes)",
                    self.type, self.i, len(self.graph.nodes))

    def reset(self) -> None:
        self.i = 0

    def refresh(self) -> None:
        """Re-run the second half of the layout."""
        self.i = self.n // 2

    @abstractmethod
    def _step(self) -> None:
        """
        Move the nodes by one step.
        """
        pass
