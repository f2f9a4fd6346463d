"""
    Generic base service for graph query operations.

    Design Pattern: Template Method
    ─────────────────────────────────
    Defines the skeleton of a graph query operation (validate → execute → build subgraph),
    letting concrete subclasses (FilterService) override specific steps.

    Genericity:
    ─────────────────────────
    Uses Generic[TQuery] so each service explicitly declares its query type.
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, List, TypeVar

from . import cluster

if TYPE_CHECKING:
    from ..models.graph import Graph

# Generic type variable for the query parameter
TQuery = TypeVar('TQuery')


class GraphQueryService(ABC, Generic[TQuery]):
    """
    Abstract generic base for all services that query a graph
    and produce a subgraph as result.

    Concrete subclasses must implement:
        - _validate_query(query)   → raise on invalid input
        - _find_matching_nodes(graph, query) → ids of matching nodes
    """

    def execute(self, graph: 'Graph', query: TQuery, distance: int = 0) -> 'Graph':
        """
        Template Method: validate → find matching nodes → build subgraph.

        Args:
            graph:    The input graph to query.
            query:    Query object (type depends on the concrete service).
            distance: Neighborhood depth kept around each matching node.

        Returns:
            A new subgraph containing the matching nodes, their neighborhoods
            up to ``distance`` hops, and the edges between them.
        """
        self._validate_query(query)
        matching_ids = self._find_matching_nodes(graph, query)
        return cluster.subgraph(graph, matching_ids, distance)

    @abstractmethod
    def _validate_query(self, query: TQuery) -> None:
        """
        Validate the query; raise an appropriate exception on failure.
        """
        ...

    @abstractmethod
    def _find_matching_nodes(self, graph: 'Graph', query: TQuery) -> List[str]:
        """
        Return the ids of the nodes that satisfy the query, in graph order.
        """
        ...
