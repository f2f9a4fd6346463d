# graphkit/services/filter_service.py
"""
    FilterService - selects graph nodes with a field query.

    Extends ``GraphQueryService[str]`` (Template Method + Genericity).
"""
import logging
import re
from typing import TYPE_CHECKING, Any, List

from ..models.node import Node
from ..types import TypeValidator, ValueType
from .base_service import GraphQueryService
from .exceptions import FilterParseError, FilterTypeError

if TYPE_CHECKING:
    from ..models.graph import Graph

logger = logging.getLogger(__name__)

# Regex: field  operator  value
# Negative lookahead (?![><=!]) ensures >> or >< etc. are rejected
_FILTER_PATTERN = re.compile(r'^\s*(\w+)\s*(==|!=|>=|<=|>(?![><=!])|<(?![><=!]))\s*(.+?)\s*$')

# Derived fields, computed from the graph rather than stored on the node.
_GRAPH_FIELDS = {'degree': ValueType.INT}


class FilterService(GraphQueryService[str]):
    """
    Filters graph nodes based on a query of the form:
        <field> <comparator> <value>

    Fields are the node's ``id``, ``label``, ``category``, ``style``,
    ``radius``, ``betweenness``, ``eigenvalue`` and ``degree`` (number of
    links).  Centrality fields use the graph's cached scores, computing them
    on first use.

    Example:
        FilterService().filter(graph, "category == person", distance=1)
    """

    # ── Public convenience method ────────────────────────────────

    def filter(self, graph: 'Graph', query: str, distance: int = 0) -> 'Graph':
        """
        Convenience wrapper around the generic ``execute()``.

        :param graph: Input graph to filter
        :param query: Filter query string (e.g. "radius >= 10")
        :param distance: Neighborhood depth kept around each match
        :return: Subgraph containing the matching nodes
        :raises FilterParseError: If query is None, empty, has invalid syntax or an unknown field
        :raises FilterTypeError: If the value cannot be compared with the field type
        """
        return self.execute(graph, query, distance)

    # ── Template Method hooks (from GraphQueryService[str]) ──────

    def _validate_query(self, query: str) -> None:
        """Validate that the filter query is non-empty, well-formed and names a known field."""
        if query is None or not query.strip():
            raise FilterParseError("Filter query cannot be empty.")
        match = _FILTER_PATTERN.match(query)
        if not match:
            raise FilterParseError("Invalid filter format.")
        field = match.group(1)
        if field not in Node.FIELD_TYPES and field not in _GRAPH_FIELDS:
            raise FilterParseError(f"Unknown field '{field}'.")

    def _find_matching_nodes(self, graph: 'Graph', query: str) -> List[str]:
        """Return ids of all nodes whose field satisfies the filter."""
        match = _FILTER_PATTERN.match(query)
        field = match.group(1)
        operator = match.group(2)
        target_value_str = match.group(3)

        matching_ids = [
            node.id
            for node in graph.get_all_nodes()
            if self._evaluate_node(graph, node, field, operator, target_value_str)
        ]
        logger.debug("Filter '%s' matched %d of %d nodes",
                     query, len(matching_ids), graph.get_number_of_nodes())
        return matching_ids

    def _field_value(self, graph: 'Graph', node: Node, field: str) -> Any:
        if field == 'degree':
            return len(graph.links(node.id))
        if field == 'betweenness':
            return graph.node_betweenness(node.id)
        if field == 'eigenvalue':
            return graph.node_eigenvalue(node.id)
        return node.get_attribute(field)

    def _evaluate_node(self, graph: 'Graph', node: Node, field: str,
                       operator: str, target_value_str: str) -> bool:
        """
        Evaluate whether a single node satisfies the filter condition.

        :raises FilterTypeError: If the value cannot be converted to the field's type
        """
        field_type = Node.FIELD_TYPES.get(field) or _GRAPH_FIELDS[field]
        node_val = self._field_value(graph, node, field)

        try:
            target_val = TypeValidator.convert_to_type(target_value_str, field_type)
            return TypeValidator.compare(node_val, target_val, operator)
        except (ValueError, TypeError):
            raise FilterTypeError(
                f"Incompatible type for field '{field}'."
            )
