"""
Graph services - traversal, proximity, cluster algebra and queries.

The algorithm modules (``traversal``, ``proximity``, ``cluster``) are plain
functions over a Graph; ``Graph`` exposes each of them as a method.
"""
from . import cluster, proximity, traversal
from .base_service import GraphQueryService
from .filter_service import FilterService
from .exceptions import (
    GraphError,
    TraversalError,
    LayoutError,
    FilterParseError,
    FilterTypeError,
)

__all__ = [
    'cluster',
    'proximity',
    'traversal',
    'GraphQueryService',
    'FilterService',
    'GraphError',
    'TraversalError',
    'LayoutError',
    'FilterParseError',
    'FilterTypeError',
]
