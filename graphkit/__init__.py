"""
graphkit - in-memory graph with traversal, shortest paths, centrality,
set algebra and incremental layout.
"""
from .types import ValueType, TypeValidator
from .config import GraphConfig, SpringConfig, CircleConfig
from .models.node import Node
from .models.edge import Edge
from .models.graph import Graph
from .layout import Layout, Bounds, SpringLayout, CircleLayout, create_layout
from .services import (
    FilterService,
    GraphQueryService,
    GraphError,
    TraversalError,
    LayoutError,
    FilterParseError,
    FilterTypeError,
)

__all__ = [
    'ValueType',
    'TypeValidator',
    'GraphConfig',
    'SpringConfig',
    'CircleConfig',
    'Node',
    'Edge',
    'Graph',
    'Layout',
    'Bounds',
    'SpringLayout',
    'CircleLayout',
    'create_layout',
    'FilterService',
    'GraphQueryService',
    'GraphError',
    'TraversalError',
    'LayoutError',
    'FilterParseError',
    'FilterTypeError',
]
