"""
Layout strategies - incremental node placement.
"""
from typing import TYPE_CHECKING, Any, Dict, Optional, Type

from ..services.exceptions import LayoutError
from .base import Layout, Bounds
from .circle import CircleLayout
from .spring import SpringLayout

if TYPE_CHECKING:
    from ..models.graph import Graph

LAYOUTS: Dict[str, Type[Layout]] = {
    SpringLayout.type: SpringLayout,
    CircleLayout.type: CircleLayout,
}


def create_layout(name: str, graph: 'Graph', iterations: int = 1000,
                  config: Optional[Any] = None) -> Layout:
    """
    Instantiate the layout registered under ``name``.

    Raises:
        LayoutError: If no layout is registered under that name.
    """
    layout_class = LAYOUTS.get(name)
    if layout_class is None:
        raise LayoutError(
            f"There is no layout type named '{name}'. "
            f"Available: {sorted(LAYOUTS)}"
        )
    return layout_class(graph, iterations, config)


__all__ = ['Layout', 'Bounds', 'SpringLayout', 'CircleLayout', 'LAYOUTS', 'create_layout']
