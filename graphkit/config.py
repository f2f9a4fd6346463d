"""
    Graph configuration - layout parameters and default node settings.

    Provides typed configuration objects that control how a graph is laid
    out.  ``Graph.copy`` carries a deep copy of its config, so a copy can be
    re-tuned without touching the original.
"""
import math
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SpringConfig:
    """
    Parameters of the force-directed layout.

    Attributes:
        k:          Force strength; repulsion grows with ``k**2``.
        force:      Multiplier turning accumulated force into displacement.
        weight:     Edge weight multiplier for attraction.
        d:          Maximum displacement per axis per step.
        repulsion:  Radius beyond which nodes no longer repulse.
        seed:       Seed for the jitter applied to coincident nodes.
                    ``None`` means unseeded.
    """
    k: float = 2.0
    force: float = 0.01
    weight: float = 15.0
    d: float = 0.5
    repulsion: float = 15.0
    seed: Optional[int] = None


@dataclass
class CircleConfig:
    """
    Parameters of the circle layout.

    Attributes:
        radius:  Radius of the outer ring, in layout space.
        orbits:  Number of concentric rings.
        angle:   Starting angle (radians) of every ring.
    """
    radius: float = 8.0
    orbits: int = 2
    angle: float = math.pi / 2


@dataclass
class GraphConfig:
    """
    Top-level configuration for a Graph.

    Attributes:
        iterations:   Target number of layout steps.
        distance:     Spacing factor between layout space and screen space.
        layout:       Registered layout name ("spring" or "circle").
        node_radius:  Radius given to nodes created without one.
        spring:       Spring layout parameters.
        circle:       Circle layout parameters.
    """
    iterations: int = 1000
    distance: float = 1.0
    layout: str = "spring"
    node_radius: float = 8.0
    spring: SpringConfig = field(default_factory=SpringConfig)
    circle: CircleConfig = field(default_factory=CircleConfig)
