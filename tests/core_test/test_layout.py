# tests/core_test/test_layout.py
"""
Tests for the layout strategies (graphkit/layout/).

Covers:
    • Layout registry and create_layout
    • Step-wise iteration contract (iterate, solve, is_done, reset, refresh)
    • SpringLayout (reproducible with a seed, tweak)
    • CircleLayout (ring assignment by traffic)
    • Graph update / bounds / center / position
"""
import math

import pytest

from graphkit import (
    CircleConfig,
    CircleLayout,
    Graph,
    GraphConfig,
    LayoutError,
    SpringLayout,
    create_layout,
)
from graphkit.layout import LAYOUTS


def _positions(graph):
    return {n.id: (n.vx, n.vy) for n in graph}


# ═════════════════════════════════════════════════════════════════
#  REGISTRY
# ═════════════════════════════════════════════════════════════════

class TestRegistry:

    def test_registered_layouts(self):
        assert LAYOUTS == {"spring": SpringLayout, "circle": CircleLayout}

    def test_create_layout(self, path_graph):
        layout = create_layout("circle", path_graph, 20)
        assert isinstance(layout, CircleLayout)
        assert layout.n == 20
        assert layout.config == CircleConfig()

    def test_unknown_layout_raises(self, path_graph):
        with pytest.raises(LayoutError, match="hexagon"):
            create_layout("hexagon", path_graph)

    def test_graph_with_unknown_layout_raises(self):
        with pytest.raises(LayoutError):
            Graph("bad", GraphConfig(layout="hexagon"))

    def test_graph_default_is_spring(self, path_graph):
        assert isinstance(path_graph.layout, SpringLayout)
        assert path_graph.layout.n == 1000


# ═════════════════════════════════════════════════════════════════
#  ITERATION CONTRACT
# ═════════════════════════════════════════════════════════════════

class TestIteration:

    @pytest.fixture(params=["spring", "circle"])
    def graph(self, request, stub_graph):
        g = Graph("layout", GraphConfig(iterations=20, layout=request.param))
        for e in stub_graph.edges:
            g.add_edge(e.node1, e.node2, weight=e.weight)
        return g

    def test_iterate_counts_steps(self, graph):
        graph.prepare()
        assert graph.iterate() is False
        assert graph.layout.i == 1
        assert not graph.is_done()

    def test_solve(self, graph):
        graph.prepare()
        graph.solve()
        assert graph.is_done()
        assert graph.layout.i == 20
        assert graph.alpha == 1.0

    def test_iterate_after_done_is_noop(self, graph):
        graph.prepare()
        graph.solve()
        before = _positions(graph)
        assert graph.iterate() is True
        assert graph.layout.i == 20
        assert _positions(graph) == before

    def test_nodes_are_spread_out(self, graph):
        graph.prepare()
        graph.solve()
        b = graph.bounds()
        assert b.max_x > b.min_x
        assert b.max_y > b.min_y

    def test_prepare_zeroes_positions(self, graph):
        graph.prepare()
        graph.solve()
        graph.prepare()
        assert all(pos == (0.0, 0.0) for pos in _positions(graph).values())

    def test_reset_and_refresh(self, graph):
        graph.solve()
        graph.layout.refresh()
        assert graph.layout.i == 10
        assert not graph.is_done()
        graph.layout.reset()
        assert graph.layout.i == 0

    def test_empty_graph(self):
        for name in LAYOUTS:
            g = Graph("empty", GraphConfig(iterations=3, layout=name))
            g.solve()
            assert g.is_done()
            assert tuple(g.bounds()) == (0.0, 0.0, 0.0, 0.0)


# ═════════════════════════════════════════════════════════════════
#  SPRING LAYOUT
# ═════════════════════════════════════════════════════════════════

class TestSpringLayout:

    def _solved(self, config):
        g = Graph("spring", config)
        for id1, id2 in [("A", "B"), ("B", "C"), ("C", "A"), ("C", "D")]:
            g.add_edge(id1, id2)
        g.prepare()
        g.solve()
        return g

    def test_same_seed_same_layout(self, seeded_config):
        g1 = self._solved(seeded_config)
        g2 = self._solved(seeded_config)
        assert _positions(g1) == _positions(g2)

    def test_step_is_bounded(self, seeded_config):
        g = Graph("spring", seeded_config)
        g.add_edge("A", "B")
        g.prepare()
        g.iterate()
        d = seeded_config.spring.d
        for node in g:
            assert abs(node.vx) <= d
            assert abs(node.vy) <= d

    def test_tweak(self, path_graph):
        path_graph.layout.tweak(k=3.0, repulsion=20.0)
        assert path_graph.layout.config.k == 3.0
        assert path_graph.layout.config.repulsion == 20.0
        assert path_graph.layout.config.weight == 15.0

    def test_tweak_does_not_touch_graph_config(self, path_graph):
        path_graph.layout.tweak(k=3.0)
        assert path_graph.config.spring.k == 2.0

    def test_tweak_unknown_parameter_raises(self, path_graph):
        with pytest.raises(TypeError):
            path_graph.layout.tweak(gravity=1.0)


# ═════════════════════════════════════════════════════════════════
#  CIRCLE LAYOUT
# ═════════════════════════════════════════════════════════════════

class TestCircleLayout:

    @pytest.fixture
    def circle_path(self, path_graph):
        g = Graph("circle", GraphConfig(iterations=10, layout="circle"))
        for e in path_graph.edges:
            g.add_edge(e.node1, e.node2)
        return g

    def test_rings_by_traffic(self, circle_path):
        rings = circle_path.layout.rings()
        assert [[n.id for n in ring] for ring in rings] == [["B"], ["C", "A", "D"]]

    def test_single_orbit(self, circle_path):
        circle_path.layout.config.orbits = 1
        rings = circle_path.layout.rings()
        assert len(rings) == 1
        assert len(rings[0]) == 4

    def test_ring_radii_after_solve(self, circle_path):
        circle_path.prepare()
        circle_path.solve()
        radius = {n.id: math.hypot(n.vx, n.vy) for n in circle_path}
        assert radius["B"] == pytest.approx(4.0)
        for node_id in ("A", "C", "D"):
            assert radius[node_id] == pytest.approx(8.0)

    def test_rings_expand(self, circle_path):
        circle_path.prepare()
        circle_path.iterate()
        first = math.hypot(circle_path.node("A").vx, circle_path.node("A").vy)
        circle_path.solve()
        last = math.hypot(circle_path.node("A").vx, circle_path.node("A").vy)
        assert 0.0 < first < last

    def test_zero_distance_spreads_ring_evenly(self, path_graph):
        g = Graph("flat", GraphConfig(iterations=10, layout="circle", distance=0.0))
        for e in path_graph.edges:
            g.add_edge(e.node1, e.node2)
        g.solve()
        c, a = g.node("C"), g.node("A")
        assert math.hypot(c.vx - a.vx, c.vy - a.vy) == pytest.approx(8.0 * math.sqrt(3))

    def test_zero_radius_collapses_to_origin(self, path_graph):
        g = Graph("dot", GraphConfig(iterations=10, layout="circle",
                                     circle=CircleConfig(radius=0.0)))
        for e in path_graph.edges:
            g.add_edge(e.node1, e.node2)
        g.solve()
        for node in g:
            assert node.vx == pytest.approx(0.0, abs=1e-9)
            assert node.vy == pytest.approx(0.0, abs=1e-9)

    def test_first_node_on_start_angle(self, circle_path):
        circle_path.solve()
        b = circle_path.node("B")
        assert b.vx == pytest.approx(0.0, abs=1e-9)
        assert b.vy == pytest.approx(4.0)


# ═════════════════════════════════════════════════════════════════
#  GRAPH ANIMATION HELPERS
# ═════════════════════════════════════════════════════════════════

class TestGraphUpdate:

    def test_first_update_prepares(self, path_graph):
        path_graph.node("A").vx = 5.0
        assert path_graph.update() is True
        assert path_graph.layout.i == 1
        assert path_graph.node("A").vx == 0.0
        assert path_graph.alpha == pytest.approx(0.05)

    def test_second_update_takes_one_step(self, path_graph):
        path_graph.update()
        path_graph.update()
        assert path_graph.layout.i == 2

    def test_later_updates_take_more_steps(self, path_graph):
        path_graph.layout.i = 50
        path_graph.update(iterations=10)
        assert path_graph.layout.i == 56

    def test_step_count_capped_by_iterations(self, path_graph):
        path_graph.layout.i = 500
        path_graph.update(iterations=10)
        assert path_graph.layout.i == 510

    def test_alpha_saturates(self, path_graph):
        for _ in range(30):
            path_graph.update()
        assert path_graph.alpha == 1.0

    def test_returns_false_when_done(self):
        g = Graph("short", GraphConfig(iterations=3))
        g.add_edge("a", "b")
        results = [g.update() for _ in range(5)]
        assert results[-1] is False
        assert g.is_done()


class TestCenterAndPosition:

    @pytest.fixture
    def placed(self) -> Graph:
        g = Graph("placed")
        for node_id, x, y in [("a", -1.0, -1.0), ("b", 1.0, 1.0), ("c", 0.0, 0.5)]:
            node = g.add_node(node_id)
            node.vx, node.vy = x, y
        return g

    def test_bounds(self, placed):
        assert tuple(placed.bounds()) == (-1.0, -1.0, 1.0, 1.0)

    def test_d(self, placed):
        assert placed.d == pytest.approx(8.0 * 2.5)
        placed.distance = 2.0
        assert placed.d == pytest.approx(40.0)

    def test_center(self, placed):
        assert placed.center(200, 100) == pytest.approx((100.0, 50.0))

    def test_position(self, placed):
        placed.center(200, 100)
        assert placed.position("b") == pytest.approx((120.0, 70.0))
        assert placed.position("c") == pytest.approx((100.0, 60.0))

    def test_position_unknown(self, placed):
        assert placed.position("z") is None
