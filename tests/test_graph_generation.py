"""Tests for BBS-driven random graph generation and validation."""

from unittest.mock import patch

import numpy as np
import pytest

from src.config.explorer import GeneratorConfig
from src.graph import (
    Graph,
    GraphGenerationError,
    generate_random_graph,
    validate_graph,
)
from src.prng import BlumBlumShub

P = 2_147_483_647
Q = 4_294_967_291
SEED = 987_654_321


@pytest.fixture
def bits() -> BlumBlumShub:
    return BlumBlumShub.create(32, rng=np.random.default_rng(42))


class TestGeneratedBounds:
    """Every generated graph honors the default generation bounds."""

    def test_many_graphs_within_bounds(self, bits: BlumBlumShub) -> None:
        for _ in range(200):
            graph = generate_random_graph(bits)
            n = graph.n
            assert 3 <= n <= 15
            assert n <= graph.num_edges <= 3 * n
            for src, dst, weight in graph.edges():
                assert 0 <= src < n
                assert 0 <= dst < n
                assert 1 <= weight <= 20

    def test_validate_graph_accepts_generated(self, bits: BlumBlumShub) -> None:
        config = GeneratorConfig()
        for _ in range(50):
            assert validate_graph(generate_random_graph(bits), config) == []

    def test_custom_bounds(self, bits: BlumBlumShub) -> None:
        config = GeneratorConfig(
            min_nodes=5, max_nodes=6, edge_factor=2, min_weight=7, max_weight=8
        )
        for _ in range(50):
            graph = generate_random_graph(bits, config)
            assert 5 <= graph.n <= 6
            assert graph.n <= graph.num_edges <= 2 * graph.n
            assert {w for _, _, w in graph.edges()} <= {7, 8}

    def test_distribution_covers_vertex_range(self, bits: BlumBlumShub) -> None:
        sizes = {generate_random_graph(bits).n for _ in range(300)}
        assert min(sizes) == 3
        assert max(sizes) == 15


class TestDeterminism:
    """Generation is a pure function of the bit stream."""

    def test_same_stream_same_graph(self) -> None:
        a = BlumBlumShub(P, Q, SEED)
        b = BlumBlumShub(P, Q, SEED)
        for _ in range(10):
            ga = generate_random_graph(a)
            gb = generate_random_graph(b)
            assert ga.n == gb.n
            assert list(ga.edges()) == list(gb.edges())

    def test_draw_order(self) -> None:
        """n, then m, then (from, to, weight) per edge."""
        source = BlumBlumShub(P, Q, SEED)
        twin = BlumBlumShub(P, Q, SEED)
        graph = generate_random_graph(source)

        n = twin.next_int(3, 15)
        m = twin.next_int(n, 3 * n)
        expected = Graph(n)
        for _ in range(m):
            src = twin.next_int(0, n - 1)
            dst = twin.next_int(0, n - 1)
            expected.add_edge(src, dst, twin.next_int(1, 20))

        assert graph.n == n
        assert list(graph.edges()) == list(expected.edges())
        assert source.state == twin.state


class TestValidation:
    """validate_graph reports each kind of bound violation."""

    def test_reports_vertex_count(self) -> None:
        graph = Graph(2)
        graph.add_edge(0, 1, 1)
        graph.add_edge(1, 0, 1)
        errors = validate_graph(graph, GeneratorConfig())
        assert any("Vertex count" in e for e in errors)

    def test_reports_edge_count(self) -> None:
        errors = validate_graph(Graph(3), GeneratorConfig())
        assert any("Edge count" in e for e in errors)

    def test_reports_weight(self) -> None:
        graph = Graph(3)
        for v in range(3):
            graph.add_edge(v, (v + 1) % 3, 21)
        errors = validate_graph(graph, GeneratorConfig())
        assert len(errors) == 3
        assert all("weight 21" in e for e in errors)

    def test_invalid_generation_raises(self, bits: BlumBlumShub) -> None:
        with patch(
            "src.graph.generator.validate_graph", return_value=["forced"]
        ):
            with pytest.raises(GraphGenerationError, match="forced"):
                generate_random_graph(bits)
