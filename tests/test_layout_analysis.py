"""Tests for generated map analysis helpers."""

from py_clearings.config.generation_settings import GenerationSettings
from py_clearings.core.layout_analysis import (
    degree_counts, edge_keys, find_conflicts, is_connected, summarize,
)
from py_clearings.core.layout_generator import Clearing, GenerationResult, Path
from py_clearings.core.layouts import MapLayout, PathSpec


def _result(pairs, count=3):
    nodes = [Clearing(id=i, title=f"Clearing{i}", x=float(i), y=0.0) for i in range(count)]
    edges = [Path(source=nodes[a], target=nodes[b]) for a, b in pairs]
    return GenerationResult(nodes=nodes, edges=edges)


class TestLayoutAnalysis:
    """Test analysis over hand-built results."""

    def test_degree_counts(self):
        assert degree_counts(_result([(0, 1), (1, 2)])).tolist() == [1, 2, 1]

    def test_degree_counts_isolated(self):
        assert degree_counts(_result([], count=2)).tolist() == [0, 0]

    def test_edge_keys_normalized(self):
        assert edge_keys(_result([(2, 0), (1, 2)])) == [(0, 2), (1, 2)]

    def test_is_connected(self):
        assert is_connected(_result([(0, 1), (1, 2)]))
        assert not is_connected(_result([(0, 1)]))
        assert is_connected(GenerationResult())

    def test_find_conflicts(self):
        layout = MapLayout(
            "t", ((0, 0), (1, 0), (2, 0)), 2, 1,
            (PathSpec("0-1", ("1-2",)), PathSpec("1-2")),
        )
        assert find_conflicts(_result([(0, 1), (1, 2)]), layout) == [((0, 1), (1, 2))]
        assert find_conflicts(_result([(0, 1)]), layout) == []

    def test_summarize(self):
        settings = GenerationSettings(min_connections=2, max_connections=4)
        summary = summarize(_result([(0, 1), (1, 2)]), settings)

        assert summary["node_count"] == 3
        assert summary["edge_count"] == 2
        assert summary["min_degree"] == 1
        assert summary["max_degree"] == 2
        assert abs(summary["mean_degree"] - 4 / 3) < 1e-9
        assert summary["connected"] is True
        assert summary["degree_violations"] == [0, 2]

    def test_summarize_empty(self):
        summary = summarize(GenerationResult())
        assert summary["node_count"] == 0
        assert summary["degree_violations"] == []
