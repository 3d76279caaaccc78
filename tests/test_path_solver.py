"""Tests for the randomized path solver."""

import pytest

from py_clearings.config.map_layouts import get_layout
from py_clearings.core.alea_prng import AleaPRNG
from py_clearings.core.layouts import MalformedLayoutError
from py_clearings.core.path_solver import (
    AttemptResult, InvalidSettingsError, build_candidate_index, check_bounds,
    run_attempt, solve_paths,
)

TRIANGLE = [((0, 1), frozenset()), ((1, 2), frozenset()), ((0, 2), frozenset())]


class ScriptedSource:
    """Identity shuffle, always the largest count, always the first option."""

    def random(self):
        return 0.0

    def randint(self, low, high):
        return high

    def choice(self, seq):
        return seq[0]

    def shuffle(self, seq):
        return list(seq)


def _degrees(node_count, paths):
    degrees = [0] * node_count
    for a, b in paths:
        degrees[a] += 1
        degrees[b] += 1
    return degrees


class TestCheckBounds:
    """Test settings validation."""

    def test_valid(self):
        check_bounds(1, 1, 1)
        check_bounds(2, 4, 100)

    @pytest.mark.parametrize("bounds", [(0, 2, 10), (1, 0, 10), (3, 2, 10), (1, 2, 0), (-1, -1, 5)])
    def test_invalid(self, bounds):
        with pytest.raises(InvalidSettingsError):
            check_bounds(*bounds)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            check_bounds(5, 1, 1)


class TestCandidateIndex:
    """Test building the candidate adjacency."""

    def test_symmetric_adjacency(self):
        index = build_candidate_index(3, TRIANGLE)
        assert set(index[0]) == {1, 2}
        assert set(index[1]) == {0, 2}
        assert set(index[2]) == {0, 1}

    def test_blocks_made_mutual(self):
        """A block declared on one path applies from the other side too."""
        index = build_candidate_index(3, [((0, 1), frozenset({(1, 2)})), ((1, 2), frozenset())])

        assert index[0][1] == frozenset({(1, 2)})
        assert index[1][0] == frozenset({(1, 2)})
        assert index[1][2] == frozenset({(0, 1)})
        assert index[2][1] == frozenset({(0, 1)})

    def test_isolated_clearing(self):
        index = build_candidate_index(4, TRIANGLE)
        assert index[3] == {}

    def test_unknown_clearing(self):
        with pytest.raises(MalformedLayoutError):
            build_candidate_index(2, TRIANGLE)

    def test_grid_layout_index(self):
        layout = get_layout("grid")
        index = build_candidate_index(layout.node_count, layout.paths())
        assert index[1][4] == frozenset({(0, 5)})
        assert index[0][5] == frozenset({(1, 4)})
        assert index[0][1] == frozenset()


class TestRunAttempt:
    """Test a single construction pass in isolation."""

    def test_scripted_triangle(self):
        index = build_candidate_index(3, TRIANGLE)
        attempt = run_attempt(3, index, 1, 2, ScriptedSource())

        assert attempt.chosen == {(0, 1), (0, 2), (1, 2)}
        assert attempt.degrees == [2, 2, 2]
        assert attempt.is_valid(1, 2)

    def test_scripted_blocking(self):
        """Choosing 0-1 first rules out 1-2 for the rest of the attempt."""
        index = build_candidate_index(3, [
            ((0, 1), frozenset({(1, 2)})),
            ((1, 2), frozenset()),
            ((0, 2), frozenset()),
        ])
        attempt = run_attempt(3, index, 1, 2, ScriptedSource())

        assert attempt.chosen == {(0, 1), (0, 2)}
        assert attempt.blocked == {(1, 2)}
        assert attempt.degrees == [2, 1, 1]

    def test_respects_max_connections(self):
        index = build_candidate_index(3, TRIANGLE)
        attempt = run_attempt(3, index, 1, 1, ScriptedSource())

        assert attempt.chosen == {(0, 1)}
        assert attempt.degrees == [1, 1, 0]
        assert not attempt.is_valid(1, 1)

    def test_does_not_share_state(self):
        index = build_candidate_index(3, TRIANGLE)
        first = run_attempt(3, index, 1, 2, AleaPRNG("a"))
        second = run_attempt(3, index, 1, 2, AleaPRNG("a"))

        assert first.chosen == second.chosen
        assert first.chosen is not second.chosen

    def test_is_valid(self):
        assert AttemptResult(degrees=[1, 2, 2]).is_valid(1, 2)
        assert not AttemptResult(degrees=[0, 2, 2]).is_valid(1, 2)
        assert not AttemptResult(degrees=[1, 3, 2]).is_valid(1, 2)


class TestSolvePaths:
    """Test the retry loop."""

    def test_triangle_always_valid(self):
        index = build_candidate_index(3, TRIANGLE)
        for seed in range(20):
            result = solve_paths(3, index, 1, 2, 50, AleaPRNG(seed))
            assert result.valid
            assert 2 <= len(result.paths) <= 3
            assert all(1 <= d <= 2 for d in result.degrees)

    def test_paths_are_unique_and_normalized(self):
        layout = get_layout("staggered")
        index = build_candidate_index(layout.node_count, layout.paths())
        result = solve_paths(layout.node_count, index, 2, 4, 50, AleaPRNG("unique"))

        assert len(result.paths) == len(set(result.paths))
        assert all(a < b for a, b in result.paths)
        assert result.paths == sorted(result.paths)

    @pytest.mark.parametrize("name", ["grid", "staggered", "ring"])
    def test_no_blocked_pairs(self, name):
        layout = get_layout(name)
        index = build_candidate_index(layout.node_count, layout.paths())
        for seed in range(15):
            result = solve_paths(layout.node_count, index, 1, 3, 20, AleaPRNG(f"{name}-{seed}"))
            chosen = set(result.paths)
            for a, b in layout.blocking_pairs():
                assert not (a in chosen and b in chosen)

    @pytest.mark.parametrize("name", ["grid", "staggered", "ring"])
    def test_degrees_match_paths(self, name):
        layout = get_layout(name)
        index = build_candidate_index(layout.node_count, layout.paths())
        result = solve_paths(layout.node_count, index, 2, 4, 30, AleaPRNG(name))

        assert result.degrees == _degrees(layout.node_count, result.paths)
        if result.valid:
            assert all(2 <= d <= 4 for d in result.degrees)

    def test_mutual_blocking(self):
        """0-1 and 0-2 exclude each other, so they never appear together."""
        index = build_candidate_index(3, [
            ((0, 1), frozenset({(0, 2)})),
            ((0, 2), frozenset({(0, 1)})),
        ])
        for seed in range(20):
            result = solve_paths(3, index, 1, 1, 50, AleaPRNG(seed))
            assert not {(0, 1), (0, 2)} <= set(result.paths)
            assert len(result.paths) == 1

    def test_soft_failure(self):
        """An unsatisfiable bound returns the last attempt instead of raising."""
        layout = get_layout("grid")
        index = build_candidate_index(layout.node_count, layout.paths())
        result = solve_paths(layout.node_count, index, 12, 12, 1, AleaPRNG("fail"))

        assert not result.valid
        assert result.attempts == 1
        assert result.paths

    def test_stops_on_first_valid_attempt(self):
        index = build_candidate_index(3, TRIANGLE)
        result = solve_paths(3, index, 1, 2, 50, AleaPRNG("fast"))
        assert result.attempts == 1

    def test_uses_whole_budget_on_failure(self):
        index = build_candidate_index(3, TRIANGLE)
        result = solve_paths(3, index, 3, 3, 7, AleaPRNG("budget"))

        assert not result.valid
        assert result.attempts == 7

    def test_invalid_settings_fail_fast(self):
        prng = AleaPRNG("never")
        index = build_candidate_index(3, TRIANGLE)
        with pytest.raises(InvalidSettingsError):
            solve_paths(3, index, 3, 2, 10, prng)
        assert prng.call_count == 0

    def test_deterministic(self):
        layout = get_layout("ring")
        index = build_candidate_index(layout.node_count, layout.paths())
        result1 = solve_paths(layout.node_count, index, 2, 4, 25, AleaPRNG("same"))
        result2 = solve_paths(layout.node_count, index, 2, 4, 25, AleaPRNG("same"))

        assert result1 == result2
