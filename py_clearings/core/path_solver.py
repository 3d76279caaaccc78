"""
Randomized path selection under degree and blocking constraints.

Each attempt walks the clearings in random order and greedily adds a random
number of paths from each one, skipping paths that are already taken,
blocked by an earlier choice, or that would push either clearing past the
maximum. There is no backtracking inside an attempt: an attempt is only
checked once it is complete, and a failed attempt is thrown away and
retried from scratch. When the attempt budget runs out the last attempt is
returned as a best effort and flagged as invalid.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

import structlog

from .layouts import MalformedLayoutError, PathKey, path_key
from ..utils.random import RandomSource

logger = structlog.get_logger()

# candidates[i][j] -> keys that become unavailable once i-j is chosen
CandidateIndex = Dict[int, Dict[int, FrozenSet[PathKey]]]


class InvalidSettingsError(ValueError):
    """Connection bounds or attempt budget are unusable."""


def check_bounds(min_connections: int, max_connections: int, max_attempts: int) -> None:
    """
    Fail fast on settings no attempt could honour.

    Raises:
        InvalidSettingsError: If a bound is below 1 or min exceeds max
    """
    if min_connections < 1:
        raise InvalidSettingsError(f"min_connections must be >= 1, got {min_connections}")
    if max_connections < 1:
        raise InvalidSettingsError(f"max_connections must be >= 1, got {max_connections}")
    if min_connections > max_connections:
        raise InvalidSettingsError(
            f"min_connections ({min_connections}) exceeds max_connections ({max_connections})"
        )
    if max_attempts < 1:
        raise InvalidSettingsError(f"max_attempts must be >= 1, got {max_attempts}")


def build_candidate_index(
    node_count: int, paths: Iterable[Tuple[PathKey, FrozenSet[PathKey]]]
) -> CandidateIndex:
    """
    Build the symmetric adjacency of allowed paths.

    Blocking is made mutual: if path A declares that it blocks B, choosing
    B also blocks A, whether or not B declares it.

    Args:
        node_count: Number of clearings
        paths: ``(key, blocked_keys)`` pairs, as yielded by ``MapLayout.paths()``

    Returns:
        Candidate index covering every clearing (isolated ones map to ``{}``)
    """
    declared: List[PathKey] = []
    mutual: Dict[PathKey, Set[PathKey]] = {}
    for key, blocked in paths:
        for a, b in (key, *blocked):
            for node in (a, b):
                if not 0 <= node < node_count:
                    raise MalformedLayoutError(
                        f"Path {a}-{b} references unknown clearing {node}"
                    )
        declared.append(key)
        for other in blocked:
            mutual.setdefault(key, set()).add(other)
            mutual.setdefault(other, set()).add(key)

    index: CandidateIndex = {i: {} for i in range(node_count)}
    for key in declared:
        a, b = key
        blocked = frozenset(mutual.get(key, ()))
        index[a][b] = blocked
        index[b][a] = blocked
    return index


@dataclass
class AttemptResult:
    """Outcome of a single construction pass."""

    chosen: Set[PathKey] = field(default_factory=set)
    blocked: Set[PathKey] = field(default_factory=set)
    degrees: List[int] = field(default_factory=list)

    def is_valid(self, min_connections: int, max_connections: int) -> bool:
        return all(min_connections <= d <= max_connections for d in self.degrees)


@dataclass
class SolverResult:
    """Paths chosen by the solver plus how it got there."""

    paths: List[PathKey]
    degrees: List[int]
    attempts: int
    valid: bool


def run_attempt(
    node_count: int,
    candidates: CandidateIndex,
    min_connections: int,
    max_connections: int,
    prng: RandomSource,
) -> AttemptResult:
    """
    Run one randomized construction pass.

    All bookkeeping lives in the returned AttemptResult; nothing outside
    the call is touched apart from the PRNG's state.
    """
    result = AttemptResult(degrees=[0] * node_count)
    degrees = result.degrees

    for node in prng.shuffle(range(node_count)):
        path_count = prng.randint(min_connections, max_connections)
        neighbours = candidates.get(node, {})
        for _ in range(path_count):
            if degrees[node] >= max_connections:
                break
            options = [
                other
                for other in sorted(neighbours)
                if path_key(node, other) not in result.chosen
                and path_key(node, other) not in result.blocked
                and degrees[other] < max_connections
            ]
            if not options:
                break
            other = prng.choice(options)
            result.chosen.add(path_key(node, other))
            degrees[node] += 1
            degrees[other] += 1
            result.blocked.update(neighbours[other])

    return result


def solve_paths(
    node_count: int,
    candidates: CandidateIndex,
    min_connections: int,
    max_connections: int,
    max_attempts: int,
    prng: RandomSource,
) -> SolverResult:
    """
    Retry construction passes until one satisfies the degree bounds.

    Args:
        node_count: Number of clearings
        candidates: Index from :func:`build_candidate_index`
        min_connections: Fewest paths any clearing may end with
        max_connections: Most paths any clearing may end with
        max_attempts: Attempt budget
        prng: Random source

    Returns:
        SolverResult; ``valid`` is False when the budget ran out, in which
        case the paths are those of the final attempt
    """
    check_bounds(min_connections, max_connections, max_attempts)

    attempt = AttemptResult(degrees=[0] * node_count)
    valid = False
    attempts = 0
    while attempts < max_attempts:
        attempts += 1
        attempt = run_attempt(node_count, candidates, min_connections, max_connections, prng)
        if attempt.is_valid(min_connections, max_connections):
            valid = True
            break

    if valid:
        logger.info("Paths solved", attempts=attempts, paths=len(attempt.chosen))
    else:
        logger.warning(
            "Attempt budget exhausted; returning last attempt",
            attempts=attempts,
            min_connections=min_connections,
            max_connections=max_connections,
            degrees=attempt.degrees,
        )

    return SolverResult(
        paths=sorted(attempt.chosen),
        degrees=list(attempt.degrees),
        attempts=attempts,
        valid=valid,
    )
