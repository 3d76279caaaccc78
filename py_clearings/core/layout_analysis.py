"""
Read-only checks and statistics over generated clearing maps.
"""

from collections import deque
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from ..config.generation_settings import GenerationSettings
from .layout_generator import GenerationResult
from .layouts import MapLayout, PathKey, path_key


def _index_of(result: GenerationResult) -> Dict[int, int]:
    return {node.id: i for i, node in enumerate(result.nodes)}


def edge_keys(result: GenerationResult) -> List[PathKey]:
    """Normalized clearing-id pairs for every path, in result order."""
    return [path_key(edge.source.id, edge.target.id) for edge in result.edges]


def degree_counts(result: GenerationResult) -> np.ndarray:
    """Number of paths touching each clearing, indexed like ``result.nodes``."""
    index = _index_of(result)
    ends = [index[edge.source.id] for edge in result.edges]
    ends += [index[edge.target.id] for edge in result.edges]
    return np.bincount(np.asarray(ends, dtype=np.int64), minlength=len(result.nodes))


def is_connected(result: GenerationResult) -> bool:
    """True when every clearing can reach every other one."""
    if not result.nodes:
        return True

    adjacency: Dict[int, List[int]] = {node.id: [] for node in result.nodes}
    for edge in result.edges:
        adjacency[edge.source.id].append(edge.target.id)
        adjacency[edge.target.id].append(edge.source.id)

    start = result.nodes[0].id
    seen = {start}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency[current]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return len(seen) == len(adjacency)


def find_conflicts(result: GenerationResult, layout: MapLayout) -> List[Tuple[PathKey, PathKey]]:
    """Declared blocking pairs of ``layout`` that are both present in ``result``."""
    present = set(edge_keys(result))
    return [(a, b) for a, b in layout.blocking_pairs() if a in present and b in present]


def summarize(
    result: GenerationResult, settings: Optional[GenerationSettings] = None
) -> Dict[str, Any]:
    """
    Summary statistics for a generated map.

    Args:
        result: Generated map
        settings: Bounds to check degrees against; defaults when omitted

    Returns:
        Dict with counts, degree range, connectivity and the ids of
        clearings whose degree is out of bounds
    """
    settings = settings or GenerationSettings()
    degrees = degree_counts(result)
    out_of_bounds = np.flatnonzero(
        (degrees < settings.min_connections) | (degrees > settings.max_connections)
    )

    return {
        "node_count": len(result.nodes),
        "edge_count": len(result.edges),
        "min_degree": int(degrees.min()) if degrees.size else 0,
        "max_degree": int(degrees.max()) if degrees.size else 0,
        "mean_degree": float(degrees.mean()) if degrees.size else 0.0,
        "connected": is_connected(result),
        "degree_violations": [result.nodes[i].id for i in out_of_bounds],
    }
