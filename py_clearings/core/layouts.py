"""
Map layout (topology template) definitions.

A layout fixes where the clearings sit and which paths between them are
allowed at all. Each allowed path may name other paths it ``blocks``:
paths that would cross it or run too close to share the board with it.
The actual catalog lives in :mod:`py_clearings.config.map_layouts`.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Tuple

PathKey = Tuple[int, int]


class MalformedLayoutError(ValueError):
    """A layout references clearings that do not exist or is otherwise inconsistent."""


def path_key(a: int, b: int) -> PathKey:
    """Normalized key for the undirected path between ``a`` and ``b``."""
    return (a, b) if a <= b else (b, a)


def parse_path(path: str) -> PathKey:
    """Parse an ``"a-b"`` path string into a normalized key."""
    parts = path.split("-")
    if len(parts) != 2:
        raise MalformedLayoutError(f"Path '{path}' is not of the form 'a-b'")
    try:
        a, b = int(parts[0]), int(parts[1])
    except ValueError as e:
        raise MalformedLayoutError(f"Path '{path}' has a non-integer endpoint") from e
    return path_key(a, b)


@dataclass(frozen=True)
class PathSpec:
    """A permissible path and the paths it rules out when chosen."""

    path: str
    blocks: Tuple[str, ...] = ()

    @property
    def key(self) -> PathKey:
        return parse_path(self.path)

    @property
    def blocked_keys(self) -> FrozenSet[PathKey]:
        return frozenset(parse_path(b) for b in self.blocks)


@dataclass(frozen=True)
class MapLayout:
    """Static description of one map shape."""

    name: str
    node_positions: Tuple[Tuple[float, float], ...]
    max_x: float
    max_y: float
    valid_connections: Tuple[PathSpec, ...] = field(default_factory=tuple)

    @property
    def node_count(self) -> int:
        return len(self.node_positions)

    def paths(self) -> Iterator[Tuple[PathKey, FrozenSet[PathKey]]]:
        """Yield each allowed path with the keys it blocks."""
        for spec in self.valid_connections:
            yield spec.key, spec.blocked_keys

    def blocking_pairs(self) -> List[Tuple[PathKey, PathKey]]:
        """All declared conflicts, each pair normalized and listed once."""
        pairs = set()
        for key, blocked in self.paths():
            for other in blocked:
                pairs.add((key, other) if key <= other else (other, key))
        return sorted(pairs)

    def validate(self) -> "MapLayout":
        """
        Check the layout's internal consistency.

        Raises:
            MalformedLayoutError: If a path or block names an unknown
                clearing, joins a clearing to itself, is declared twice,
                or the coordinate bounds are not positive.

        Returns:
            The layout itself, so catalog definitions can chain the call
        """
        if self.max_x <= 0 or self.max_y <= 0:
            raise MalformedLayoutError(
                f"Layout '{self.name}' has non-positive bounds ({self.max_x}, {self.max_y})"
            )
        if not self.node_positions:
            raise MalformedLayoutError(f"Layout '{self.name}' has no clearings")

        seen = set()
        for key, blocked in self.paths():
            for a, b in (key, *blocked):
                for node in (a, b):
                    if not 0 <= node < self.node_count:
                        raise MalformedLayoutError(
                            f"Layout '{self.name}' references unknown clearing {node}"
                        )
                if a == b:
                    raise MalformedLayoutError(
                        f"Layout '{self.name}' joins clearing {a} to itself"
                    )
            if key in seen:
                raise MalformedLayoutError(
                    f"Layout '{self.name}' declares path {key[0]}-{key[1]} twice"
                )
            if key in blocked:
                raise MalformedLayoutError(
                    f"Path {key[0]}-{key[1]} in layout '{self.name}' blocks itself"
                )
            seen.add(key)
        return self
