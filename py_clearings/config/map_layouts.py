"""
Built-in map layouts.

Every layout has twelve clearings. Coordinates are in the layout's own
space (``max_x`` by ``max_y``) and get scaled to the viewport at generation
time. Paths that would cross on the board block each other; declaring the
conflict on one side is enough.
"""

from typing import Dict, List

from ..core.layouts import MapLayout, PathSpec
from ..utils.random import RandomSource


def _paths(*specs) -> tuple:
    """Build PathSpecs from ``"a-b"`` strings or ``("a-b", [blocks])`` pairs."""
    result = []
    for spec in specs:
        if isinstance(spec, str):
            result.append(PathSpec(spec))
        else:
            path, blocks = spec
            result.append(PathSpec(path, tuple(blocks)))
    return tuple(result)


# Four columns by three rows; each square cell may take one of its diagonals.
GRID = MapLayout(
    name="grid",
    node_positions=(
        (1, 1), (3, 1), (5, 1), (7, 1),
        (1, 3), (3, 3), (5, 3), (7, 3),
        (1, 5), (3, 5), (5, 5), (7, 5),
    ),
    max_x=8,
    max_y=6,
    valid_connections=_paths(
        "0-1", "1-2", "2-3",
        "4-5", "5-6", "6-7",
        "8-9", "9-10", "10-11",
        "0-4", "1-5", "2-6", "3-7",
        "4-8", "5-9", "6-10", "7-11",
        ("0-5", ["1-4"]), "1-4",
        ("1-6", ["2-5"]), "2-5",
        ("2-7", ["3-6"]), "3-6",
        ("4-9", ["5-8"]), "5-8",
        ("5-10", ["6-9"]), "6-9",
        ("6-11", ["7-10"]), "7-10",
    ),
).validate()

# Middle row shifted right: a triangular mesh plus two long north-south
# roads that cut through the middle row.
STAGGERED = MapLayout(
    name="staggered",
    node_positions=(
        (1, 1), (3, 1), (5, 1), (7, 1),
        (2, 3), (4, 3), (6, 3), (8, 3),
        (1, 5), (3, 5), (5, 5), (7, 5),
    ),
    max_x=9,
    max_y=6,
    valid_connections=_paths(
        "0-1", "1-2", "2-3",
        "4-5", "5-6", "6-7",
        "8-9", "9-10", "10-11",
        "0-4", "1-4", "1-5", "2-5", "2-6", "3-6", "3-7",
        "4-8", "4-9", "5-9", "5-10", "6-10", "6-11", "7-11",
        ("1-9", ["4-5"]),
        ("2-10", ["5-6"]),
    ),
).validate()

# Eight clearings around the edge, four in a central square, with spokes
# between them. The square's two diagonals cross.
RING = MapLayout(
    name="ring",
    node_positions=(
        (1, 1), (4, 1), (7, 1), (7, 4),
        (7, 7), (4, 7), (1, 7), (1, 4),
        (3, 3), (5, 3), (5, 5), (3, 5),
    ),
    max_x=8,
    max_y=8,
    valid_connections=_paths(
        "0-1", "1-2", "2-3", "3-4", "4-5", "5-6", "6-7", "0-7",
        "8-9", "9-10", "10-11", "8-11",
        "0-8", "1-8", "7-8",
        "1-9", "2-9", "3-9",
        "3-10", "4-10", "5-10",
        "5-11", "6-11", "7-11",
        ("8-10", ["9-11"]), "9-11",
    ),
).validate()

LAYOUTS: Dict[str, MapLayout] = {
    layout.name: layout for layout in (GRID, STAGGERED, RING)
}


def list_layouts() -> List[str]:
    """Names of all built-in layouts, in catalog order."""
    return list(LAYOUTS.keys())


def get_layouts() -> List[MapLayout]:
    return list(LAYOUTS.values())


def get_layout(name: str) -> MapLayout:
    """
    Look up a layout by name.

    Raises:
        KeyError: If no layout has that name
    """
    if name not in LAYOUTS:
        raise KeyError(f"Unknown layout '{name}'. Available: {', '.join(LAYOUTS)}")
    return LAYOUTS[name]


def choose_layout(prng: RandomSource) -> MapLayout:
    """Pick a layout uniformly at random."""
    return prng.choice(get_layouts())
