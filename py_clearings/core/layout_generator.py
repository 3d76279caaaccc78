"""
Clearing map layout generation.

Picks a layout, scales its clearings onto the viewport, names them, and asks
the path solver for a set of paths. The result is the plain node/edge lists
the map editor loads as its starting graph.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import structlog

from ..config.generation_settings import GenerationSettings
from ..config.map_layouts import choose_layout, get_layout
from ..utils.random import RandomSource, create_prng
from .layouts import MapLayout
from .name_generator import ClearingNameGenerator
from .path_solver import build_candidate_index, check_bounds, solve_paths

logger = structlog.get_logger()

RETRY_WARNING = "Max retry threshold reached; map may require adjustments to be valid."


@dataclass
class Clearing:
    """A positioned, titled location on the map."""

    id: int
    title: str
    x: float
    y: float

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title, "x": self.x, "y": self.y}


@dataclass
class Path:
    """An undirected path between two clearings."""

    source: Clearing
    target: Clearing

    def to_dict(self) -> Dict[str, int]:
        return {"source": self.source.id, "target": self.target.id}


@dataclass
class GenerationResult:
    """Clearings and paths of a generated map."""

    nodes: List[Clearing] = field(default_factory=list)
    edges: List[Path] = field(default_factory=list)
    error: str = ""
    layout_name: str = ""
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return not self.error

    def to_dict(self) -> Dict[str, Any]:
        """JSON-compatible form; paths refer to clearings by id."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "error": self.error,
            "layout": self.layout_name,
            "attempts": self.attempts,
        }


def scale_positions(layout: MapLayout, width: float, height: float) -> np.ndarray:
    """Layout coordinates scaled to a ``width`` x ``height`` viewport."""
    positions = np.asarray(layout.node_positions, dtype=np.float64).reshape(-1, 2)
    return positions * np.array([width / layout.max_x, height / layout.max_y])


class LayoutGenerator:
    """
    Generates clearing maps from a layout catalog.

    Each instance owns its PRNG; share nothing between concurrent callers.
    """

    def __init__(
        self,
        prng: Optional[RandomSource] = None,
        layouts: Optional[Sequence[MapLayout]] = None,
        names: Optional[List[str]] = None,
    ):
        """
        Initialize the generator.

        Args:
            prng: Random source; a freshly seeded one is created when omitted
            layouts: Layouts to choose from instead of the built-in catalog
            names: Replacement town name pool
        """
        self.prng = prng or create_prng()
        self.layouts = [layout.validate() for layout in layouts] if layouts is not None else None
        if self.layouts is not None and not self.layouts:
            raise ValueError("At least one layout is required")
        self.namer = ClearingNameGenerator(self.prng, names)

    def _select_layout(self, layout_name: Optional[str]) -> MapLayout:
        if layout_name is None:
            if self.layouts is None:
                return choose_layout(self.prng)
            return self.prng.choice(self.layouts)

        if self.layouts is None:
            return get_layout(layout_name)
        for layout in self.layouts:
            if layout.name == layout_name:
                return layout
        raise KeyError(f"Unknown layout '{layout_name}'")

    def generate(
        self,
        width: float,
        height: float,
        settings: Optional[GenerationSettings] = None,
        layout_name: Optional[str] = None,
    ) -> GenerationResult:
        """
        Generate a map for a ``width`` x ``height`` viewport.

        Args:
            width: Viewport width, > 0
            height: Viewport height, > 0
            settings: Generation settings; defaults when omitted
            layout_name: Use this layout instead of a random one

        Returns:
            GenerationResult. ``error`` is non-empty when no attempt met the
            connection bounds; the paths are then the last attempt's.

        Raises:
            ValueError: On a non-positive viewport
            InvalidSettingsError: On unusable bounds
            KeyError: If ``layout_name`` is unknown
        """
        settings = settings or GenerationSettings()
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")
        check_bounds(settings.min_connections, settings.max_connections, settings.max_attempts)

        layout = self._select_layout(layout_name)
        logger.info(
            "Generating clearing layout",
            layout=layout.name,
            width=width,
            height=height,
            min_connections=settings.min_connections,
            max_connections=settings.max_connections,
        )

        coords = scale_positions(layout, width, height)
        nodes = [
            Clearing(
                id=i,
                title=self.namer.name_for(i, settings.use_named_titles),
                x=float(x),
                y=float(y),
            )
            for i, (x, y) in enumerate(coords)
        ]

        candidates = build_candidate_index(layout.node_count, layout.paths())
        solved = solve_paths(
            layout.node_count,
            candidates,
            settings.min_connections,
            settings.max_connections,
            settings.max_attempts,
            self.prng,
        )

        edges = [Path(source=nodes[a], target=nodes[b]) for a, b in solved.paths]

        return GenerationResult(
            nodes=nodes,
            edges=edges,
            error="" if solved.valid else RETRY_WARNING,
            layout_name=layout.name,
            attempts=solved.attempts,
        )


def generate_layout(
    width: float,
    height: float,
    settings: Optional[GenerationSettings] = None,
    prng: Optional[RandomSource] = None,
    layout_name: Optional[str] = None,
) -> GenerationResult:
    """Generate a single map with a throwaway :class:`LayoutGenerator`."""
    return LayoutGenerator(prng=prng).generate(width, height, settings, layout_name)
