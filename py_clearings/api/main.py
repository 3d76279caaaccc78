"""FastAPI main application."""

from typing import Any, Dict, List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..config import GenerationSettings, get_layout, get_layouts, settings
from ..config.log_setup import configure_logging
from ..core.layout_analysis import summarize
from ..core.layout_generator import LayoutGenerator
from ..core.path_solver import InvalidSettingsError
from ..utils.random import create_prng, new_seed

configure_logging(settings.log_level, settings.log_format)

logger = structlog.get_logger()

app = FastAPI(
    title="Clearing Map Generator API",
    description="Generates clearing-and-path maps for woodland board games",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class MapGenerationRequest(BaseModel):
    """Request to generate a new clearing map."""

    width: float = Field(
        default=settings.default_map_width, gt=0, le=settings.max_map_width,
        description="Viewport width",
    )
    height: float = Field(
        default=settings.default_map_height, gt=0, le=settings.max_map_height,
        description="Viewport height",
    )
    seed: Optional[str] = Field(None, description="Random seed for reproducible generation")
    layout_name: Optional[str] = Field(None, description="Layout to use; random when omitted")
    settings: GenerationSettings = Field(default_factory=GenerationSettings)


class ClearingModel(BaseModel):
    id: int
    title: str
    x: float
    y: float


class PathModel(BaseModel):
    source: int
    target: int


class MapSummary(BaseModel):
    """Degree and connectivity statistics for a generated map."""

    node_count: int
    edge_count: int
    min_degree: int
    max_degree: int
    mean_degree: float
    connected: bool
    degree_violations: List[int]


class MapGenerationResponse(BaseModel):
    """A generated map. ``error`` is non-empty for a best-effort result."""

    seed: str
    layout: str
    attempts: int
    nodes: List[ClearingModel]
    edges: List[PathModel]
    error: str
    summary: MapSummary


class LayoutSummary(BaseModel):
    name: str
    node_count: int
    path_count: int
    max_x: float
    max_y: float


class LayoutDetail(LayoutSummary):
    node_positions: List[Tuple[float, float]]
    paths: List[Dict[str, Any]]


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Clearing Map Generator API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "layouts": len(get_layouts())}


@app.get("/layouts", response_model=List[LayoutSummary])
async def list_map_layouts():
    """List the built-in layouts."""
    return [
        LayoutSummary(
            name=layout.name,
            node_count=layout.node_count,
            path_count=len(layout.valid_connections),
            max_x=layout.max_x,
            max_y=layout.max_y,
        )
        for layout in get_layouts()
    ]


@app.get("/layouts/{name}", response_model=LayoutDetail)
async def get_map_layout(name: str):
    """Full definition of one layout."""
    try:
        layout = get_layout(name)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Layout '{name}' not found")

    return LayoutDetail(
        name=layout.name,
        node_count=layout.node_count,
        path_count=len(layout.valid_connections),
        max_x=layout.max_x,
        max_y=layout.max_y,
        node_positions=[(float(x), float(y)) for x, y in layout.node_positions],
        paths=[
            {"path": spec.path, "blocks": list(spec.blocks)}
            for spec in layout.valid_connections
        ],
    )


@app.post("/maps/generate", response_model=MapGenerationResponse)
def generate_map(request: MapGenerationRequest):
    """
    Generate a clearing map synchronously.

    A map that could not meet the connection bounds is still returned, with
    the warning in ``error``.
    """
    seed = request.seed or new_seed()
    logger.info("Map generation requested", seed=seed, layout=request.layout_name)

    generator = LayoutGenerator(prng=create_prng(seed))
    try:
        result = generator.generate(
            request.width, request.height, request.settings, request.layout_name
        )
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Layout '{request.layout_name}' not found")
    except InvalidSettingsError as e:
        raise HTTPException(status_code=422, detail=str(e))

    if result.error:
        logger.warning("Map generated with unmet bounds", seed=seed, layout=result.layout_name)

    payload = result.to_dict()
    payload["seed"] = seed
    payload["summary"] = summarize(result, request.settings)
    return payload


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
