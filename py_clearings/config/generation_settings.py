"""
Settings that control layout generation.

Field aliases match the camelCase keys the map editor writes to its saved
settings documents, so those documents validate as-is.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GenerationSettings(BaseModel):
    """Connection bounds, retry budget and naming mode for one generation."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    min_connections: int = Field(
        default=2, ge=1, alias="minConnections",
        description="Fewest paths any clearing may have",
    )
    max_connections: int = Field(
        default=4, ge=1, alias="maxConnections",
        description="Most paths any clearing may have",
    )
    max_attempts: int = Field(
        default=100, ge=1, alias="maxAttempts",
        description="Construction passes to try before settling for the last one",
    )
    use_named_titles: bool = Field(
        default=False, alias="townNames",
        description="Give clearings town names instead of numbered placeholders",
    )

    @model_validator(mode="after")
    def check_connection_bounds(self) -> "GenerationSettings":
        if self.min_connections > self.max_connections:
            raise ValueError(
                f"min_connections ({self.min_connections}) exceeds "
                f"max_connections ({self.max_connections})"
            )
        return self

    def to_document(self) -> Dict[str, Any]:
        """Settings in the editor's saved-document shape."""
        return self.model_dump(by_alias=True)
