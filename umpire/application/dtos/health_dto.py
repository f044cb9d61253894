"""DTO for the liveness probe response."""

from pydantic import BaseModel, Field


class HealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    health: str = Field(default="ok", description="Always ok while serving")

    model_config = {"json_schema_extra": {"example": {"health": "ok"}}}
