"""System endpoints."""

from fastapi import APIRouter

from umpire.application.dtos.health_dto import HealthDTO

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthDTO)
async def health() -> HealthDTO:
    """Liveness probe; answers ok whenever the process is serving."""
    return HealthDTO()
