"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from stories.adapter.realtime import RoomBroadcaster
from stories.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    git_sha: str
    realtime_connections: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], broadcaster: FromDishka[RoomBroadcaster]
) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        environment=settings.environment,
        git_sha=settings.git_sha,
        realtime_connections=broadcaster.connection_count,
    )
