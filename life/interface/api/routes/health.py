"""Liveness check."""

from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError, version

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from life.config import Settings

router = APIRouter(tags=["health"], route_class=DishkaRoute)


def _package_version() -> str:
    try:
        return version("life-api")
    except PackageNotFoundError:
        # Running from a checkout without an install
        return "0.0.0"


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    environment: str
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is serving requests.

    Touches no database or credential store, so a slow dependency does not
    get the container restarted.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        version=_package_version(),
        git_sha=settings.git_sha,
    )
