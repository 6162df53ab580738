"""Health check route."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from camp.config import Settings
from camp.domain.service import PersistenceGateway

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Liveness plus the resources running on the local store."""

    status: str
    timestamp: datetime
    environment: str
    local_store_resources: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], gateway: FromDishka[PersistenceGateway]
) -> HealthResponse:
    """Report the process as up.

    The service stays healthy after a failover; the affected resources are
    listed so operators can see the remote store refusing access.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        environment=settings.environment,
        local_store_resources=[str(key) for key in gateway.failed_over()],
    )
