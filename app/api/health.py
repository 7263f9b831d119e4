"""Health check endpoint with storage connectivity check."""

from fastapi import APIRouter

from app.api.deps import SettingsDep, StorageDep
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(storage: StorageDep, settings: SettingsDep) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    database = None
    if storage.backend_name == "database":
        database = "connected" if storage.ping() else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        storage=storage.backend_name,
        database=database,
    )
