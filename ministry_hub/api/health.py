"""Health check endpoint with database connectivity check."""

from fastapi import APIRouter

from ministry_hub.api.deps import DbSession
from ministry_hub.core.config import get_settings
from ministry_hub.core.database import check_db_connected
from ministry_hub.schemas.health import HealthResponse
from ministry_hub.services.storage import is_storage_configured

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: DbSession) -> HealthResponse:
    """
    Return service health status and database connectivity.
    Used by load balancers and monitoring.
    """
    settings = get_settings()
    return HealthResponse(
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
        storage="configured" if is_storage_configured(settings) else "not_configured",
    )
