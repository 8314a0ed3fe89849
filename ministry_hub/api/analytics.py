"""Member/minister growth analytics for the dashboard charts."""

from typing import Annotated

from fastapi import APIRouter, Query

from ministry_hub.api.deps import AdminUser, DbSession
from ministry_hub.schemas.analytics import GrowthResponse, GrowthType
from ministry_hub.services.analytics import growth_analytics

router = APIRouter()


@router.get("/growth", response_model=GrowthResponse)
def get_growth(
    db: DbSession,
    _admin: AdminUser,
    days: Annotated[int, Query(ge=1, le=365)] = 30,
    series: Annotated[GrowthType, Query(alias="type")] = "both",
) -> GrowthResponse:
    """Daily joins over the last `days` days plus a seven-day forecast."""
    return GrowthResponse(data=growth_analytics(db, days, series))
