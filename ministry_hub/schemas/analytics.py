"""Pydantic schemas for growth analytics and the admin dashboard."""

from typing import Literal

from pydantic import Field

from ministry_hub.schemas.common import CamelModel

GrowthType = Literal["members", "ministers", "both"]


class GrowthPoint(CamelModel):
    """One day in the growth series. Counts are omitted for series not requested."""

    date: str = Field(..., description="ISO date (YYYY-MM-DD).")
    date_formatted: str = Field(..., description="Short label, e.g. 'Mar 4'.")
    members: int | None = None
    ministers: int | None = None
    members_cumulative: int | None = None
    ministers_cumulative: int | None = None
    is_forecast: bool = False


class GrowthSummary(CamelModel):
    total_members: int
    total_ministers: int
    period: str
    forecast_days: int


class GrowthData(CamelModel):
    historical: list[GrowthPoint]
    forecast: list[GrowthPoint]
    combined: list[GrowthPoint]
    summary: GrowthSummary


class GrowthResponse(CamelModel):
    success: bool = True
    data: GrowthData


class DashboardCounts(CamelModel):
    """Row counts per entity for the admin dashboard cards."""

    churches: int
    members: int
    ministers: int
    ministry_ranks: int
    ministry_skills: int
    church_events: int
    church_covers: int
    contact_submissions: int
