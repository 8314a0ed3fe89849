"""Health check body for the Ministry Hub API."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus the state of the database and object storage."""

    status: Literal["ok"] = "ok"
    service: str = Field(default="ministry-hub", description="Service name for monitors")
    environment: str = Field(description="APP_ENV (dev or prod)")
    database: Literal["connected", "disconnected"]
    storage: Literal["configured", "not_configured"] = Field(
        description="Whether upload and image routes have bucket credentials; not a live check",
    )
