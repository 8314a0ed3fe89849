"""Request/response schemas for churches and church statistics."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from ministry_hub.schemas.common import CamelModel, blank_to_none

_OPTIONAL_TEXT = ("image_url", "address", "email", "description", "link", "latitude", "longitude")


class ChurchUpdate(CamelModel):
    """Partial church update: any subset of fields."""

    NON_NULLABLE = frozenset({"name"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    image_url: str | None = Field(default=None, max_length=2048)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    address: str | None = Field(default=None, max_length=500)
    email: EmailStr | None = None
    description: str | None = Field(default=None, max_length=1000)
    link: str | None = Field(default=None, max_length=255)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    @field_validator(*_OPTIONAL_TEXT, mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class ChurchCreate(ChurchUpdate):
    """Body for creating (POST) or replacing (PUT) a church."""

    name: str = Field(..., min_length=1, max_length=255)


class ChurchRead(CamelModel):
    id: int
    name: str
    image_url: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    address: str | None = None
    email: str | None = None
    description: str | None = None
    link: str | None = None
    created_at: datetime
    updated_at: datetime


class ChurchStats(CamelModel):
    """Head counts attached to one church."""

    church_id: int
    member_count: int = Field(..., ge=0)
    minister_count: int = Field(..., ge=0)
    total_people: int = Field(..., ge=0)
