"""Request/response schemas for ministry ranks and ministry skills."""

from datetime import datetime

from pydantic import Field, field_validator

from ministry_hub.schemas.common import CamelModel, blank_to_none


def _strip(v: object) -> object:
    return v.strip() if isinstance(v, str) else v


class MinistryRankUpdate(CamelModel):
    NON_NULLABLE = frozenset({"name"})

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: object) -> object:
        return _strip(v)

    @field_validator("description", mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class MinistryRankCreate(MinistryRankUpdate):
    name: str = Field(..., min_length=1, max_length=100)


class MinistryRankRead(CamelModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class MinistrySkillUpdate(CamelModel):
    NON_NULLABLE = frozenset({"name", "description"})

    name: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = Field(default=None, min_length=1, max_length=500)

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return _strip(v)


class MinistrySkillCreate(MinistrySkillUpdate):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)


class MinistrySkillRead(CamelModel):
    id: int
    name: str
    description: str
    created_at: datetime
    updated_at: datetime
