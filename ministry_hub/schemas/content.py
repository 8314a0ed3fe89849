"""Request/response schemas for church events, cover photos and contact submissions."""

import datetime as dt

from pydantic import EmailStr, Field, field_validator

from ministry_hub.schemas.common import CamelModel, blank_to_none


class ChurchEventUpdate(CamelModel):
    NON_NULLABLE = frozenset({"name", "description", "place", "datetime"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1, max_length=2000)
    place: str | None = Field(default=None, min_length=1, max_length=500)
    datetime: dt.datetime | None = None
    image_url: str | None = None

    @field_validator("image_url", mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class ChurchEventCreate(ChurchEventUpdate):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=2000)
    place: str = Field(..., min_length=1, max_length=500)
    datetime: dt.datetime


class ChurchEventRead(CamelModel):
    id: int
    name: str
    description: str
    place: str
    datetime: dt.datetime
    image_url: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime


class ChurchCoverUpdate(CamelModel):
    NON_NULLABLE = frozenset({"name", "description", "cover_image"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1, max_length=1000)
    cover_image: str | None = Field(default=None, min_length=1, max_length=2048)


class ChurchCoverCreate(ChurchCoverUpdate):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=1000)
    cover_image: str = Field(..., min_length=1, max_length=2048)


class ChurchCoverRead(CamelModel):
    id: int
    name: str
    description: str
    cover_image: str
    created_at: dt.datetime
    updated_at: dt.datetime


class ContactSubmissionUpdate(CamelModel):
    NON_NULLABLE = frozenset({"name", "email", "contact_number", "description"})

    name: str | None = Field(default=None, min_length=1, max_length=100)
    email: EmailStr | None = None
    contact_number: str | None = Field(default=None, min_length=7, max_length=32)
    description: str | None = Field(default=None, min_length=1, max_length=500)


class ContactSubmissionCreate(ContactSubmissionUpdate):
    """Public contact form body."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    contact_number: str = Field(..., min_length=7, max_length=32)
    description: str = Field(..., min_length=1, max_length=500)


class ContactSubmissionRead(CamelModel):
    id: int
    name: str
    email: str
    contact_number: str
    description: str
    created_at: dt.datetime
    updated_at: dt.datetime
