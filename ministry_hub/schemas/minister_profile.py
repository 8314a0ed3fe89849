"""Schemas for the list sections of a minister profile.

Each section is sent and returned as a whole list; `*Create` is one entry of
a request body, `*Read` the stored entry with its id.
"""

from datetime import date
from typing import Annotated

from pydantic import Field, field_validator

from ministry_hub.schemas.common import CamelModel, Gender, blank_to_none

RequiredText = Annotated[str, Field(min_length=1)]
Year = Annotated[str, Field(min_length=1, max_length=16, description="Year as entered, e.g. '2015'")]


class _Entry(CamelModel):
    @field_validator("*", mode="before")
    @classmethod
    def strip_text(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v


class MinisterChildCreate(_Entry):
    name: RequiredText
    place_of_birth: RequiredText
    date_of_birth: date
    gender: Gender

    @field_validator("gender", mode="before")
    @classmethod
    def lower_gender(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v


class MinisterEmergencyContactCreate(_Entry):
    name: RequiredText
    relationship: RequiredText
    address: RequiredText
    contact_number: str = Field(..., min_length=1, max_length=64)


class MinisterEducationBackgroundCreate(_Entry):
    school_name: RequiredText
    educational_attainment: RequiredText
    date_graduated: date | None = None
    description: str | None = None
    course: str | None = None

    @field_validator("date_graduated", "description", "course", mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class MinisterMinistryExperienceCreate(_Entry):
    ministry_rank_id: int = Field(..., gt=0)
    description: str | None = None
    from_year: Year
    to_year: Year | None = None

    @field_validator("description", "to_year", mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class MinisterMinistrySkillCreate(_Entry):
    ministry_skill_id: int = Field(..., gt=0)


class MinisterMinistryRecordCreate(_Entry):
    church_location_id: int = Field(..., gt=0)
    from_year: Year
    to_year: Year | None = None
    contribution: str | None = None

    @field_validator("to_year", "contribution", mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class MinisterAwardCreate(_Entry):
    year: Year
    description: RequiredText


class MinisterEmploymentRecordCreate(_Entry):
    company_name: RequiredText
    from_year: Year
    to_year: Year | None = None
    position: RequiredText

    @field_validator("to_year", mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class MinisterSeminarCreate(_Entry):
    title: RequiredText
    description: str | None = None
    place: str | None = None
    year: Year
    number_of_hours: int = Field(..., ge=0)

    @field_validator("description", "place", mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)


class MinisterCaseReportCreate(_Entry):
    description: RequiredText
    year: Year


class MinisterChildRead(MinisterChildCreate):
    id: int


class MinisterEmergencyContactRead(MinisterEmergencyContactCreate):
    id: int


class MinisterEducationBackgroundRead(MinisterEducationBackgroundCreate):
    id: int


class MinisterMinistryExperienceRead(MinisterMinistryExperienceCreate):
    id: int


class MinisterMinistrySkillRead(MinisterMinistrySkillCreate):
    id: int


class MinisterMinistryRecordRead(MinisterMinistryRecordCreate):
    id: int


class MinisterAwardRead(MinisterAwardCreate):
    id: int


class MinisterEmploymentRecordRead(MinisterEmploymentRecordCreate):
    id: int


class MinisterSeminarRead(MinisterSeminarCreate):
    id: int


class MinisterCaseReportRead(MinisterCaseReportCreate):
    id: int
