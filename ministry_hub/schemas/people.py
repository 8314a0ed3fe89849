"""Request/response schemas for members and ministers."""

from datetime import date, datetime

from pydantic import EmailStr, Field, field_validator

from ministry_hub.schemas.common import CamelModel, Gender, blank_to_none
from ministry_hub.schemas.minister_profile import (
    MinisterAwardCreate,
    MinisterAwardRead,
    MinisterCaseReportCreate,
    MinisterCaseReportRead,
    MinisterChildCreate,
    MinisterChildRead,
    MinisterEducationBackgroundCreate,
    MinisterEducationBackgroundRead,
    MinisterEmergencyContactCreate,
    MinisterEmergencyContactRead,
    MinisterEmploymentRecordCreate,
    MinisterEmploymentRecordRead,
    MinisterMinistryExperienceCreate,
    MinisterMinistryExperienceRead,
    MinisterMinistryRecordCreate,
    MinisterMinistryRecordRead,
    MinisterMinistrySkillCreate,
    MinisterMinistrySkillRead,
    MinisterSeminarCreate,
    MinisterSeminarRead,
)

MIN_YEAR_JOINED = 1900

_MEMBER_OPTIONAL_TEXT = (
    "profile_picture",
    "middle_name",
    "ministry_involvement",
    "occupation",
    "educational_attainment",
    "school",
    "degree",
    "mobile_number",
    "email",
    "home_address",
    "facebook_link",
    "x_link",
    "instagram_link",
    "tiktok_link",
    "notes",
)


class MemberUpdate(CamelModel):
    """Partial member update; also the field set shared with MemberCreate."""

    NON_NULLABLE = frozenset(
        {"church_id", "first_name", "last_name", "gender", "birthdate", "year_joined", "is_active"}
    )

    church_id: int | None = Field(default=None, gt=0)
    profile_picture: str | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    middle_name: str | None = Field(default=None, max_length=255)
    gender: Gender | None = None
    birthdate: date | None = None
    year_joined: int | None = Field(default=None, ge=MIN_YEAR_JOINED)
    ministry_involvement: str | None = None
    occupation: str | None = None
    educational_attainment: str | None = None
    school: str | None = None
    degree: str | None = None
    mobile_number: str | None = Field(default=None, max_length=64)
    email: EmailStr | None = None
    home_address: str | None = None
    facebook_link: str | None = None
    x_link: str | None = None
    instagram_link: str | None = None
    tiktok_link: str | None = None
    notes: str | None = None
    is_active: bool | None = None

    @field_validator(*_MEMBER_OPTIONAL_TEXT, mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)

    @field_validator("gender", mode="before")
    @classmethod
    def lower_gender(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("year_joined")
    @classmethod
    def year_not_in_future(cls, v: int | None) -> int | None:
        if v is not None and v > date.today().year:
            raise ValueError("Year cannot be in the future")
        return v


class MemberCreate(MemberUpdate):
    church_id: int = Field(..., gt=0)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    gender: Gender
    birthdate: date
    year_joined: int = Field(..., ge=MIN_YEAR_JOINED)
    is_active: bool = True


class MemberRead(CamelModel):
    id: int
    church_id: int
    profile_picture: str | None = None
    first_name: str
    last_name: str
    middle_name: str | None = None
    gender: str
    birthdate: date
    year_joined: int
    ministry_involvement: str | None = None
    occupation: str | None = None
    educational_attainment: str | None = None
    school: str | None = None
    degree: str | None = None
    mobile_number: str | None = None
    email: str | None = None
    home_address: str | None = None
    facebook_link: str | None = None
    x_link: str | None = None
    instagram_link: str | None = None
    tiktok_link: str | None = None
    notes: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


# List sections of the profile, replaced as a whole when present in a write.
MINISTER_PROFILE_SECTIONS = (
    "children",
    "emergency_contacts",
    "education_backgrounds",
    "ministry_experiences",
    "ministry_skills",
    "ministry_records",
    "awards_recognitions",
    "employment_records",
    "seminars_conferences",
    "case_reports",
)

_MINISTER_OPTIONAL_TEXT = (
    "middle_name",
    "suffix",
    "nickname",
    "email",
    "telephone",
    "biography",
    "present_address",
    "permanent_address",
    "skills",
    "hobbies",
    "certified_by",
    "image_url",
    "signature_image_url",
)


class MinisterUpdate(CamelModel):
    """Partial minister update; also the field set shared with MinisterCreate."""

    NON_NULLABLE = frozenset(
        {
            "church_id",
            "first_name",
            "last_name",
            "date_of_birth",
            "place_of_birth",
            "address",
            "gender",
            "civil_status",
            *MINISTER_PROFILE_SECTIONS,
        }
    )

    church_id: int | None = Field(default=None, gt=0)
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    middle_name: str | None = Field(default=None, max_length=255)
    suffix: str | None = Field(default=None, max_length=32)
    nickname: str | None = Field(default=None, max_length=255)
    date_of_birth: date | None = None
    place_of_birth: str | None = Field(default=None, min_length=1)
    address: str | None = Field(default=None, min_length=1)
    gender: Gender | None = None
    civil_status: str | None = Field(default=None, min_length=1, max_length=32)
    email: EmailStr | None = None
    telephone: str | None = Field(default=None, max_length=64)
    biography: str | None = None
    present_address: str | None = None
    permanent_address: str | None = None
    skills: str | None = None
    hobbies: str | None = None
    certified_by: str | None = None
    image_url: str | None = None
    signature_image_url: str | None = None

    children: list[MinisterChildCreate] | None = None
    emergency_contacts: list[MinisterEmergencyContactCreate] | None = None
    education_backgrounds: list[MinisterEducationBackgroundCreate] | None = None
    ministry_experiences: list[MinisterMinistryExperienceCreate] | None = None
    ministry_skills: list[MinisterMinistrySkillCreate] | None = None
    ministry_records: list[MinisterMinistryRecordCreate] | None = None
    awards_recognitions: list[MinisterAwardCreate] | None = None
    employment_records: list[MinisterEmploymentRecordCreate] | None = None
    seminars_conferences: list[MinisterSeminarCreate] | None = None
    case_reports: list[MinisterCaseReportCreate] | None = None

    @field_validator(*_MINISTER_OPTIONAL_TEXT, mode="before")
    @classmethod
    def optional_blank(cls, v: object) -> object:
        return blank_to_none(v)

    @field_validator("gender", mode="before")
    @classmethod
    def lower_gender(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v


class MinisterCreate(MinisterUpdate):
    church_id: int = Field(..., gt=0)
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    date_of_birth: date
    place_of_birth: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    gender: Gender
    civil_status: str = Field(..., min_length=1, max_length=32)

    children: list[MinisterChildCreate] = Field(default_factory=list)
    emergency_contacts: list[MinisterEmergencyContactCreate] = Field(default_factory=list)
    education_backgrounds: list[MinisterEducationBackgroundCreate] = Field(default_factory=list)
    ministry_experiences: list[MinisterMinistryExperienceCreate] = Field(default_factory=list)
    ministry_skills: list[MinisterMinistrySkillCreate] = Field(default_factory=list)
    ministry_records: list[MinisterMinistryRecordCreate] = Field(default_factory=list)
    awards_recognitions: list[MinisterAwardCreate] = Field(default_factory=list)
    employment_records: list[MinisterEmploymentRecordCreate] = Field(default_factory=list)
    seminars_conferences: list[MinisterSeminarCreate] = Field(default_factory=list)
    case_reports: list[MinisterCaseReportCreate] = Field(default_factory=list)


class MinisterRead(CamelModel):
    id: int
    church_id: int
    first_name: str
    last_name: str
    middle_name: str | None = None
    suffix: str | None = None
    nickname: str | None = None
    date_of_birth: date
    place_of_birth: str
    address: str
    gender: str
    civil_status: str
    email: str | None = None
    telephone: str | None = None
    biography: str | None = None
    present_address: str | None = None
    permanent_address: str | None = None
    skills: str | None = None
    hobbies: str | None = None
    certified_by: str | None = None
    image_url: str | None = None
    signature_image_url: str | None = None
    created_at: datetime
    updated_at: datetime


class MinisterDetail(MinisterRead):
    """One minister with every profile section."""

    children: list[MinisterChildRead] = Field(default_factory=list)
    emergency_contacts: list[MinisterEmergencyContactRead] = Field(default_factory=list)
    education_backgrounds: list[MinisterEducationBackgroundRead] = Field(default_factory=list)
    ministry_experiences: list[MinisterMinistryExperienceRead] = Field(default_factory=list)
    ministry_skills: list[MinisterMinistrySkillRead] = Field(default_factory=list)
    ministry_records: list[MinisterMinistryRecordRead] = Field(default_factory=list)
    awards_recognitions: list[MinisterAwardRead] = Field(default_factory=list)
    employment_records: list[MinisterEmploymentRecordRead] = Field(default_factory=list)
    seminars_conferences: list[MinisterSeminarRead] = Field(default_factory=list)
    case_reports: list[MinisterCaseReportRead] = Field(default_factory=list)


class PersonSearchResult(CamelModel):
    """Search hit for a member or minister, with the church name joined in."""

    id: int
    first_name: str
    last_name: str
    middle_name: str | None = None
    church_id: int
    church_name: str | None = None
    email: str | None = None
    phone: str | None = None
    gender: str
    image_url: str | None = None


class SearchResponse(CamelModel):
    success: bool
    message: str | None = None
    data: list[PersonSearchResult] = Field(default_factory=list)


class RecentMember(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str | None = None
    mobile_number: str | None = None
    church_id: int
    church_name: str | None = None
    church_address: str | None = None
    profile_picture: str | None = None
    gender: str
    year_joined: int
    occupation: str | None = None
    created_at: datetime


class RecentMembersResponse(CamelModel):
    data: list[RecentMember]
    count: int = Field(..., ge=0)
