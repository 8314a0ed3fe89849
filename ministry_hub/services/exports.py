"""Column layouts and row mapping for the spreadsheet export endpoints."""

from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session

from ministry_hub.models import (
    Church,
    ContactSubmission,
    Member,
    Minister,
    MinistryRank,
    MinistrySkill,
)
from ministry_hub.services.directory import church_names, people_counts_by_church
from ministry_hub.services.excel import ExcelColumn

CHURCH_COLUMNS = [
    ExcelColumn("ID", "id"),
    ExcelColumn("Name", "name"),
    ExcelColumn("Email", "email"),
    ExcelColumn("Address", "address"),
    ExcelColumn("Description", "description"),
    ExcelColumn("Link/Website", "link"),
    ExcelColumn("Latitude", "latitude"),
    ExcelColumn("Longitude", "longitude"),
    ExcelColumn("Member Count", "member_count"),
    ExcelColumn("Minister Count", "minister_count"),
    ExcelColumn("Total Count", "total_count"),
    ExcelColumn("Created Date", "created_date"),
    ExcelColumn("Last Updated", "last_updated"),
]

MEMBER_COLUMNS = [
    ExcelColumn("ID", "id"),
    ExcelColumn("First Name", "first_name"),
    ExcelColumn("Middle Name", "middle_name"),
    ExcelColumn("Last Name", "last_name"),
    ExcelColumn("Church", "church_name"),
    ExcelColumn("Gender", "gender"),
    ExcelColumn("Birthdate", "birthdate"),
    ExcelColumn("Year Joined", "year_joined"),
    ExcelColumn("Ministry Involvement", "ministry_involvement"),
    ExcelColumn("Occupation", "occupation"),
    ExcelColumn("Educational Attainment", "educational_attainment"),
    ExcelColumn("School", "school"),
    ExcelColumn("Degree", "degree"),
    ExcelColumn("Mobile Number", "mobile_number"),
    ExcelColumn("Email", "email"),
    ExcelColumn("Home Address", "home_address"),
    ExcelColumn("Active", "active"),
    ExcelColumn("Created Date", "created_date"),
]

MINISTER_COLUMNS = [
    ExcelColumn("ID", "id"),
    ExcelColumn("First Name", "first_name"),
    ExcelColumn("Middle Name", "middle_name"),
    ExcelColumn("Last Name", "last_name"),
    ExcelColumn("Suffix", "suffix"),
    ExcelColumn("Church", "church_name"),
    ExcelColumn("Gender", "gender"),
    ExcelColumn("Civil Status", "civil_status"),
    ExcelColumn("Date of Birth", "date_of_birth"),
    ExcelColumn("Place of Birth", "place_of_birth"),
    ExcelColumn("Address", "address"),
    ExcelColumn("Email", "email"),
    ExcelColumn("Telephone", "telephone"),
    ExcelColumn("Skills", "skills"),
    ExcelColumn("Created Date", "created_date"),
]

NAME_DESCRIPTION_COLUMNS = [
    ExcelColumn("ID", "id"),
    ExcelColumn("Name", "name"),
    ExcelColumn("Description", "description"),
    ExcelColumn("Created Date", "created_date"),
    ExcelColumn("Last Updated", "last_updated"),
]

CONTACT_COLUMNS = [
    ExcelColumn("ID", "id"),
    ExcelColumn("Name", "name"),
    ExcelColumn("Email", "email"),
    ExcelColumn("Contact Number", "contact_number"),
    ExcelColumn("Message", "description"),
    ExcelColumn("Submitted", "created_date"),
]


def _day(value: datetime | None) -> str:
    return value.date().isoformat() if value else ""


def church_rows(db: Session, churches: Iterable[Church]) -> list[dict[str, Any]]:
    counts = people_counts_by_church(db)
    rows = []
    for church in churches:
        member_count, minister_count = counts.get(church.id, (0, 0))
        rows.append(
            {
                "id": church.id,
                "name": church.name,
                "email": church.email,
                "address": church.address,
                "description": church.description,
                "link": church.link,
                "latitude": church.latitude,
                "longitude": church.longitude,
                "member_count": member_count,
                "minister_count": minister_count,
                "total_count": member_count + minister_count,
                "created_date": _day(church.created_at),
                "last_updated": _day(church.updated_at),
            }
        )
    return rows


def member_rows(db: Session, members: Iterable[Member]) -> list[dict[str, Any]]:
    names = church_names(db)
    return [
        {
            "id": m.id,
            "first_name": m.first_name,
            "middle_name": m.middle_name,
            "last_name": m.last_name,
            "church_name": names.get(m.church_id, ""),
            "gender": m.gender,
            "birthdate": m.birthdate,
            "year_joined": m.year_joined,
            "ministry_involvement": m.ministry_involvement,
            "occupation": m.occupation,
            "educational_attainment": m.educational_attainment,
            "school": m.school,
            "degree": m.degree,
            "mobile_number": m.mobile_number,
            "email": m.email,
            "home_address": m.home_address,
            "active": "Yes" if m.is_active else "No",
            "created_date": _day(m.created_at),
        }
        for m in members
    ]


def minister_rows(db: Session, ministers: Iterable[Minister]) -> list[dict[str, Any]]:
    names = church_names(db)
    return [
        {
            "id": m.id,
            "first_name": m.first_name,
            "middle_name": m.middle_name,
            "last_name": m.last_name,
            "suffix": m.suffix,
            "church_name": names.get(m.church_id, ""),
            "gender": m.gender,
            "civil_status": m.civil_status,
            "date_of_birth": m.date_of_birth,
            "place_of_birth": m.place_of_birth,
            "address": m.address,
            "email": m.email,
            "telephone": m.telephone,
            "skills": m.skills,
            "created_date": _day(m.created_at),
        }
        for m in ministers
    ]


def catalogue_rows(items: Iterable[MinistryRank | MinistrySkill]) -> list[dict[str, Any]]:
    return [
        {
            "id": item.id,
            "name": item.name,
            "description": item.description,
            "created_date": _day(item.created_at),
            "last_updated": _day(item.updated_at),
        }
        for item in items
    ]


def contact_rows(items: Iterable[ContactSubmission]) -> list[Mapping[str, Any]]:
    return [
        {
            "id": c.id,
            "name": c.name,
            "email": c.email,
            "contact_number": c.contact_number,
            "description": c.description,
            "created_date": _day(c.created_at),
        }
        for c in items
    ]
