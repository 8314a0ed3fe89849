"""Queries that span churches and the people attached to them: stats, search, recent joins."""

from datetime import timedelta

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from ministry_hub.models import (
    Church,
    ChurchCoverPhoto,
    ChurchEvent,
    ContactSubmission,
    Member,
    Minister,
    MinistryRank,
    MinistrySkill,
)
from ministry_hub.schemas.analytics import DashboardCounts
from ministry_hub.schemas.church import ChurchStats
from ministry_hub.schemas.people import PersonSearchResult, RecentMember
from ministry_hub.services.crud import utcnow

MIN_SEARCH_QUERY_LEN = 2
SEARCH_RESULT_LIMIT = 20
RECENT_MEMBER_DAYS = 31
RECENT_MEMBER_LIMIT = 50


def _counts_by_church(db: Session, model: type[Member] | type[Minister]) -> dict[int, int]:
    rows = db.query(model.church_id, func.count(model.id)).group_by(model.church_id).all()
    return {church_id: count for church_id, count in rows}


def people_counts_by_church(db: Session) -> dict[int, tuple[int, int]]:
    """church id -> (member count, minister count), only for churches with people."""
    members = _counts_by_church(db, Member)
    ministers = _counts_by_church(db, Minister)
    return {
        church_id: (members.get(church_id, 0), ministers.get(church_id, 0))
        for church_id in set(members) | set(ministers)
    }


def church_names(db: Session) -> dict[int, str]:
    return dict(db.query(Church.id, Church.name).all())


def church_stats(db: Session, church_id: int) -> ChurchStats | None:
    """Member/minister head counts for one church; None if the church does not exist."""
    if db.get(Church, church_id) is None:
        return None
    member_count = db.query(func.count(Member.id)).filter(Member.church_id == church_id).scalar() or 0
    minister_count = (
        db.query(func.count(Minister.id)).filter(Minister.church_id == church_id).scalar() or 0
    )
    return ChurchStats(
        church_id=church_id,
        member_count=member_count,
        minister_count=minister_count,
        total_people=member_count + minister_count,
    )


def members_of_church(db: Session, church_id: int) -> list[Member]:
    return (
        db.query(Member)
        .filter(Member.church_id == church_id)
        .order_by(Member.last_name, Member.first_name, Member.id)
        .all()
    )


def ministers_of_church(db: Session, church_id: int) -> list[Minister]:
    return (
        db.query(Minister)
        .filter(Minister.church_id == church_id)
        .order_by(Minister.last_name, Minister.first_name, Minister.id)
        .all()
    )


def search_people(
    db: Session,
    model: type[Member] | type[Minister],
    query: str,
    limit: int = SEARCH_RESULT_LIMIT,
) -> list[PersonSearchResult]:
    """
    Case-insensitive name search.

    Each word may hit first, middle or last name; the whole query may also hit
    "first middle last", "first last" or "last, first".
    """
    query = query.strip()
    words = query.split()
    if len(query) < MIN_SEARCH_QUERY_LEN or not words:
        return []

    middle = func.coalesce(model.middle_name, "")
    conditions = []
    for word in words:
        conditions.extend(
            [
                model.first_name.icontains(word, autoescape=True),
                model.last_name.icontains(word, autoescape=True),
                model.middle_name.icontains(word, autoescape=True),
            ]
        )
    full_names = (
        model.first_name + " " + middle + " " + model.last_name,
        model.first_name + " " + model.last_name,
        model.last_name + ", " + model.first_name,
    )
    conditions.extend(name.icontains(query, autoescape=True) for name in full_names)

    rows = (
        db.query(model, Church.name)
        .outerjoin(Church, model.church_id == Church.id)
        .filter(or_(*conditions))
        .order_by(model.first_name, model.last_name, model.id)
        .limit(limit)
        .all()
    )
    results = []
    for person, church_name in rows:
        if isinstance(person, Member):
            phone, image = person.mobile_number, person.profile_picture
        else:
            phone, image = person.telephone, person.image_url
        results.append(
            PersonSearchResult(
                id=person.id,
                first_name=person.first_name,
                last_name=person.last_name,
                middle_name=person.middle_name,
                church_id=person.church_id,
                church_name=church_name,
                email=person.email,
                phone=phone,
                gender=person.gender,
                image_url=image,
            )
        )
    return results


def recent_members(
    db: Session,
    days: int = RECENT_MEMBER_DAYS,
    limit: int = RECENT_MEMBER_LIMIT,
) -> list[RecentMember]:
    """Members created within the last `days` days, newest first."""
    threshold = utcnow() - timedelta(days=days)
    rows = (
        db.query(Member, Church.name, Church.address)
        .outerjoin(Church, Member.church_id == Church.id)
        .filter(Member.created_at >= threshold)
        .order_by(Member.created_at.desc(), Member.id.desc())
        .limit(limit)
        .all()
    )
    return [
        RecentMember(
            id=m.id,
            first_name=m.first_name,
            last_name=m.last_name,
            email=m.email,
            mobile_number=m.mobile_number,
            church_id=m.church_id,
            church_name=name,
            church_address=address,
            profile_picture=m.profile_picture,
            gender=m.gender,
            year_joined=m.year_joined,
            occupation=m.occupation,
            created_at=m.created_at,
        )
        for m, name, address in rows
    ]


def dashboard_counts(db: Session) -> DashboardCounts:
    def count(model) -> int:
        return db.query(func.count(model.id)).scalar() or 0

    return DashboardCounts(
        churches=count(Church),
        members=count(Member),
        ministers=count(Minister),
        ministry_ranks=count(MinistryRank),
        ministry_skills=count(MinistrySkill),
        church_events=count(ChurchEvent),
        church_covers=count(ChurchCoverPhoto),
        contact_submissions=count(ContactSubmission),
    )
