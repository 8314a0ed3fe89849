"""Member/minister growth series: daily joins, running totals and a short forecast."""

from datetime import UTC, date, datetime, time, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from ministry_hub.models import Member, Minister
from ministry_hub.schemas.analytics import GrowthData, GrowthPoint, GrowthSummary, GrowthType
from ministry_hub.services.crud import utcnow

FORECAST_DAYS = 7
# Forecast uses the average daily joins over this many trailing days.
TREND_WINDOW_DAYS = 7


def _short_label(day: date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def daily_counts(db: Session, model: type[Member] | type[Minister], since: date) -> dict[str, int]:
    """ISO date -> rows created that day, for days on or after `since`."""
    day = func.date(model.created_at)
    threshold = datetime.combine(since, time.min, tzinfo=UTC)
    rows = (
        db.query(day, func.count(model.id))
        .filter(model.created_at >= threshold)
        .group_by(day)
        .all()
    )
    # PostgreSQL returns date objects, SQLite returns strings.
    return {str(d): int(c) for d, c in rows}


def build_growth_series(
    member_counts: dict[str, int] | None,
    minister_counts: dict[str, int] | None,
    days: int,
    today: date,
) -> tuple[list[GrowthPoint], list[GrowthPoint]]:
    """
    Return (historical, forecast).

    historical has one point per day for the last `days` days (today last),
    zero-filled, with running totals. forecast projects FORECAST_DAYS more days
    at the rounded average of the trailing TREND_WINDOW_DAYS.
    A None counts mapping means that series was not requested and is omitted.
    """
    historical: list[GrowthPoint] = []
    member_total = 0
    minister_total = 0
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        key = day.isoformat()
        point = GrowthPoint(date=key, date_formatted=_short_label(day))
        if member_counts is not None:
            point.members = member_counts.get(key, 0)
            member_total += point.members
            point.members_cumulative = member_total
        if minister_counts is not None:
            point.ministers = minister_counts.get(key, 0)
            minister_total += point.ministers
            point.ministers_cumulative = minister_total
        historical.append(point)

    recent = historical[-TREND_WINDOW_DAYS:]
    member_avg = sum(p.members or 0 for p in recent) / len(recent) if recent else 0
    minister_avg = sum(p.ministers or 0 for p in recent) / len(recent) if recent else 0

    forecast: list[GrowthPoint] = []
    for offset in range(1, FORECAST_DAYS + 1):
        day = today + timedelta(days=offset)
        point = GrowthPoint(date=day.isoformat(), date_formatted=_short_label(day), is_forecast=True)
        if member_counts is not None:
            point.members = round(member_avg)
            member_total += point.members
            point.members_cumulative = member_total
        if minister_counts is not None:
            point.ministers = round(minister_avg)
            minister_total += point.ministers
            point.ministers_cumulative = minister_total
        forecast.append(point)
    return historical, forecast


def growth_analytics(db: Session, days: int, series: GrowthType, today: date | None = None) -> GrowthData:
    today = today or utcnow().date()
    since = today - timedelta(days=days - 1)
    member_counts = daily_counts(db, Member, since) if series in ("members", "both") else None
    minister_counts = daily_counts(db, Minister, since) if series in ("ministers", "both") else None
    historical, forecast = build_growth_series(member_counts, minister_counts, days, today)
    return GrowthData(
        historical=historical,
        forecast=forecast,
        combined=historical + forecast,
        summary=GrowthSummary(
            total_members=db.query(func.count(Member.id)).scalar() or 0,
            total_ministers=db.query(func.count(Minister.id)).scalar() or 0,
            period=f"Last {days} days",
            forecast_days=FORECAST_DAYS,
        ),
    )
