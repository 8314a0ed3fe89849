"""Admin-area endpoints. Mounted under /admin, which the route guard protects."""

from fastapi import APIRouter

from ministry_hub.api.deps import AdminUser, DbSession
from ministry_hub.models.user import User
from ministry_hub.schemas.analytics import DashboardCounts
from ministry_hub.schemas.auth import UserRead, UsersListResponse
from ministry_hub.schemas.people import RecentMembersResponse
from ministry_hub.services import directory

router = APIRouter()


@router.get("/members/recent", response_model=RecentMembersResponse)
def list_recent_members(db: DbSession, _admin: AdminUser) -> RecentMembersResponse:
    """Members who joined in the last month, newest first."""
    rows = directory.recent_members(db)
    return RecentMembersResponse(data=rows, count=len(rows))


@router.get("/dashboard", response_model=DashboardCounts)
def get_dashboard(db: DbSession, _admin: AdminUser) -> DashboardCounts:
    return directory.dashboard_counts(db)


@router.get("/users", response_model=UsersListResponse)
def list_users(db: DbSession, _admin: AdminUser) -> UsersListResponse:
    """List dashboard accounts (admin only); password hashes are never returned."""
    users = db.query(User).order_by(User.id).all()
    return UsersListResponse(users=[UserRead(id=u.id, email=u.email, role=u.role) for u in users])
