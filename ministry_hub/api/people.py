"""Member and minister endpoints: CRUD, name search and exports.

Creating a member or minister is public (join forms); everything else beyond
reads requires an admin.
"""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import Response

from ministry_hub.api.crud import register_crud_routes
from ministry_hub.api.deps import AdminUser, DbSession
from ministry_hub.models import Member, Minister
from ministry_hub.schemas.people import (
    MemberCreate,
    MemberRead,
    MemberUpdate,
    MinisterCreate,
    MinisterDetail,
    MinisterRead,
    MinisterUpdate,
    SearchResponse,
)
from ministry_hub.services import directory, entities, exports
from ministry_hub.services.excel import build_workbook, excel_response, export_filename

members_router = APIRouter()
ministers_router = APIRouter()

SearchQuery = Annotated[str, Query(max_length=200, description="Name or part of a name.")]

_SHORT_QUERY_MESSAGE = f"Query must be at least {directory.MIN_SEARCH_QUERY_LEN} characters long"


def _search(db, model, q: str) -> SearchResponse:
    if len(q.strip()) < directory.MIN_SEARCH_QUERY_LEN:
        return SearchResponse(success=False, message=_SHORT_QUERY_MESSAGE, data=[])
    return SearchResponse(success=True, data=directory.search_people(db, model, q))


@members_router.get("/search", response_model=SearchResponse)
def search_members(db: DbSession, _admin: AdminUser, q: SearchQuery = "") -> SearchResponse:
    return _search(db, Member, q)


@members_router.get("/export")
def export_members(db: DbSession, _admin: AdminUser) -> Response:
    rows = exports.member_rows(db, entities.members.list(db))
    return excel_response(build_workbook("Members", exports.MEMBER_COLUMNS, rows), export_filename("members"))


@ministers_router.get("/search", response_model=SearchResponse)
def search_ministers(db: DbSession, _admin: AdminUser, q: SearchQuery = "") -> SearchResponse:
    return _search(db, Minister, q)


@ministers_router.get("/export")
def export_ministers(db: DbSession, _admin: AdminUser) -> Response:
    rows = exports.minister_rows(db, entities.ministers.list(db))
    return excel_response(
        build_workbook("Ministers", exports.MINISTER_COLUMNS, rows), export_filename("ministers")
    )


# People records hold personal data: only creation is public.
register_crud_routes(
    members_router,
    entities.members,
    create_schema=MemberCreate,
    update_schema=MemberUpdate,
    read_schema=MemberRead,
    public=frozenset({"create"}),
)
register_crud_routes(
    ministers_router,
    entities.ministers,
    create_schema=MinisterCreate,
    update_schema=MinisterUpdate,
    read_schema=MinisterRead,
    detail_schema=MinisterDetail,
    public=frozenset({"create"}),
)
