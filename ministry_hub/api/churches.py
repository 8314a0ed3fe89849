"""Church endpoints: CRUD plus per-church people lists, stats and exports."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from ministry_hub.api.crud import register_crud_routes
from ministry_hub.api.deps import AdminUser, DbSession
from ministry_hub.models import Church
from ministry_hub.schemas.church import ChurchCreate, ChurchRead, ChurchStats, ChurchUpdate
from ministry_hub.schemas.people import MemberRead, MinisterRead
from ministry_hub.services import directory, entities, exports
from ministry_hub.services.excel import build_workbook, excel_response, export_filename
from ministry_hub.services.upload_guard import sanitize_filename

router = APIRouter()


def _church_or_404(db, church_id: int) -> Church:
    church = entities.churches.get_by_id(db, church_id)
    if church is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=entities.churches.not_found_message)
    return church


@router.get("/export")
def export_churches(db: DbSession, _admin: AdminUser) -> Response:
    """Spreadsheet of every church with its member and minister counts."""
    rows = exports.church_rows(db, entities.churches.list(db))
    content = build_workbook("Churches", exports.CHURCH_COLUMNS, rows)
    return excel_response(content, export_filename("churches"))


@router.get("/{church_id}/stats", response_model=ChurchStats)
def get_church_stats(church_id: int, db: DbSession) -> ChurchStats:
    _church_or_404(db, church_id)
    return directory.church_stats(db, church_id)


@router.get("/{church_id}/members", response_model=list[MemberRead])
def list_church_members(church_id: int, db: DbSession, _admin: AdminUser):
    _church_or_404(db, church_id)
    return directory.members_of_church(db, church_id)


@router.get("/{church_id}/ministers", response_model=list[MinisterRead])
def list_church_ministers(church_id: int, db: DbSession, _admin: AdminUser):
    _church_or_404(db, church_id)
    return directory.ministers_of_church(db, church_id)


@router.get("/{church_id}/members/export")
def export_church_members(church_id: int, db: DbSession, _admin: AdminUser) -> Response:
    church = _church_or_404(db, church_id)
    rows = exports.member_rows(db, directory.members_of_church(db, church_id))
    content = build_workbook("Members", exports.MEMBER_COLUMNS, rows)
    return excel_response(content, export_filename(f"{sanitize_filename(church.name)}-members"))


@router.get("/{church_id}/ministers/export")
def export_church_ministers(church_id: int, db: DbSession, _admin: AdminUser) -> Response:
    church = _church_or_404(db, church_id)
    rows = exports.minister_rows(db, directory.ministers_of_church(db, church_id))
    content = build_workbook("Ministers", exports.MINISTER_COLUMNS, rows)
    return excel_response(content, export_filename(f"{sanitize_filename(church.name)}-ministers"))


register_crud_routes(
    router,
    entities.churches,
    create_schema=ChurchCreate,
    update_schema=ChurchUpdate,
    read_schema=ChurchRead,
)
