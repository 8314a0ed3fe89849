"""Public-site content: church events, cover photos and contact-form submissions."""

from fastapi import APIRouter
from fastapi.responses import Response

from ministry_hub.api.crud import register_crud_routes
from ministry_hub.api.deps import AdminUser, DbSession
from ministry_hub.schemas.content import (
    ChurchCoverCreate,
    ChurchCoverRead,
    ChurchCoverUpdate,
    ChurchEventCreate,
    ChurchEventRead,
    ChurchEventUpdate,
    ContactSubmissionCreate,
    ContactSubmissionRead,
    ContactSubmissionUpdate,
)
from ministry_hub.services import entities, exports
from ministry_hub.services.excel import build_workbook, excel_response, export_filename

events_router = APIRouter()
covers_router = APIRouter()
contact_router = APIRouter()


@contact_router.get("/export")
def export_contact_submissions(db: DbSession, _admin: AdminUser) -> Response:
    rows = exports.contact_rows(entities.contact_submissions.list(db))
    content = build_workbook("Contact Submissions", exports.CONTACT_COLUMNS, rows)
    return excel_response(content, export_filename("contact-submissions"))


register_crud_routes(
    events_router,
    entities.church_events,
    create_schema=ChurchEventCreate,
    update_schema=ChurchEventUpdate,
    read_schema=ChurchEventRead,
)
register_crud_routes(
    covers_router,
    entities.church_covers,
    create_schema=ChurchCoverCreate,
    update_schema=ChurchCoverUpdate,
    read_schema=ChurchCoverRead,
)
# Anyone may submit the contact form; reading submissions is admin-only.
register_crud_routes(
    contact_router,
    entities.contact_submissions,
    create_schema=ContactSubmissionCreate,
    update_schema=ContactSubmissionUpdate,
    read_schema=ContactSubmissionRead,
    public=frozenset({"create"}),
)
