"""Ministry rank and ministry skill catalogues."""

from fastapi import APIRouter
from fastapi.responses import Response

from ministry_hub.api.crud import register_crud_routes
from ministry_hub.api.deps import AdminUser, DbSession
from ministry_hub.schemas.ministry import (
    MinistryRankCreate,
    MinistryRankRead,
    MinistryRankUpdate,
    MinistrySkillCreate,
    MinistrySkillRead,
    MinistrySkillUpdate,
)
from ministry_hub.services import entities, exports
from ministry_hub.services.excel import build_workbook, excel_response, export_filename

ranks_router = APIRouter()
skills_router = APIRouter()


@ranks_router.get("/export")
def export_ministry_ranks(db: DbSession, _admin: AdminUser) -> Response:
    rows = exports.catalogue_rows(entities.ministry_ranks.list(db))
    content = build_workbook("Ministry Ranks", exports.NAME_DESCRIPTION_COLUMNS, rows)
    return excel_response(content, export_filename("ministry-ranks"))


@skills_router.get("/export")
def export_ministry_skills(db: DbSession, _admin: AdminUser) -> Response:
    rows = exports.catalogue_rows(entities.ministry_skills.list(db))
    content = build_workbook("Ministry Skills", exports.NAME_DESCRIPTION_COLUMNS, rows)
    return excel_response(content, export_filename("ministry-skills"))


register_crud_routes(
    ranks_router,
    entities.ministry_ranks,
    create_schema=MinistryRankCreate,
    update_schema=MinistryRankUpdate,
    read_schema=MinistryRankRead,
)
register_crud_routes(
    skills_router,
    entities.ministry_skills,
    create_schema=MinistrySkillCreate,
    update_schema=MinistrySkillUpdate,
    read_schema=MinistrySkillRead,
)
