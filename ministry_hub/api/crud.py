"""Route factory: the five CRUD endpoints for one entity, backed by a CrudService."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from ministry_hub.api.deps import DbSession, require_admin
from ministry_hub.schemas.common import MessageResponse
from ministry_hub.services.crud import ConstraintViolationError, CrudService

logger = logging.getLogger(__name__)

CRUD_OPERATIONS = frozenset({"list", "get", "create", "replace", "update", "delete"})
PUBLIC_READS = frozenset({"list", "get"})


def _admin_only(operation: str, public: frozenset[str]) -> list:
    return [] if operation in public else [Depends(require_admin)]


def register_crud_routes(
    router: APIRouter,
    service: CrudService,
    *,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_schema: type[BaseModel],
    detail_schema: type[BaseModel] | None = None,
    public: frozenset[str] = PUBLIC_READS,
) -> APIRouter:
    """
    Add GET/POST on the collection and GET/PUT/PATCH/DELETE on /{entity_id}.

    PUT takes the full create body and replaces the record; PATCH takes any
    subset. `detail_schema` (default `read_schema`) shapes single-record
    responses, `read_schema` the collection. Operations not in `public`
    require an admin. Register extra static routes (export, search) before
    calling this so they are not shadowed by /{entity_id}.
    """
    unknown = public - CRUD_OPERATIONS
    if unknown:
        raise ValueError(f"Unknown CRUD operations: {sorted(unknown)}")
    detail_schema = detail_schema or read_schema

    def not_found() -> HTTPException:
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=service.not_found_message)

    def conflict(e: ConstraintViolationError) -> HTTPException:
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

    @router.get("", response_model=list[read_schema], dependencies=_admin_only("list", public))
    def list_entities(db: DbSession):
        return service.list(db)

    @router.post(
        "",
        response_model=detail_schema,
        status_code=status.HTTP_201_CREATED,
        dependencies=_admin_only("create", public),
    )
    def create_entity(body: create_schema, db: DbSession):
        try:
            row = service.create(db, body)
        except ConstraintViolationError as e:
            raise conflict(e) from e
        logger.info("%s created", service.label, extra={"entity_id": row.id})
        return row

    @router.get("/{entity_id}", response_model=detail_schema, dependencies=_admin_only("get", public))
    def get_entity(entity_id: int, db: DbSession):
        row = service.get_by_id(db, entity_id)
        if row is None:
            raise not_found()
        return row

    def _write(write, entity_id: int, body: BaseModel, db) -> object:
        try:
            row = write(db, entity_id, body)
        except ConstraintViolationError as e:
            raise conflict(e) from e
        if row is None:
            raise not_found()
        return row

    @router.put("/{entity_id}", response_model=detail_schema, dependencies=_admin_only("replace", public))
    def replace_entity(entity_id: int, body: create_schema, db: DbSession):
        return _write(service.replace, entity_id, body, db)

    @router.patch("/{entity_id}", response_model=detail_schema, dependencies=_admin_only("update", public))
    def update_entity(entity_id: int, body: update_schema, db: DbSession):
        return _write(service.update, entity_id, body, db)

    @router.delete(
        "/{entity_id}",
        response_model=MessageResponse,
        dependencies=_admin_only("delete", public),
    )
    def delete_entity(entity_id: int, db: DbSession) -> MessageResponse:
        try:
            deleted = service.delete(db, entity_id)
        except ConstraintViolationError as e:
            raise conflict(e) from e
        if not deleted:
            raise not_found()
        logger.info("%s deleted", service.label, extra={"entity_id": entity_id})
        return MessageResponse(message=f"{service.label} deleted")

    return router
