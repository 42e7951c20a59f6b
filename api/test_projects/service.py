"""
Test project business logic.

Scope:
- required-name check (the only validation this resource has)
- not-found signalling for id-addressed operations
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

# `test_projects.id` is a serial (int4) column.
MAX_PROJECT_ID = 2**31 - 1


def _to_project(row: dict) -> schemas.Project:
    return schemas.Project(id=int(row["id"]), name=str(row["name"]))


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Project not found.",
    )


def _require_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Name is required.",
        )
    return name


def _is_addressable(project_id: int) -> bool:
    return 0 < project_id <= MAX_PROJECT_ID


async def list_projects() -> list[schemas.Project]:
    rows = await repository.list_projects()
    return [_to_project(row) for row in rows]


async def get_project(project_id: int) -> schemas.Project:
    if not _is_addressable(project_id):
        raise _not_found()
    row = await repository.get_project(project_id)
    if row is None:
        raise _not_found()
    return _to_project(row)


async def create_project(payload: schemas.ProjectInput) -> schemas.Project:
    name = _require_name(payload.name)
    row = await repository.create_project(name)
    logger.info("project_created id=%s", row["id"])
    return _to_project(row)


async def update_project(project_id: int, payload: schemas.ProjectInput) -> schemas.Project:
    name = _require_name(payload.name)
    if not _is_addressable(project_id):
        raise _not_found()
    row = await repository.update_project(project_id, name)
    if row is None:
        raise _not_found()
    return _to_project(row)


async def delete_project(project_id: int) -> schemas.DeleteResponse:
    if not _is_addressable(project_id) or not await repository.delete_project(project_id):
        raise _not_found()
    logger.info("project_deleted id=%s", project_id)
    return schemas.DeleteResponse(id=project_id)
