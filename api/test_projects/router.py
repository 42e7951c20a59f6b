"""
Test project API endpoints.

Routes:
- GET/POST          /api/test   (a trailing slash is the same route)
- GET/PUT/DELETE    /api/test/{id}

Everything after `/api/test/` is the id segment, so `/api/test/1/extra` is an
invalid id (400), not an unknown path. The id is checked before the method.
"""

from __future__ import annotations

import re

from fastapi import APIRouter, Body, Depends, HTTPException, status

from . import schemas, service

router = APIRouter()

ITEM_PATH = "/api/test/{project_id:path}"
# Signed 64-bit range; wider values are malformed rather than merely absent.
MAX_ID_VALUE = 2**63 - 1
MIN_ID_VALUE = -(2**63)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_project_id(project_id: str) -> int:
    """
    Parse the remainder of the path after `/api/test/`.

    An empty remainder is the collection path, where only GET and POST exist.
    Non-integer or out-of-range segments are a client error (400) rather than
    FastAPI's 422.
    """
    if not project_id:
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method Not Allowed",
            headers={"Allow": "GET, POST"},
        )
    if not _ID_PATTERN.fullmatch(project_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid ID",
        )
    value = int(project_id)
    if not MIN_ID_VALUE <= value <= MAX_ID_VALUE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid ID",
        )
    return value


@router.get("/api/test", response_model=list[schemas.Project], summary="Get all test projects")
@router.get("/api/test/", response_model=list[schemas.Project], include_in_schema=False)
async def list_projects() -> list[schemas.Project]:
    return await service.list_projects()


@router.post(
    "/api/test",
    response_model=schemas.Project,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new test project",
)
@router.post(
    "/api/test/",
    response_model=schemas.Project,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_project(payload: schemas.ProjectInput = Body(...)) -> schemas.Project:
    return await service.create_project(payload)


@router.get(
    ITEM_PATH,
    response_model=schemas.Project,
    summary="Get test project by ID",
    responses={400: {"description": "Invalid ID"}, 404: {"description": "Project not found"}},
)
async def get_project(project_id: int = Depends(parse_project_id)) -> schemas.Project:
    return await service.get_project(project_id)


@router.put(
    ITEM_PATH,
    response_model=schemas.Project,
    summary="Update test project",
    responses={400: {"description": "Invalid ID or name"}, 404: {"description": "Project not found"}},
)
async def update_project(
    payload: schemas.ProjectInput = Body(...),
    project_id: int = Depends(parse_project_id),
) -> schemas.Project:
    return await service.update_project(project_id, payload)


@router.delete(
    ITEM_PATH,
    response_model=schemas.DeleteResponse,
    summary="Delete test project",
    responses={400: {"description": "Invalid ID"}, 404: {"description": "Project not found"}},
)
async def delete_project(project_id: int = Depends(parse_project_id)) -> schemas.DeleteResponse:
    return await service.delete_project(project_id)


@router.api_route(ITEM_PATH, methods=["POST", "PATCH", "OPTIONS"], include_in_schema=False)
async def item_method_not_allowed(_: int = Depends(parse_project_id)) -> None:
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": "GET, PUT, DELETE"},
    )
