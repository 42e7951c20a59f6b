"""
Test project persistence (raw SQL).

Every function is a single statement against `test_projects`.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_projects() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, name
        FROM test_projects
        ORDER BY id
        """
    )


async def get_project(project_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, name
        FROM test_projects
        WHERE id = $1
        """,
        project_id,
    )


async def create_project(name: str) -> dict[str, Any]:
    row = await db.fetch_one(
        """
        INSERT INTO test_projects (name)
        VALUES ($1)
        RETURNING id, name
        """,
        name,
    )
    if row is None:
        raise RuntimeError("Failed to create test project.")
    return row


async def update_project(project_id: int, name: str) -> dict[str, Any] | None:
    """
    Replace the name of an existing project.
    Returns the updated row, or None when no row has this id.
    """
    return await db.fetch_one(
        """
        UPDATE test_projects
        SET name = $2
        WHERE id = $1
        RETURNING id, name
        """,
        project_id,
        name,
    )


async def delete_project(project_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM test_projects
        WHERE id = $1
        RETURNING id
        """,
        project_id,
    )
    return row is not None
