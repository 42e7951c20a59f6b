from __future__ import annotations

import itertools

import pytest
from fastapi.testclient import TestClient

import main
from test_projects import repository


class FakeProjectStore:
    """In-memory stand-in for the `test_projects` table."""

    def __init__(self) -> None:
        self.rows: dict[int, dict] = {}
        self._ids = itertools.count(1)

    async def list_projects(self) -> list[dict]:
        return [dict(row) for _, row in sorted(self.rows.items())]

    async def get_project(self, project_id: int) -> dict | None:
        row = self.rows.get(project_id)
        return dict(row) if row is not None else None

    async def create_project(self, name: str) -> dict:
        project_id = next(self._ids)
        self.rows[project_id] = {"id": project_id, "name": name}
        return dict(self.rows[project_id])

    async def update_project(self, project_id: int, name: str) -> dict | None:
        if project_id not in self.rows:
            return None
        self.rows[project_id]["name"] = name
        return dict(self.rows[project_id])

    async def delete_project(self, project_id: int) -> bool:
        return self.rows.pop(project_id, None) is not None


@pytest.fixture
def store(monkeypatch) -> FakeProjectStore:
    fake = FakeProjectStore()
    for name in ("list_projects", "get_project", "create_project", "update_project", "delete_project"):
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def client(store) -> TestClient:
    # No `with` block: the lifespan (and with it the real DB pool) is not started.
    return TestClient(main.app)
