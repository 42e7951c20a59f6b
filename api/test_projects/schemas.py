"""
Pydantic schemas for test project endpoints.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field


class ProjectInput(BaseModel):
    # Presence is checked in the service so a blank name gets the same 400 as a missing one.
    name: str | None = Field(default=None, validation_alias=AliasChoices("name", "Name"))


class Project(BaseModel):
    id: int
    name: str


class DeleteResponse(BaseModel):
    ok: bool = True
    id: int
