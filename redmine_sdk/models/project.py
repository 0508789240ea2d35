"""Pydantic models for Redmine projects."""

from pydantic import BaseModel

from redmine_sdk.models.common import CustomField, IdName, Pagination


class Project(BaseModel):
    """Project record.

    ``id`` is assigned by the server and stays ``None`` on a project that has
    not been created yet. ``parent_id`` is only meaningful on create/update;
    the server reports the parent through ``parent``.
    """

    id: int | None = None
    parent: IdName | None = None
    parent_id: int | None = None
    name: str = ""
    identifier: str = ""
    description: str | None = None
    homepage: str | None = None
    status: int | None = None
    is_public: bool | None = None
    created_on: str | None = None
    updated_on: str | None = None
    custom_fields: list[CustomField] | None = None


class ProjectRequest(BaseModel):
    """``{"project": {...}}`` envelope sent on create and update."""

    project: Project

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)


class ProjectResult(BaseModel):
    """``{"project": {...}}`` envelope returned for a single project."""

    project: Project


class ProjectsResult(Pagination):
    """One page of ``GET /projects.json``."""

    projects: list[Project]
