"""Project operations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redmine_sdk._internal.responses import check_acknowledged, decode_response
from redmine_sdk.filters import ProjectsFilter
from redmine_sdk.models import Project, ProjectRequest, ProjectResult, ProjectsResult

if TYPE_CHECKING:
    from redmine_sdk.client import RedmineClient

logger = logging.getLogger(__name__)

COLLECTION_PATH = "/projects.json"


def _item_path(project_id: int) -> str:
    return f"/projects/{project_id}.json"


class ProjectsResource:
    """Project endpoints of a RedmineClient.

    Every method issues exactly one request and either returns the decoded
    result or raises: ``RemoteError`` / ``NotFoundError`` for errors reported
    by the server, ``DecodeError`` for unexpected bodies, and the original
    ``httpx.TransportError`` for network failures.
    """

    def __init__(self, client: RedmineClient) -> None:
        self._client = client

    def get(self, project_id: int) -> Project:
        """Fetch a single project by id."""
        response = self._client.request("GET", self._client.keyed_url(_item_path(project_id)))
        return decode_response(response, ProjectResult).project

    def list_page(
        self,
        project_filter: ProjectsFilter | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ProjectsResult:
        """Fetch one page of projects along with its pagination envelope.

        Args:
            project_filter: Optional status constraints and other query pairs.
            limit: Page size for this call; defaults to the client's limit.
            offset: Page offset for this call; defaults to the client's offset.
        """
        url = self._client.url_with_filter(COLLECTION_PATH, project_filter, limit=limit, offset=offset)
        return decode_response(self._client.request("GET", url), ProjectsResult)

    def list(self, project_filter: ProjectsFilter | None = None) -> list[Project]:
        """List one page of projects using the client's limit and offset."""
        return self.list_page(project_filter).projects

    def create(self, project: Project) -> Project:
        """Create a project and return it as stored by the server (with id)."""
        body = ProjectRequest(project=project).to_json()
        response = self._client.request("POST", self._client.keyed_url(COLLECTION_PATH), content=body)
        created = decode_response(response, ProjectResult, expected_status=201).project
        logger.debug("Created project %s (%s)", created.id, created.identifier)
        return created

    def update(self, project: Project) -> None:
        """Update the project addressed by ``project.id``.

        Raises:
            ValueError: If the project has no id.
            NotFoundError: If the server does not know the project.
        """
        if project.id is None:
            raise ValueError("project.id is required to update a project")
        body = ProjectRequest(project=project).to_json()
        response = self._client.request("PUT", self._client.keyed_url(_item_path(project.id)), content=body)
        check_acknowledged(response)

    def delete(self, project_id: int) -> None:
        """Delete a project by id.

        Raises:
            NotFoundError: If the server does not know the project.
        """
        response = self._client.request("DELETE", self._client.keyed_url(_item_path(project_id)), content="")
        check_acknowledged(response)
