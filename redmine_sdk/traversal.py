"""Automatic traversal of paginated list endpoints."""

import logging
from collections.abc import Callable, Sequence
from types import TracebackType
from typing import Any, TypeVar

from redmine_sdk.client import DEFAULT_PAGE_SIZE, RedmineClient
from redmine_sdk.exceptions import RedmineConfigError
from redmine_sdk.filters import ProjectsFilter
from redmine_sdk.models import Pagination, Project

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[int, int], tuple[Sequence[T], Pagination]]


def traverse(fetch_page: PageFetcher[T], page_size: int) -> list[T]:
    """Collect every item of a paginated collection.

    ``fetch_page(limit, offset)`` is called with offsets 0, page_size,
    2 * page_size, ... until the page count derived from the most recent
    ``total_count`` is reached. The count is re-read on every page, so a
    collection that shrinks during traversal may end it early. At least one
    request is always made. Any error aborts traversal and discards the
    items collected so far.

    Raises:
        RedmineConfigError: If page_size is not positive.
    """
    if page_size <= 0:
        raise RedmineConfigError(f"page_size must be positive, got {page_size}")

    items: list[T] = []
    current_page = 0
    max_page = 1
    offset = 0
    while current_page < max_page:
        page_items, pagination = fetch_page(page_size, offset)
        items.extend(page_items)
        current_page += 1
        max_page = 1 + (pagination.total_count - 1) // page_size
        offset += page_size

    logger.debug("Traversed %d page(s), %d item(s)", current_page, len(items))
    return items


class FullTraversingClient:
    """Wraps a RedmineClient so list operations return whole collections.

    The wrapped client's ``limit`` and ``offset`` are never modified; each
    traversal tracks its own offset.
    """

    def __init__(self, client: RedmineClient, *, page_size: int | None = None) -> None:
        """Initialize the traversing client.

        Args:
            client: The client used for each page request.
            page_size: Items per request. Defaults to the client's limit when
                it is positive, otherwise DEFAULT_PAGE_SIZE.

        Raises:
            RedmineConfigError: If page_size is not positive.
        """
        if page_size is None:
            page_size = client.limit if client.limit > 0 else DEFAULT_PAGE_SIZE
        if page_size <= 0:
            raise RedmineConfigError(f"page_size must be positive, got {page_size}")
        self._client = client
        self._page_size = page_size

    @classmethod
    def create(
        cls,
        endpoint: str,
        api_key: str,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        **kwargs: Any,
    ) -> "FullTraversingClient":
        """Create a traversing client together with the client it wraps."""
        client = RedmineClient.traversing(endpoint, api_key, page_size=page_size, **kwargs)
        return cls(client, page_size=page_size)

    @property
    def client(self) -> RedmineClient:
        return self._client

    @property
    def page_size(self) -> int:
        return self._page_size

    def projects(self, project_filter: ProjectsFilter | None = None) -> list[Project]:
        """List every project matching ``project_filter`` across all pages."""
        resource = self._client.projects

        def fetch(limit: int, offset: int) -> tuple[list[Project], Pagination]:
            page = resource.list_page(project_filter, limit=limit, offset=offset)
            return page.projects, page

        return traverse(fetch, self._page_size)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FullTraversingClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
