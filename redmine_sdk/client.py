"""Redmine REST API client.

Example usage:
    from redmine_sdk import RedmineClient, ProjectsFilter, ProjectStatus

    with RedmineClient("https://redmine.example.com", "your-api-key") as client:
        project = client.projects.get(1)

        active = ProjectsFilter()
        active.status(ProjectStatus.ACTIVE)
        projects = client.projects.list(active)
"""

import logging
import os
import time
from types import TracebackType
from typing import Any

import httpx

from redmine_sdk._internal.http import DEFAULT_TIMEOUT, create_http_client
from redmine_sdk._internal.redaction import redact_payload, redact_url
from redmine_sdk.exceptions import MalformedEndpointError, RedmineConfigError
from redmine_sdk.filters import Filter
from redmine_sdk.resources.projects import ProjectsResource

logger = logging.getLogger(__name__)

UNSET = -1  # limit/offset sentinel: parameter is not sent
DEFAULT_PAGE_SIZE = 100

API_KEY_HEADER = "X-Redmine-API-Key"
SWITCH_USER_HEADER = "X-Redmine-Switch-User"


class RedmineClient:
    """Client for a Redmine instance.

    Holds the endpoint, the API key, an optional impersonated user and the
    pagination defaults, and performs the authenticated HTTP exchange that
    every resource operation is built on.

    ``limit`` and ``offset`` default to ``UNSET`` (-1), in which case the
    parameter is left out of list requests. A single client is meant to be
    used from one thread at a time.
    """

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        *,
        limit: int = UNSET,
        offset: int = UNSET,
        switch_user: str = "",
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            endpoint: Base URL of the Redmine instance.
            api_key: API key sent with every request.
            limit: Page size for list requests, or UNSET.
            offset: Page offset for list requests, or UNSET.
            switch_user: Login to impersonate, empty for none.
            timeout: Request timeout in seconds (ignored with http_client).
            http_client: Optional pre-configured httpx client. It is not
                closed by ``close()``.
        """
        self.endpoint = endpoint
        self.api_key = api_key
        self.limit = limit
        self.offset = offset
        self._switch_user = switch_user
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else create_http_client(timeout=timeout)
        self._projects = ProjectsResource(self)

    @classmethod
    def traversing(
        cls,
        endpoint: str,
        api_key: str,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        **kwargs: Any,
    ) -> "RedmineClient":
        """Create a client with a concrete page size and offset 0.

        Raises:
            RedmineConfigError: If page_size is not positive.
        """
        if page_size <= 0:
            raise RedmineConfigError(f"page_size must be positive, got {page_size}")
        return cls(endpoint, api_key, limit=page_size, offset=0, **kwargs)

    @classmethod
    def from_env(cls) -> "RedmineClient":
        """Create a client from environment variables.

        Required environment variables:
            REDMINE_ENDPOINT: Base URL of the Redmine instance.
            REDMINE_API_KEY: The API key.

        Optional environment variables:
            REDMINE_SWITCH_USER: Login to impersonate.
            REDMINE_TIMEOUT_MS: Request timeout in milliseconds.
            REDMINE_LIMIT: Default page size for list requests.
            REDMINE_OFFSET: Default page offset for list requests.

        Raises:
            RedmineConfigError: If a required variable is missing.
            ValueError: If a numeric variable is not a valid integer.
        """
        endpoint = os.environ.get("REDMINE_ENDPOINT")
        api_key = os.environ.get("REDMINE_API_KEY")
        if not endpoint or not api_key:
            raise RedmineConfigError("REDMINE_ENDPOINT and REDMINE_API_KEY must be set")

        timeout_ms = int(os.environ.get("REDMINE_TIMEOUT_MS", str(int(DEFAULT_TIMEOUT * 1000))))
        limit = int(os.environ.get("REDMINE_LIMIT", str(UNSET)))
        offset = int(os.environ.get("REDMINE_OFFSET", str(UNSET)))

        return cls(
            endpoint,
            api_key,
            limit=limit,
            offset=offset,
            switch_user=os.environ.get("REDMINE_SWITCH_USER", ""),
            timeout=timeout_ms / 1000,
        )

    @property
    def switch_user(self) -> str:
        """Login of the impersonated user, empty when not set."""
        return self._switch_user

    def set_switch_user(self, login: str) -> None:
        """Act as ``login`` on all subsequent requests ("" to stop)."""
        self._switch_user = login

    @property
    def projects(self) -> ProjectsResource:
        return self._projects

    # =========================================================================
    # URLs
    # =========================================================================

    def url_with_filter(
        self,
        path: str,
        query_filter: Filter | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> str:
        """Build the URL for a list request.

        ``limit`` and ``offset`` come first when they are not UNSET, followed
        by the filter pairs. A filter pair named ``limit`` or ``offset`` is
        dropped when that parameter is set here. The keyword arguments
        override the configured values for this call only. The filter is not
        modified.

        Raises:
            MalformedEndpointError: If the endpoint is not an absolute URL.
        """
        limit = self.limit if limit is None else limit
        offset = self.offset if offset is None else offset

        params: list[tuple[str, str]] = []
        if limit > UNSET:
            params.append(("limit", str(limit)))
        if offset > UNSET:
            params.append(("offset", str(offset)))
        if query_filter is not None:
            # pagination set on the client replaces the filter's own value
            sent = {name for name, _ in params}
            params.extend(pair for pair in query_filter.pairs() if pair[0] not in sent)
        return self._build_url(path, params)

    def keyed_url(self, path: str) -> str:
        """Build a URL that also carries the API key as the ``key`` parameter."""
        return self._build_url(path, [("key", self.api_key)])

    def _build_url(self, path: str, params: list[tuple[str, str]]) -> str:
        base = self._parse_endpoint()
        return str(base.copy_with(path=base.path.rstrip("/") + path, params=params))

    def _parse_endpoint(self) -> httpx.URL:
        try:
            url = httpx.URL(self.endpoint)
        except httpx.InvalidURL as exc:
            raise MalformedEndpointError(self.endpoint) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise MalformedEndpointError(self.endpoint)
        return url

    # =========================================================================
    # Requests
    # =========================================================================

    def request(self, method: str, url: str, *, content: str | None = None) -> httpx.Response:
        """Build and send a request, with a JSON body when ``content`` is given."""
        headers = {"Content-Type": "application/json"} if content is not None else None
        request = self._http.build_request(method, url, content=content, headers=headers)
        return self.send(request)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Attach the auth headers to ``request`` and send it.

        Transport errors are not retried and propagate unchanged.
        """
        request.headers[API_KEY_HEADER] = self.api_key
        if self._switch_user:
            request.headers[SWITCH_USER_HEADER] = self._switch_user

        started = time.monotonic()
        try:
            response = self._http.send(request)
        except httpx.TransportError as exc:
            logger.debug(
                "%s %s failed: %r (headers=%s)",
                request.method,
                redact_url(request.url),
                exc,
                redact_payload(request.headers),
            )
            raise
        logger.debug(
            "%s %s -> %d (%.0f ms)",
            request.method,
            redact_url(request.url),
            response.status_code,
            (time.monotonic() - started) * 1000,
        )
        return response

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            self._http.close()

    def __enter__(self) -> "RedmineClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


def get_client() -> RedmineClient:
    """Get a client configured from environment variables.

    Returns:
        A configured RedmineClient instance.

    Raises:
        RedmineConfigError: If REDMINE_ENDPOINT or REDMINE_API_KEY is missing.
    """
    return RedmineClient.from_env()
