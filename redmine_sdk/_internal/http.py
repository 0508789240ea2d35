"""Shared HTTP client configuration."""

import httpx

from redmine_sdk._version import __version__

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"redmine-sdk/{__version__}"


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT},
    )
