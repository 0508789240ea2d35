"""Public exceptions for the Redmine SDK.

Transport-level failures are not wrapped: ``httpx.TransportError`` subclasses
reach the caller unchanged.
"""


class RedmineError(Exception):
    """Base exception for all Redmine SDK errors."""


class RedmineConfigError(RedmineError):
    """Configuration error (missing env vars, invalid page size)."""


class MalformedEndpointError(RedmineConfigError):
    """The configured endpoint cannot be parsed as an absolute URL."""

    def __init__(self, endpoint: str) -> None:
        super().__init__(f"Malformed endpoint URL: {endpoint!r}")
        self.endpoint = endpoint


class DecodeError(RedmineError):
    """Response body does not match the expected JSON shape."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteError(RedmineError):
    """Error reported by the Redmine API in an error envelope."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors if errors is not None else []

    @classmethod
    def from_errors(cls, errors: list[str], status_code: int) -> "RemoteError":
        """Build an error whose message is the newline-joined error list."""
        return cls("\n".join(errors), status_code=status_code, errors=errors)


class NotFoundError(RemoteError):
    """The addressed resource does not exist (HTTP 404 on update/delete)."""

    def __init__(self) -> None:
        super().__init__("Not Found", status_code=404)
