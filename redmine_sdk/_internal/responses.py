"""Status checks and body decoding shared by resource operations."""

from typing import NoReturn, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from redmine_sdk.exceptions import DecodeError, NotFoundError, RemoteError
from redmine_sdk.models import ErrorsResult

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(
    response: httpx.Response,
    model: type[ModelT],
    *,
    expected_status: int = 200,
) -> ModelT:
    """Decode a success body into ``model`` or raise the reported error.

    Raises:
        RemoteError: Status differs from ``expected_status`` and the body is
            an error envelope.
        DecodeError: The body does not match ``model`` (or, on failure, the
            error envelope).
    """
    if response.status_code != expected_status:
        raise_remote_error(response)
    try:
        return model.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(
            f"Unexpected {model.__name__} body (status {response.status_code})",
            status_code=response.status_code,
        ) from exc


def check_acknowledged(response: httpx.Response, *, expected_status: int = 200) -> None:
    """Check a bodiless write acknowledgement.

    A 404 is reported as ``NotFoundError`` without reading the body.
    """
    if response.status_code == 404:
        raise NotFoundError()
    if response.status_code != expected_status:
        raise_remote_error(response)


def raise_remote_error(response: httpx.Response) -> NoReturn:
    """Raise ``RemoteError`` from the response's error envelope."""
    try:
        envelope = ErrorsResult.model_validate_json(response.content)
    except ValidationError as exc:
        raise DecodeError(
            f"Unexpected error body (status {response.status_code})",
            status_code=response.status_code,
        ) from exc
    raise RemoteError.from_errors(envelope.errors, response.status_code)
