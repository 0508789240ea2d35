"""Tests for public exceptions."""

import pytest

from redmine_sdk.exceptions import (
    DecodeError,
    MalformedEndpointError,
    NotFoundError,
    RedmineConfigError,
    RedmineError,
    RemoteError,
)


class TestRedmineError:
    """Tests for base RedmineError."""

    def test_is_exception(self):
        """RedmineError should be an Exception."""
        assert issubclass(RedmineError, Exception)

    def test_can_be_raised(self):
        """RedmineError should be raisable with message."""
        with pytest.raises(RedmineError) as exc_info:
            raise RedmineError("test error")
        assert str(exc_info.value) == "test error"


class TestRemoteError:
    """Tests for RemoteError."""

    def test_inherits_from_redmine_error(self):
        """RemoteError should inherit from RedmineError."""
        assert issubclass(RemoteError, RedmineError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = RemoteError("Request failed")
        assert str(error) == "Request failed"
        assert error.status_code is None
        assert error.errors == []

    def test_from_errors_joins_with_newlines(self):
        """Should join the reported errors into the message."""
        error = RemoteError.from_errors(["Name cannot be blank", "Identifier is too short"], 422)
        assert str(error) == "Name cannot be blank\nIdentifier is too short"
        assert error.status_code == 422
        assert error.errors == ["Name cannot be blank", "Identifier is too short"]


class TestNotFoundError:
    """Tests for NotFoundError."""

    def test_is_remote_error(self):
        """NotFoundError should be catchable as RemoteError."""
        with pytest.raises(RemoteError):
            raise NotFoundError()

    def test_fixed_message_and_status(self):
        """Should carry a fixed message and status 404."""
        error = NotFoundError()
        assert str(error) == "Not Found"
        assert error.status_code == 404


class TestMalformedEndpointError:
    """Tests for MalformedEndpointError."""

    def test_is_config_error(self):
        """MalformedEndpointError should be a configuration error."""
        assert issubclass(MalformedEndpointError, RedmineConfigError)
        assert issubclass(RedmineConfigError, RedmineError)

    def test_keeps_endpoint(self):
        """Should expose the offending endpoint."""
        error = MalformedEndpointError("::nope")
        assert error.endpoint == "::nope"
        assert "::nope" in str(error)


class TestDecodeError:
    """Tests for DecodeError."""

    def test_with_status_code(self):
        """Should store status code."""
        error = DecodeError("bad body", status_code=200)
        assert str(error) == "bad body"
        assert error.status_code == 200
        assert isinstance(error, RedmineError)
