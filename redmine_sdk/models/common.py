"""Pydantic models shared by every Redmine resource.

These mirror the JSON shapes used across the Redmine REST API: reference
pairs, custom field values, and the pagination and error envelopes.
"""

from pydantic import BaseModel

# =============================================================================
# References
# =============================================================================


class IdName(BaseModel):
    """Reference to another record by id, with its display name."""

    id: int
    name: str = ""


class CustomField(BaseModel):
    """Custom field value attached to a resource.

    ``value`` is a list when the field allows multiple values.
    """

    id: int
    name: str | None = None
    multiple: bool | None = None
    value: str | list[str] | None = None


# =============================================================================
# Envelopes
# =============================================================================


class Pagination(BaseModel):
    """Pagination envelope that accompanies every list response."""

    total_count: int
    limit: int = 0
    offset: int = 0


class ErrorsResult(BaseModel):
    """Error envelope returned with a non-success status."""

    errors: list[str]
