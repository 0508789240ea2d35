"""Public models for the Redmine API."""

from redmine_sdk.models.common import CustomField, ErrorsResult, IdName, Pagination
from redmine_sdk.models.project import (
    Project,
    ProjectRequest,
    ProjectResult,
    ProjectsResult,
)

__all__ = [
    "CustomField",
    "ErrorsResult",
    "IdName",
    "Pagination",
    "Project",
    "ProjectRequest",
    "ProjectResult",
    "ProjectsResult",
]
