"""Redmine SDK for Python.

Client library for the Redmine issue tracker REST API.

Public API:
    RedmineClient - Authenticated client with per-resource operations
    FullTraversingClient - Wrapper whose list operations follow every page
    ProjectsFilter, ProjectStatus - Query filters for project listings
"""

from redmine_sdk._version import __version__
from redmine_sdk.client import RedmineClient, get_client
from redmine_sdk.exceptions import (
    DecodeError,
    MalformedEndpointError,
    NotFoundError,
    RedmineConfigError,
    RedmineError,
    RemoteError,
)
from redmine_sdk.filters import Filter, ProjectsFilter, ProjectStatus
from redmine_sdk.models import CustomField, IdName, Project
from redmine_sdk.traversal import FullTraversingClient, traverse

__all__ = [
    "__version__",
    "RedmineClient",
    "get_client",
    "FullTraversingClient",
    "traverse",
    "Filter",
    "ProjectsFilter",
    "ProjectStatus",
    "Project",
    "IdName",
    "CustomField",
    "RedmineError",
    "RedmineConfigError",
    "MalformedEndpointError",
    "DecodeError",
    "RemoteError",
    "NotFoundError",
]
