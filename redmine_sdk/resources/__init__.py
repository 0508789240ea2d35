"""Resource clients for the Redmine API."""

from redmine_sdk.resources.projects import ProjectsResource

__all__ = ["ProjectsResource"]
