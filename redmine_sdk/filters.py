"""Query-string filters for Redmine list endpoints."""

from collections.abc import Iterator
from enum import Enum

import httpx

STATUS_NEGATION = "!"


class ProjectStatus(str, Enum):
    """Project status values accepted by the ``status`` filter."""

    ALL = ""
    ACTIVE = "1"
    CLOSED = "5"
    ARCHIVED = "9"


class Filter:
    """Ordered key/value pairs rendered into a URL query string.

    Adding a key that is already present replaces its value in place, so the
    rendered order follows first insertion.
    """

    def __init__(self, pairs: dict[str, str] | None = None) -> None:
        self._pairs: dict[str, str] = dict(pairs or {})

    def add_pair(self, key: str, value: str) -> None:
        self._pairs[key] = str(value)

    def pairs(self) -> list[tuple[str, str]]:
        return list(self._pairs.items())

    def to_url_params(self) -> str:
        """Render the pairs as an encoded query string (without ``?``)."""
        return str(httpx.QueryParams(self.pairs()))

    def copy(self) -> "Filter":
        clone = type(self).__new__(type(self))
        clone._pairs = dict(self._pairs)
        return clone

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs())

    def __len__(self) -> int:
        return len(self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.pairs() == other.pairs()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pairs!r})"


class ProjectsFilter(Filter):
    """Filter for ``GET /projects.json``."""

    def status(self, status: ProjectStatus | str) -> None:
        """Restrict the listing to projects with the given status."""
        self.add_pair("status", _status_value(status))

    def status_not(self, status: ProjectStatus | str) -> None:
        """Exclude projects with the given status."""
        self.add_pair("status", STATUS_NEGATION + _status_value(status))


def _status_value(status: ProjectStatus | str) -> str:
    return status.value if isinstance(status, ProjectStatus) else status
