"""Redaction of credentials in log output."""

from collections.abc import Mapping

import httpx

REDACT_KEYS: frozenset[str] = frozenset({
    "key",
    "x-redmine-api-key",
    "authorization",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Mapping[str, str]) -> dict[str, str]:
    """Redact sensitive keys from a flat mapping such as request headers.

    Creates a new dictionary - the original mapping is never mutated.

    Args:
        payload: The mapping to redact sensitive values from.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return {
        key: REDACTED_VALUE if key.lower() in REDACT_KEYS else value
        for key, value in payload.items()
    }


def redact_url(url: httpx.URL | str) -> str:
    """Return ``url`` as a string with sensitive query parameters masked."""
    url = httpx.URL(url)
    if not url.query:
        return str(url)
    params = [
        (name, REDACTED_VALUE if name.lower() in REDACT_KEYS else value)
        for name, value in url.params.multi_items()
    ]
    return str(url.copy_with(params=params))
