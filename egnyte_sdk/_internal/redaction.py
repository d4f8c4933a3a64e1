"""Redaction of credentials in debug traces."""

from collections.abc import Mapping

REDACT_KEYS: frozenset[str] = frozenset({
    "authorization",
    "access_token",
    "token",
    "password",
    "secret",
    "client_secret",
    "refresh_token",
    "api_key",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of request headers with credential values replaced.

    Header names are matched case-insensitively.
    """
    return {
        name: REDACTED_VALUE if name.lower() in REDACT_KEYS else value
        for name, value in headers.items()
    }

