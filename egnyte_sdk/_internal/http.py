"""Shared HTTP configuration and the request executor used by every resource client."""

import asyncio
import json
import sys
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, model_validator

from egnyte_sdk._internal.redaction import redact_headers
from egnyte_sdk._version import __version__
from egnyte_sdk.exceptions import (
    EgnyteCancelledError,
    EgnyteConnectionError,
    EgnyteTimeoutError,
)

PROVIDER_HOST = "egnyte.com"
# Tenant domains are a single DNS label below PROVIDER_HOST
DOMAIN_PATTERN = r"^[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?$"
API_BASE = "pubapi"
DEFAULT_TIMEOUT = 600.0  # ten minutes
JSON_CONTENT_TYPE = "application/json"


class ClientConfig(BaseModel):
    """Immutable settings shared by all resource clients of one EgnyteClient.

    The Authorization header value is derived from the token once, when the
    config is built, and read as-is on every request.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    domain: str = Field(pattern=DOMAIN_PATTERN)
    token: str = Field(repr=False)
    http_client: httpx.AsyncClient
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False
    authorization: str = Field(default="", repr=False)

    @model_validator(mode="before")
    @classmethod
    def derive_authorization(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("authorization"):
            data = {**data, "authorization": f"Bearer {data.get('token')}"}
        return data


class RawResponse(BaseModel):
    """Status, headers and body of a response, exactly as received."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)
    content: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


def create_http_client(*, timeout: float = DEFAULT_TIMEOUT) -> httpx.AsyncClient:
    """Create configured HTTP client.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": f"egnyte-sdk/{__version__}"},
    )


def build_url(domain: str, path: str) -> str:
    """Compose the absolute API URL for a tenant domain and a versioned path.

    >>> build_url("acme", "v2/groups")
    'https://acme.egnyte.com/pubapi/v2/groups'
    """
    return f"https://{domain}.{PROVIDER_HOST}/{API_BASE}/{path.lstrip('/')}"


def encode_json(data: Any) -> bytes:
    """Serialize to compact UTF-8 JSON with sorted keys."""
    return json.dumps(
        data, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def json_body(model: BaseModel) -> bytes:
    """Serialize a request model under its wire (alias) names, omitting None fields."""
    return encode_json(model.model_dump(mode="json", by_alias=True, exclude_none=True))


def _log_debug(config: ClientConfig, message: str) -> None:
    """Log a debug message to stderr if debug mode is enabled."""
    if config.debug:
        print(f"[egnyte-sdk] {message}", file=sys.stderr)


async def send_request(
    config: ClientConfig,
    method: str,
    path: str,
    *,
    content: bytes | None = None,
    content_type: str = JSON_CONTENT_TYPE,
    params: dict[str, Any] | None = None,
) -> RawResponse:
    """Send one authenticated request and return the response uninterpreted.

    Args:
        config: Shared client configuration.
        method: HTTP method.
        path: Versioned path below the API base, e.g. "v2/groups".
        content: Pre-serialized body. No body (and no Content-Type) when None.
        content_type: Content-Type sent with the body.
        params: Optional query parameters.

    Returns:
        The raw status code, headers and body.

    Raises:
        EgnyteTimeoutError: If the request exceeds config.timeout.
        EgnyteConnectionError: On transport failure.
        EgnyteCancelledError: If the awaiting task is cancelled.
    """
    url = build_url(config.domain, path)
    headers = {"Authorization": config.authorization}
    if content is not None:
        headers["Content-Type"] = content_type

    _log_debug(config, f"{method} {url} headers={redact_headers(headers)}")

    try:
        async with asyncio.timeout(config.timeout):
            response = await config.http_client.request(
                method,
                url,
                content=content,
                params=params,
                headers=headers,
                timeout=config.timeout,
            )
    except httpx.TimeoutException as e:
        _log_debug(config, f"{method} {url} timed out")
        raise EgnyteTimeoutError(f"{method} {url} timed out after {config.timeout}s") from e
    except TimeoutError as e:
        _log_debug(config, f"{method} {url} timed out")
        raise EgnyteTimeoutError(f"{method} {url} timed out after {config.timeout}s") from e
    except httpx.TransportError as e:
        raise EgnyteConnectionError(f"{method} {url} failed: {e}") from e
    except asyncio.CancelledError as e:
        _log_debug(config, f"{method} {url} cancelled")
        raise EgnyteCancelledError(f"{method} {url} was cancelled") from e

    _log_debug(config, f"{method} {url} -> {response.status_code}")
    return RawResponse(
        status_code=response.status_code,
        headers=dict(response.headers),
        content=response.content,
    )
