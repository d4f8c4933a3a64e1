"""Public exceptions for the Egnyte SDK."""

import asyncio
from typing import Any


class EgnyteError(Exception):
    """Base exception for all Egnyte SDK errors."""


class EgnyteInvalidArgumentError(EgnyteError, ValueError):
    """A required argument was missing or empty. Raised before any request is sent."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        super().__init__(message or f"Argument '{parameter}' must not be empty")
        self.parameter = parameter


class EgnyteAPIError(EgnyteError):
    """Error response (non-2xx status) from the Egnyte API."""

    def __init__(
        self,
        message: str,
        status_code: int,
        payload: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload
        self.headers = headers or {}


class EgnyteMalformedResponseError(EgnyteError):
    """Success response whose body does not match the expected shape."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EgnyteTimeoutError(EgnyteError):
    """The request did not complete within the configured timeout."""


class EgnyteConnectionError(EgnyteError):
    """Transport failure (DNS, connect, TLS, protocol) before a response arrived."""


class EgnyteConfigError(EgnyteError):
    """Configuration error (missing env vars, invalid config)."""


class EgnyteCancelledError(asyncio.CancelledError):
    """The request was cancelled while waiting on the network.

    Subclasses asyncio.CancelledError rather than EgnyteError so that task
    cancellation keeps propagating through ``except EgnyteError`` handlers.
    """
