"""Egnyte SDK for Python.

Typed async client for the Egnyte public API.

Public API:
    EgnyteClient - Client for one Egnyte domain
    egnyte_sdk.models - Request and response models
    egnyte_sdk.exceptions - Error types
"""

from egnyte_sdk._version import __version__
from egnyte_sdk.client import EgnyteClient
from egnyte_sdk.exceptions import (
    EgnyteAPIError,
    EgnyteCancelledError,
    EgnyteConfigError,
    EgnyteConnectionError,
    EgnyteError,
    EgnyteInvalidArgumentError,
    EgnyteMalformedResponseError,
    EgnyteTimeoutError,
)

__all__ = [
    "__version__",
    "EgnyteClient",
    "EgnyteError",
    "EgnyteAPIError",
    "EgnyteInvalidArgumentError",
    "EgnyteMalformedResponseError",
    "EgnyteTimeoutError",
    "EgnyteConnectionError",
    "EgnyteConfigError",
    "EgnyteCancelledError",
]
