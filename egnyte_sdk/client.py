"""User-facing client for the Egnyte public API.

Example usage:
    from egnyte_sdk import EgnyteClient

    async with EgnyteClient(token="access-token", domain="acme") as client:
        group = await client.groups.create_group("Finance", [9967960066])
        data = await client.files.download_file("/Shared/report.pdf")
"""

import os

import httpx

from egnyte_sdk._internal.http import DEFAULT_TIMEOUT, ClientConfig, create_http_client
from egnyte_sdk._internal.validation import require_domain, require_not_empty
from egnyte_sdk.exceptions import EgnyteConfigError
from egnyte_sdk.files.client import FilesClient
from egnyte_sdk.groups.client import GroupsClient
from egnyte_sdk.users.client import UsersClient


class EgnyteClient:
    """Client for one Egnyte domain.

    All resource clients share a single ClientConfig, and with it a single
    httpx.AsyncClient and Authorization header. Creating the client performs
    no network I/O.
    """

    def __init__(
        self,
        token: str,
        domain: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        *,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            token: OAuth access token, sent as a bearer token.
            domain: Egnyte domain name, e.g. "acme" for acme.egnyte.com. Must be
                a single DNS label.
            http_client: Optional caller-owned httpx.AsyncClient. It is used
                as-is and never closed by this client.
            timeout: Request timeout in seconds (default: ten minutes).
            debug: Enable debug logging to stderr.
        """
        require_not_empty(token, "token")
        require_domain(domain)

        timeout = DEFAULT_TIMEOUT if timeout is None else timeout
        self._owns_http_client = http_client is None
        self._config = ClientConfig(
            domain=domain,
            token=token,
            http_client=http_client or create_http_client(timeout=timeout),
            timeout=timeout,
            debug=debug,
        )

        self._files = FilesClient(self._config)
        self._users = UsersClient(self._config)
        self._groups = GroupsClient(self._config)

    @classmethod
    def from_env(cls, http_client: httpx.AsyncClient | None = None) -> "EgnyteClient":
        """Create a client from environment variables.

        Required environment variables:
            EGNYTE_ACCESS_TOKEN: The OAuth access token.
            EGNYTE_DOMAIN: The Egnyte domain name.

        Optional environment variables:
            EGNYTE_TIMEOUT_MS: Request timeout in milliseconds.
            EGNYTE_DEBUG: Set to "1" to enable debug logging.

        Raises:
            EgnyteConfigError: If a required variable is missing.
            ValueError: If EGNYTE_TIMEOUT_MS is not an integer.
        """
        token = os.environ.get("EGNYTE_ACCESS_TOKEN")
        domain = os.environ.get("EGNYTE_DOMAIN")
        if not token:
            raise EgnyteConfigError("EGNYTE_ACCESS_TOKEN is not set")
        if not domain:
            raise EgnyteConfigError("EGNYTE_DOMAIN is not set")

        timeout_ms = os.environ.get("EGNYTE_TIMEOUT_MS")
        timeout = int(timeout_ms) / 1000 if timeout_ms else None
        debug = os.environ.get("EGNYTE_DEBUG", "") == "1"

        return cls(token, domain, http_client, timeout, debug=debug)

    @property
    def config(self) -> ClientConfig:
        """Immutable settings shared by every resource client (domain, timeout, HTTP client)."""
        return self._config

    @property
    def files(self) -> FilesClient:
        """File system actions: create, delete, list, upload and download files and folders."""
        return self._files

    @property
    def users(self) -> UsersClient:
        """Create, get, list and delete users."""
        return self._users

    @property
    def groups(self) -> GroupsClient:
        """Create, get, list and delete groups of users."""
        return self._groups

    async def aclose(self) -> None:
        """Close the HTTP client if this client created it."""
        if self._owns_http_client:
            await self._config.http_client.aclose()

    async def __aenter__(self) -> "EgnyteClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
