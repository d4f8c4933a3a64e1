"""Files resource client."""

from urllib.parse import quote

from egnyte_sdk._internal.http import ClientConfig, json_body, send_request
from egnyte_sdk._internal.mapping import (
    map_content_response,
    map_empty_response,
    map_response,
)
from egnyte_sdk._internal.validation import require_not_empty, require_not_none
from egnyte_sdk.exceptions import EgnyteInvalidArgumentError
from egnyte_sdk.files.models import (
    FILE_SYSTEM_ITEM_ADAPTER,
    CreateFolderRequest,
    FileMetadata,
    FolderListing,
    UploadedFile,
)

FS_PATH = "v1/fs"
FS_CONTENT_PATH = "v1/fs-content"
OCTET_STREAM = "application/octet-stream"


def encode_path(path: str) -> str:
    """Percent-encode a file system path for use in the URL, keeping separators.

    >>> encode_path("/Shared/My Docs/a#1.txt")
    'Shared/My%20Docs/a%231.txt'
    """
    return quote(path.strip("/"), safe="/")


class FilesClient:
    """File system operations: create, list, delete, upload, and download.

    Paths are absolute within the domain, e.g. "/Shared/Documents/report.pdf".
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    async def create_folder(self, path: str) -> None:
        """Create a folder. Parent folders must already exist."""
        require_not_empty(path, "path")

        response = await send_request(
            self._config,
            "POST",
            f"{FS_PATH}/{encode_path(path)}",
            content=json_body(CreateFolderRequest()),
        )
        map_empty_response(response)

    async def list_file_or_folder(self, path: str) -> FolderListing | FileMetadata:
        """Fetch metadata for a path.

        Returns:
            A FolderListing (with sub-folders and files) when the path is a
            folder, otherwise the FileMetadata of the file.
        """
        require_not_empty(path, "path")

        response = await send_request(self._config, "GET", f"{FS_PATH}/{encode_path(path)}")
        return map_response(response, FILE_SYSTEM_ITEM_ADAPTER)

    async def delete_file_or_folder(self, path: str) -> None:
        require_not_empty(path, "path")

        response = await send_request(
            self._config, "DELETE", f"{FS_PATH}/{encode_path(path)}"
        )
        map_empty_response(response)

    async def upload_file(self, path: str, content: bytes | bytearray | memoryview) -> UploadedFile:
        """Upload file content, creating the file or a new version of it.

        Args:
            path: Destination file path.
            content: File bytes (bytes, bytearray or memoryview). May be empty,
                must not be None.
        """
        require_not_empty(path, "path")
        require_not_none(content, "content")
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise EgnyteInvalidArgumentError(
                "content", f"Argument 'content' must be bytes, got {type(content).__name__}"
            )

        response = await send_request(
            self._config,
            "POST",
            f"{FS_CONTENT_PATH}/{encode_path(path)}",
            content=bytes(content),
            content_type=OCTET_STREAM,
        )
        return map_response(response, UploadedFile)

    async def download_file(self, path: str) -> bytes:
        require_not_empty(path, "path")

        response = await send_request(
            self._config, "GET", f"{FS_CONTENT_PATH}/{encode_path(path)}"
        )
        return map_content_response(response)
