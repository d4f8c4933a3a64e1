"""Files resource: file and folder operations."""

from egnyte_sdk.files.client import FilesClient
from egnyte_sdk.files.models import (
    FileMetadata,
    FileSystemItem,
    FolderListing,
    FolderSummary,
    UploadedFile,
)

__all__ = [
    "FilesClient",
    "FileMetadata",
    "FileSystemItem",
    "FolderListing",
    "FolderSummary",
    "UploadedFile",
]
