"""Pydantic models for the file system API (/pubapi/v1/fs, /pubapi/v1/fs-content).

The v1 file system API uses snake_case keys on the wire, unlike the v2
directory APIs.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class FileMetadata(_WireModel):
    """A file entry."""

    is_folder: Literal[False] = False
    name: str
    path: str | None = None
    size: int | None = None
    checksum: str | None = None
    locked: bool | None = None
    entry_id: str | None = None
    group_id: str | None = None
    last_modified: str | None = None
    uploaded_by: str | None = None
    num_versions: int | None = None


class FolderSummary(_WireModel):
    """A sub-folder entry inside a folder listing."""

    is_folder: Literal[True] = True
    name: str
    path: str | None = None
    folder_id: str | None = None


class FolderListing(_WireModel):
    """A folder with its immediate children.

    Absent "folders" and "files" keys decode to empty lists.
    """

    is_folder: Literal[True]
    name: str
    path: str | None = None
    folder_id: str | None = None
    last_modified: int | str | None = Field(default=None, alias="lastModified")
    total_count: int | None = None
    folders: list[FolderSummary] = Field(default_factory=list)
    files: list[FileMetadata] = Field(default_factory=list)


# A listing without "is_folder" is read as a file
FileSystemItem = FolderListing | FileMetadata
FILE_SYSTEM_ITEM_ADAPTER: TypeAdapter[FileSystemItem] = TypeAdapter(FileSystemItem)


class UploadedFile(_WireModel):
    """Result of uploading file content."""

    checksum: str | None = None
    group_id: str | None = None
    entry_id: str | None = None


class CreateFolderRequest(_WireModel):
    action: Literal["add_folder"] = "add_folder"
