"""Public request and response models.

    from egnyte_sdk.models import Group, Member, User

    group = await client.groups.get_group("e3ba9d90-ebc7-483e-abaa-a84e92480c86")
    usernames = [member.username for member in group.members]
"""

from egnyte_sdk.files.models import (
    FileMetadata,
    FileSystemItem,
    FolderListing,
    FolderSummary,
    UploadedFile,
)
from egnyte_sdk.groups.models import (
    CreateGroupRequest,
    Group,
    GroupList,
    GroupSummary,
    Member,
    MemberReference,
)
from egnyte_sdk.users.models import CreateUserRequest, User, UserList, UserName

__all__ = [
    "Group",
    "GroupList",
    "GroupSummary",
    "Member",
    "MemberReference",
    "CreateGroupRequest",
    "User",
    "UserList",
    "UserName",
    "CreateUserRequest",
    "FileMetadata",
    "FileSystemItem",
    "FolderListing",
    "FolderSummary",
    "UploadedFile",
]
