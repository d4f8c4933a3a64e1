"""Groups resource: SCIM-style group management."""

from egnyte_sdk.groups.client import GroupsClient
from egnyte_sdk.groups.models import (
    CreateGroupRequest,
    Group,
    GroupList,
    GroupSummary,
    Member,
    MemberReference,
)

__all__ = [
    "GroupsClient",
    "Group",
    "GroupList",
    "GroupSummary",
    "Member",
    "MemberReference",
    "CreateGroupRequest",
]
