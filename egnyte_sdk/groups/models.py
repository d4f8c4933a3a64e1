"""Pydantic models for the Groups API (/pubapi/v2/groups).

Request models are write-only projections of the response models: they
carry only the fields the client is allowed to set.
"""

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Constants
# =============================================================================

SCIM_CORE_SCHEMA = "urn:scim:schemas:core:1.0"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


# =============================================================================
# Response Models
# =============================================================================


class Member(_WireModel):
    """Group member as returned by the API.

    `value` is the user's numeric id and is always present; `username` and
    `display` are filled in by the server.
    """

    value: int
    username: str | None = None
    display: str | None = None


class Group(_WireModel):
    """Group record returned from the API.

    An absent "members" key decodes to an empty list; an explicit null is
    rejected.
    """

    schemas: list[str] = Field(default_factory=list)
    id: str
    display_name: str = Field(alias="displayName")
    members: list[Member] = Field(default_factory=list)


class GroupSummary(_WireModel):
    """Group entry in a list response (members are not included)."""

    id: str
    display_name: str = Field(alias="displayName")


class GroupList(_WireModel):
    """One page of groups."""

    schemas: list[str] = Field(default_factory=list)
    total_results: int = Field(default=0, alias="totalResults")
    items_per_page: int = Field(default=0, alias="itemsPerPage")
    start_index: int = Field(default=1, alias="startIndex")
    resources: list[GroupSummary] = Field(default_factory=list)


# =============================================================================
# Request Models
# =============================================================================


class MemberReference(_WireModel):
    """Group member as sent to the API: the user id only."""

    value: int


class CreateGroupRequest(_WireModel):
    """Payload for creating a group.

    Required fields:
        displayName: Non-empty group name
        members: Member references; may be empty, is always sent
    """

    display_name: str = Field(alias="displayName", min_length=1)
    members: list[MemberReference]
