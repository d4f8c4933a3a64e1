"""Pydantic models for the Users API (/pubapi/v2/users)."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Accepted by the API on create; responses are read as plain strings
AuthType = Literal["egnyte", "sso", "ad"]
UserType = Literal["admin", "power", "standard"]


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class UserName(_WireModel):
    given_name: str | None = Field(default=None, alias="givenName")
    family_name: str | None = Field(default=None, alias="familyName")
    formatted: str | None = None


# =============================================================================
# Response Models
# =============================================================================


class User(_WireModel):
    """User record returned from the API."""

    id: int
    user_name: str = Field(alias="userName")
    email: str | None = None
    external_id: str | None = Field(default=None, alias="externalId")
    name: UserName | None = None
    active: bool | None = None
    locked: bool | None = None
    auth_type: str | None = Field(default=None, alias="authType")
    user_type: str | None = Field(default=None, alias="userType")
    role: str | None = None
    idp_user_id: str | None = Field(default=None, alias="idpUserId")
    user_principal_name: str | None = Field(default=None, alias="userPrincipalName")
    email_change_pending: bool | None = Field(default=None, alias="emailChangePending")
    created_date: str | None = Field(default=None, alias="createdDate")
    last_modification_date: str | None = Field(default=None, alias="lastModificationDate")
    last_active_date: str | None = Field(default=None, alias="lastActiveDate")


class UserList(_WireModel):
    """One page of users."""

    total_results: int = Field(default=0, alias="totalResults")
    items_per_page: int = Field(default=0, alias="itemsPerPage")
    start_index: int = Field(default=1, alias="startIndex")
    resources: list[User] = Field(default_factory=list)


# =============================================================================
# Request Models
# =============================================================================


class CreateUserRequest(_WireModel):
    """Payload for creating a user.

    Required fields:
        userName, email, name (given and family), authType, userType

    Optional fields:
        externalId: Immutable id from an external directory (required by the
            API for "ad" and "sso" users)
        role: Custom role name for power users
        sendInvite: Email an invitation to the user (default: True)
        active: Whether the user can log in (default: True)
    """

    user_name: str = Field(alias="userName", min_length=1)
    email: str = Field(min_length=1)
    name: UserName
    auth_type: AuthType = Field(alias="authType")
    user_type: UserType = Field(alias="userType")
    external_id: str | None = Field(default=None, alias="externalId")
    role: str | None = None
    send_invite: bool = Field(default=True, alias="sendInvite")
    active: bool = True
