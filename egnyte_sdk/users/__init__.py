"""Users resource: user management."""

from egnyte_sdk.users.client import UsersClient
from egnyte_sdk.users.models import CreateUserRequest, User, UserList, UserName

__all__ = [
    "UsersClient",
    "User",
    "UserList",
    "UserName",
    "CreateUserRequest",
]
