"""Users resource client."""

from egnyte_sdk._internal.http import ClientConfig, json_body, send_request
from egnyte_sdk._internal.mapping import map_empty_response, map_response
from egnyte_sdk._internal.validation import (
    build_request,
    require_not_empty,
    require_path_segment,
)
from egnyte_sdk.users.models import AuthType, CreateUserRequest, User, UserList, UserType

USERS_PATH = "v2/users"


class UsersClient:
    """Create, fetch, list, and delete users.

    User ids are the numeric ids assigned by the server; they are also the
    member values used by the Groups API.
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    async def create_user(
        self,
        user_name: str,
        email: str,
        given_name: str,
        family_name: str,
        *,
        auth_type: AuthType = "egnyte",
        user_type: UserType = "standard",
        external_id: str | None = None,
        role: str | None = None,
        send_invite: bool = True,
        active: bool = True,
    ) -> User:
        """Create a user.

        Args:
            user_name: Login name.
            email: Email address; invitations are sent here.
            given_name: First name.
            family_name: Last name.
            auth_type: "egnyte", "sso" or "ad".
            user_type: "admin", "power" or "standard".
            external_id: Id in an external directory.
            role: Custom role for power users.
            send_invite: Whether the API emails an invitation.
            active: Whether the user can log in.

        Returns:
            The created user, including its server-assigned id.
        """
        require_not_empty(user_name, "userName")
        require_not_empty(email, "email")
        require_not_empty(given_name, "givenName")
        require_not_empty(family_name, "familyName")

        request = build_request(
            CreateUserRequest,
            user_name=user_name,
            email=email,
            name={"given_name": given_name, "family_name": family_name},
            auth_type=auth_type,
            user_type=user_type,
            external_id=external_id,
            role=role,
            send_invite=send_invite,
            active=active,
        )
        response = await send_request(
            self._config, "POST", USERS_PATH, content=json_body(request)
        )
        return map_response(response, User)

    async def get_user(self, user_id: int | str) -> User:
        """Fetch a single user by id."""
        segment = require_path_segment(user_id, "userId")

        response = await send_request(self._config, "GET", f"{USERS_PATH}/{segment}")
        return map_response(response, User)

    async def list_users(self, start_index: int = 1, count: int | None = None) -> UserList:
        """List users, one page at a time.

        Args:
            start_index: 1-based index of the first user to return.
            count: Page size; the server default is used when None.
        """
        params: dict[str, int] = {"startIndex": start_index}
        if count is not None:
            params["count"] = count

        response = await send_request(self._config, "GET", USERS_PATH, params=params)
        return map_response(response, UserList)

    async def delete_user(self, user_id: int | str) -> None:
        segment = require_path_segment(user_id, "userId")

        response = await send_request(self._config, "DELETE", f"{USERS_PATH}/{segment}")
        map_empty_response(response)
