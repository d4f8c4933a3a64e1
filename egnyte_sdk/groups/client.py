"""Groups resource client."""

from collections.abc import Sequence

from egnyte_sdk._internal.http import ClientConfig, json_body, send_request
from egnyte_sdk._internal.mapping import map_empty_response, map_response
from egnyte_sdk._internal.validation import (
    build_request,
    require_not_empty,
    require_not_none,
    require_path_segment,
)
from egnyte_sdk.groups.models import CreateGroupRequest, Group, GroupList

GROUPS_PATH = "v2/groups"


class GroupsClient:
    """Create, fetch, list, and delete groups.

    Groups are collections of users; their members are referenced by numeric
    user id.
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    async def create_group(self, display_name: str, members: Sequence[int]) -> Group:
        """Create a group.

        Args:
            display_name: Name of the new group.
            members: Ids of the users to add. May be empty, must not be None.

        Returns:
            The created group, including its server-assigned id.
        """
        require_not_empty(display_name, "displayName")
        require_not_none(members, "members")

        request = build_request(
            CreateGroupRequest,
            display_name=display_name,
            members=[{"value": member_id} for member_id in members],
        )
        response = await send_request(
            self._config, "POST", GROUPS_PATH, content=json_body(request)
        )
        return map_response(response, Group)

    async def get_group(self, group_id: str) -> Group:
        """Fetch a single group with its members."""
        segment = require_path_segment(group_id, "groupId")

        response = await send_request(self._config, "GET", f"{GROUPS_PATH}/{segment}")
        return map_response(response, Group)

    async def list_groups(self, start_index: int = 1, count: int | None = None) -> GroupList:
        """List groups, one page at a time.

        Args:
            start_index: 1-based index of the first group to return.
            count: Page size; the server default is used when None.
        """
        params: dict[str, int] = {"startIndex": start_index}
        if count is not None:
            params["count"] = count

        response = await send_request(self._config, "GET", GROUPS_PATH, params=params)
        return map_response(response, GroupList)

    async def delete_group(self, group_id: str) -> None:
        segment = require_path_segment(group_id, "groupId")

        response = await send_request(self._config, "DELETE", f"{GROUPS_PATH}/{segment}")
        map_empty_response(response)
