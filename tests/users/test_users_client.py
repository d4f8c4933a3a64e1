"""Tests for UsersClient."""

import json

import httpx
import pytest
import respx

from egnyte_sdk import EgnyteClient
from egnyte_sdk.exceptions import EgnyteAPIError, EgnyteInvalidArgumentError

USERS_URL = "https://acme.egnyte.com/pubapi/v2/users"

USER_RESPONSE = {
    "id": 9967960068,
    "userName": "jdoe",
    "externalId": "S-1-5-21-3623811015",
    "email": "john.doe@acme.com",
    "name": {"formatted": "John Doe", "familyName": "Doe", "givenName": "John"},
    "active": True,
    "locked": False,
    "authType": "ad",
    "userType": "power",
    "idpUserId": "jdoe",
    "userPrincipalName": "jdoe@acme.local",
    "createdDate": "2024-01-10T12:00:00.000+0000",
    "lastActiveDate": "2024-02-01T08:30:00.000+0000",
}


def _client() -> EgnyteClient:
    return EgnyteClient("token", "acme")


class TestCreateUser:
    """Tests for create_user."""

    @respx.mock
    async def test_create_user_success(self):
        """Should post the user and decode the created user."""
        route = respx.post(USERS_URL).mock(
            return_value=httpx.Response(201, json=USER_RESPONSE)
        )

        user = await _client().users.create_user(
            "jdoe",
            "john.doe@acme.com",
            "John",
            "Doe",
            auth_type="ad",
            user_type="power",
            external_id="S-1-5-21-3623811015",
        )

        body = json.loads(route.calls.last.request.content)
        assert body == {
            "userName": "jdoe",
            "email": "john.doe@acme.com",
            "name": {"givenName": "John", "familyName": "Doe"},
            "authType": "ad",
            "userType": "power",
            "externalId": "S-1-5-21-3623811015",
            "sendInvite": True,
            "active": True,
        }
        assert user.id == 9967960068
        assert user.user_name == "jdoe"
        assert user.name.formatted == "John Doe"
        assert user.auth_type == "ad"

    @respx.mock
    async def test_create_user_defaults(self):
        """Should default to an invited, active, standard Egnyte user."""
        route = respx.post(USERS_URL).mock(
            return_value=httpx.Response(201, json=USER_RESPONSE)
        )

        await _client().users.create_user("jdoe", "john.doe@acme.com", "John", "Doe")

        body = json.loads(route.calls.last.request.content)
        assert body["authType"] == "egnyte"
        assert body["userType"] == "standard"
        assert "externalId" not in body
        assert "role" not in body

    @pytest.mark.parametrize(
        "args, parameter",
        [
            (("", "a@b.c", "John", "Doe"), "userName"),
            (("jdoe", "", "John", "Doe"), "email"),
            (("jdoe", "a@b.c", None, "Doe"), "givenName"),
            (("jdoe", "a@b.c", "John", ""), "familyName"),
        ],
    )
    @respx.mock
    async def test_missing_argument_raises(self, args, parameter):
        """Should fail before sending, naming the parameter."""
        route = respx.post(USERS_URL).mock(return_value=httpx.Response(201))

        with pytest.raises(EgnyteInvalidArgumentError) as exc_info:
            await _client().users.create_user(*args)

        assert exc_info.value.parameter == parameter
        assert not route.called

    @respx.mock
    async def test_invalid_user_type_raises(self):
        """Should reject an unknown user type before sending."""
        route = respx.post(USERS_URL).mock(return_value=httpx.Response(201))

        with pytest.raises(EgnyteInvalidArgumentError) as exc_info:
            await _client().users.create_user(
                "jdoe", "a@b.c", "John", "Doe", user_type="superuser"
            )

        assert exc_info.value.parameter == "userType"
        assert not route.called


class TestGetListDeleteUser:
    """Tests for get_user, list_users and delete_user."""

    @respx.mock
    async def test_get_user(self):
        """Should fetch a user by numeric id."""
        route = respx.get(f"{USERS_URL}/9967960068").mock(
            return_value=httpx.Response(200, json=USER_RESPONSE)
        )

        user = await _client().users.get_user(9967960068)

        assert route.called
        assert user.email == "john.doe@acme.com"
        assert user.locked is False

    @respx.mock
    async def test_get_user_tolerates_unknown_fields(self):
        """Should ignore fields the model does not declare."""
        respx.get(f"{USERS_URL}/1").mock(
            return_value=httpx.Response(200, json={"id": 1, "userName": "a", "newField": 3})
        )

        user = await _client().users.get_user(1)

        assert user.user_name == "a"
        assert user.email is None

    @pytest.mark.parametrize("user_id", ["", None])
    async def test_get_user_empty_id(self, user_id):
        """Should reject a missing id."""
        with pytest.raises(EgnyteInvalidArgumentError) as exc_info:
            await _client().users.get_user(user_id)
        assert exc_info.value.parameter == "userId"

    @respx.mock
    async def test_list_users(self):
        """Should decode a page of users."""
        route = respx.get(USERS_URL).mock(
            return_value=httpx.Response(
                200,
                json={
                    "totalResults": 1,
                    "itemsPerPage": 1,
                    "startIndex": 1,
                    "resources": [USER_RESPONSE],
                },
            )
        )

        page = await _client().users.list_users(count=1)

        assert route.calls.last.request.url.params["startIndex"] == "1"
        assert page.total_results == 1
        assert page.resources[0].user_name == "jdoe"

    @respx.mock
    async def test_delete_user(self):
        """Should delete a user by id."""
        route = respx.delete(f"{USERS_URL}/9967960068").mock(
            return_value=httpx.Response(200)
        )

        await _client().users.delete_user(9967960068)

        assert route.called

    @respx.mock
    async def test_delete_user_unauthorized(self):
        """Should raise EgnyteAPIError on 401."""
        respx.delete(f"{USERS_URL}/1").mock(
            return_value=httpx.Response(401, text="<h1>Developer Inactive</h1>")
        )

        with pytest.raises(EgnyteAPIError) as exc_info:
            await _client().users.delete_user(1)

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "<h1>Developer Inactive</h1>"

    @respx.mock(assert_all_called=False)
    async def test_get_user_id_stays_in_users_path(self, respx_mock):
        """Should encode a slash-bearing id as one segment under /users."""
        groups_route = respx_mock.get("https://acme.egnyte.com/pubapi/v2/groups").mock(
            return_value=httpx.Response(200, json={"resources": []})
        )
        route = respx_mock.route(method="GET", host="acme.egnyte.com").mock(
            return_value=httpx.Response(200, json=USER_RESPONSE)
        )

        await _client().users.get_user("../groups")

        assert not groups_route.called
        assert route.calls.last.request.url.raw_path == b"/pubapi/v2/users/..%2Fgroups"

    @respx.mock
    async def test_delete_user_id_with_fragment_character(self):
        """Should encode "#" instead of truncating the path."""
        route = respx.route(method="DELETE", host="acme.egnyte.com").mock(
            return_value=httpx.Response(204)
        )

        await _client().users.delete_user("1#2")

        assert route.calls.last.request.url.raw_path == b"/pubapi/v2/users/1%232"

    async def test_delete_user_dot_segment_raises(self):
        """Should reject ".." as a user id."""
        with pytest.raises(EgnyteInvalidArgumentError) as exc_info:
            await _client().users.delete_user("..")
        assert exc_info.value.parameter == "userId"
