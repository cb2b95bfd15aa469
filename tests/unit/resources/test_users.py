from __future__ import annotations

from unittest.mock import Mock

import pytest

from notiboost.resources import Users


@pytest.fixture
def client() -> Mock:
    client = Mock()
    client.request.return_value = {}
    return client


###########################
#     Tests for Users     #
###########################


def test_users_create(client: Mock) -> None:
    Users(client).create({"user_id": "u1", "email": "ada@example.com"})
    client.request.assert_called_once_with(
        "POST", "/api/v1/users", {"user_id": "u1", "email": "ada@example.com"}
    )


def test_users_get(client: Mock) -> None:
    client.request.return_value = {"user_id": "u1"}
    assert Users(client).get("u1") == {"user_id": "u1"}
    client.request.assert_called_once_with("GET", "/api/v1/users/u1", None)


def test_users_update(client: Mock) -> None:
    Users(client).update("u1", {"name": "Ada"})
    client.request.assert_called_once_with("PUT", "/api/v1/users/u1", {"name": "Ada"})


def test_users_delete(client: Mock) -> None:
    Users(client).delete("u1")
    client.request.assert_called_once_with("DELETE", "/api/v1/users/u1", None)


def test_users_set_channel_data(client: Mock) -> None:
    Users(client).set_channel_data("u1", {"push": {"tokens": ["t1"]}})
    client.request.assert_called_once_with(
        "PUT", "/api/v1/users/u1/channel_data", {"push": {"tokens": ["t1"]}}
    )


def test_users_set_preferences(client: Mock) -> None:
    Users(client).set_preferences("u1", {"email": False})
    client.request.assert_called_once_with(
        "PUT", "/api/v1/users/u1/preferences", {"email": False}
    )


def test_users_create_batch(client: Mock) -> None:
    Users(client).create_batch([{"user_id": "u1"}, {"user_id": "u2"}])
    client.request.assert_called_once_with(
        "POST", "/api/v1/users/batch", {"users": [{"user_id": "u1"}, {"user_id": "u2"}]}
    )


@pytest.mark.parametrize(
    ("user_id", "expected"),
    [("user/42", "user%2F42"), ("a b", "a%20b"), ("u?x=1", "u%3Fx%3D1")],
)
def test_users_get_quotes_identifier(client: Mock, user_id: str, expected: str) -> None:
    Users(client).get(user_id)
    client.request.assert_called_once_with("GET", f"/api/v1/users/{expected}", None)
