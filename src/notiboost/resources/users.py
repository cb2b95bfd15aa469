r"""Users resource."""

from __future__ import annotations

__all__ = ["Users"]

from typing import TYPE_CHECKING, Any

from notiboost.resources.base import BaseResource, quote_segment

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class Users(BaseResource):
    """Management of notification recipients."""

    def _path(self, user_id: str, suffix: str = "") -> str:
        return f"/api/v1/users/{quote_segment(user_id)}{suffix}"

    def create(self, user: Mapping[str, Any]) -> Any:
        return self._request("POST", "/api/v1/users", dict(user))

    def get(self, user_id: str) -> Any:
        return self._request("GET", self._path(user_id))

    def update(self, user_id: str, data: Mapping[str, Any]) -> Any:
        return self._request("PUT", self._path(user_id), dict(data))

    def delete(self, user_id: str) -> Any:
        return self._request("DELETE", self._path(user_id))

    def set_channel_data(self, user_id: str, channel_data: Mapping[str, Any]) -> Any:
        """Replace the per-channel delivery data (tokens, addresses) of a user."""
        return self._request("PUT", self._path(user_id, "/channel_data"), dict(channel_data))

    def set_preferences(self, user_id: str, preferences: Mapping[str, Any]) -> Any:
        """Replace the notification preferences of a user."""
        return self._request("PUT", self._path(user_id, "/preferences"), dict(preferences))

    def create_batch(self, users: Iterable[Mapping[str, Any]]) -> Any:
        return self._request("POST", "/api/v1/users/batch", {"users": [dict(u) for u in users]})
