r"""Flows resource."""

from __future__ import annotations

__all__ = ["Flows"]

from typing import TYPE_CHECKING, Any

from notiboost.resources.base import BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping


class Flows(BaseResource):
    """Notification flows, which route an event to channels and templates."""

    def create(self, flow: Mapping[str, Any]) -> Any:
        return self._request("POST", "/api/v1/flows", dict(flow))
