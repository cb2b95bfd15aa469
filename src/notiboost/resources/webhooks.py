r"""Webhooks resource."""

from __future__ import annotations

__all__ = ["Webhooks"]

from typing import TYPE_CHECKING, Any

from notiboost.resources.base import BaseResource

if TYPE_CHECKING:
    from collections.abc import Mapping


class Webhooks(BaseResource):
    """Webhook endpoints notified of delivery events."""

    def create(self, webhook: Mapping[str, Any]) -> Any:
        return self._request("POST", "/api/v1/webhooks", dict(webhook))
