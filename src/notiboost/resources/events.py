r"""Events resource."""

from __future__ import annotations

__all__ = ["Events"]

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from notiboost.resources.base import BaseResource

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class Events(BaseResource):
    """Ingestion of the events that trigger notification flows.

    Example:
        ```pycon
        >>> from notiboost import NotiBoostClient
        >>> client = NotiBoostClient("nb_live_key")  # doctest: +SKIP
        >>> client.events.ingest({"event_name": "order_shipped", "user_id": "u1"})  # doctest: +SKIP

        ```
    """

    def ingest(self, event: Mapping[str, Any]) -> Any:
        """Ingest a single event.

        ``occurred_at`` is set to the current UTC time in ISO-8601 format
        when the event has none. The caller's mapping is not modified.
        """
        payload = dict(event)
        if not payload.get("occurred_at"):
            payload["occurred_at"] = datetime.now(timezone.utc).isoformat()
        return self._request("POST", "/api/v1/events", payload)

    def ingest_batch(self, events: Iterable[Mapping[str, Any]]) -> Any:
        """Ingest several events in one request."""
        return self._request("POST", "/api/v1/events/batch", {"events": list(events)})
