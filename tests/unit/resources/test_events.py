from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from notiboost.resources import Events


@pytest.fixture
def client() -> Mock:
    client = Mock()
    client.request.return_value = {"id": "evt_1"}
    return client


############################
#     Tests for Events     #
############################


def test_events_ingest(client: Mock) -> None:
    event = {"event_name": "order_shipped", "user_id": "u1", "occurred_at": "2024-01-01T00:00:00Z"}
    assert Events(client).ingest(event) == {"id": "evt_1"}
    client.request.assert_called_once_with("POST", "/api/v1/events", event)


@pytest.mark.parametrize("occurred_at", [None, ""])
def test_events_ingest_stamps_occurred_at(client: Mock, occurred_at: str | None) -> None:
    event = {"event_name": "signup", "user_id": "u1", "occurred_at": occurred_at}
    Events(client).ingest(event)

    payload = client.request.call_args.args[2]
    stamped = datetime.fromisoformat(payload["occurred_at"])
    assert stamped.tzinfo is not None
    assert stamped.utcoffset() == timedelta(0)
    assert abs(datetime.now(timezone.utc) - stamped) < timedelta(minutes=1)
    assert payload["event_name"] == "signup"


def test_events_ingest_missing_occurred_at_does_not_mutate(client: Mock) -> None:
    event = {"event_name": "signup", "user_id": "u1"}
    Events(client).ingest(event)

    assert "occurred_at" in client.request.call_args.args[2]
    assert event == {"event_name": "signup", "user_id": "u1"}


def test_events_ingest_batch(client: Mock) -> None:
    events = [{"event_name": "a"}, {"event_name": "b"}]
    Events(client).ingest_batch(events)
    client.request.assert_called_once_with("POST", "/api/v1/events/batch", {"events": events})


def test_events_ingest_batch_generator(client: Mock) -> None:
    Events(client).ingest_batch({"event_name": name} for name in ("a", "b"))
    client.request.assert_called_once_with(
        "POST", "/api/v1/events/batch", {"events": [{"event_name": "a"}, {"event_name": "b"}]}
    )


@pytest.mark.asyncio
async def test_events_ingest_async_client() -> None:
    client = Mock()
    client.request = AsyncMock(return_value={"id": "evt_2"})
    assert await Events(client).ingest({"event_name": "signup", "occurred_at": "now"}) == {
        "id": "evt_2"
    }
    client.request.assert_awaited_once_with(
        "POST", "/api/v1/events", {"event_name": "signup", "occurred_at": "now"}
    )
