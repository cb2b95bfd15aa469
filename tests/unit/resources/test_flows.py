from __future__ import annotations

from unittest.mock import Mock

from notiboost.resources import Flows


def test_flows_create() -> None:
    client = Mock()
    client.request.return_value = {"id": "flow_1"}
    flow = {"name": "welcome", "event_name": "signup", "steps": [{"channel": "email"}]}

    assert Flows(client).create(flow) == {"id": "flow_1"}
    client.request.assert_called_once_with("POST", "/api/v1/flows", flow)
