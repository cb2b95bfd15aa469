r"""Unit tests for the callback manager."""

from __future__ import annotations

from unittest.mock import Mock, patch

from notiboost.callbacks import FailureInfo, RequestInfo, ResponseInfo, RetryInfo
from notiboost.core.config import ClientConfig
from notiboost.retry.manager import CallbackManager

URL = "https://api.notiboost.test/api/v1/events"


def test_callback_manager_without_callbacks() -> None:
    """Test that no callback configured is a no-op."""
    manager = CallbackManager(ClientConfig(api_key="key"))
    manager.on_request(URL, "POST", 0)
    manager.on_retry(URL, "POST", 0, 1.0, None, 429)
    manager.on_success(URL, "POST", 0, 200, {}, 0.0)
    manager.on_failure(URL, "POST", 0, RuntimeError("x"), None, 0.0)


def test_callback_manager_on_request(mock_callback: Mock) -> None:
    manager = CallbackManager(ClientConfig(api_key="key", max_retries=2, on_request=mock_callback))
    manager.on_request(URL, "POST", 1)
    mock_callback.assert_called_once_with(
        RequestInfo(url=URL, method="POST", attempt=2, max_retries=2)
    )


def test_callback_manager_on_retry(mock_callback: Mock) -> None:
    manager = CallbackManager(ClientConfig(api_key="key", on_retry=mock_callback))
    manager.on_retry(URL, "POST", 0, 1.0, None, 429)
    mock_callback.assert_called_once_with(
        RetryInfo(
            url=URL,
            method="POST",
            attempt=2,
            max_retries=3,
            wait_time=1.0,
            error=None,
            status_code=429,
        )
    )


def test_callback_manager_on_success(mock_callback: Mock) -> None:
    manager = CallbackManager(ClientConfig(api_key="key", on_success=mock_callback))
    with patch("time.time", return_value=12.5):
        manager.on_success(URL, "POST", 0, 202, {"id": "evt_1"}, start_time=10.0)
    mock_callback.assert_called_once_with(
        ResponseInfo(
            url=URL,
            method="POST",
            attempt=1,
            max_retries=3,
            status_code=202,
            body={"id": "evt_1"},
            total_time=2.5,
        )
    )


def test_callback_manager_on_failure(mock_callback: Mock) -> None:
    error = RuntimeError("boom")
    manager = CallbackManager(ClientConfig(api_key="key", on_failure=mock_callback))
    with patch("time.time", return_value=11.0):
        manager.on_failure(URL, "POST", 3, error, 429, start_time=10.0)
    mock_callback.assert_called_once_with(
        FailureInfo(
            url=URL,
            method="POST",
            attempt=4,
            max_retries=3,
            error=error,
            status_code=429,
            total_time=1.0,
        )
    )
