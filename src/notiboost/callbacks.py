r"""Callback types and data structures for observability.

This module lets users hook into the request lifecycle of the client for
logging, metrics or alerting. Four hooks are available on
``ClientConfig``:

- on_request: Called before each attempt
- on_retry: Called before each retry wait
- on_success: Called when a request returns a 2xx response
- on_failure: Called right before a terminal error is raised

Example:
    ```pycon
    >>> from notiboost import NotiBoostClient
    >>> from notiboost.callbacks import RetryInfo
    >>> from notiboost.core import ClientConfig
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"attempt {info.attempt} in {info.wait_time}s")
    ...
    >>> client = NotiBoostClient(config=ClientConfig(api_key="key", on_retry=log_retry))

    ```
"""

from __future__ import annotations

__all__ = [
    "FailureInfo",
    "RequestInfo",
    "ResponseInfo",
    "RetryInfo",
    "invoke_on_failure",
    "invoke_on_request",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class RequestInfo:
    """Information passed to on_request callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The current attempt number (1-indexed). First attempt is 1.
        max_retries: Maximum number of retry attempts configured.
    """

    url: str
    method: str
    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The number of the upcoming attempt (1-indexed). First retry is attempt 2.
        max_retries: Maximum number of retry attempts configured.
        wait_time: The sleep time in seconds before this retry.
        error: The transport exception that triggered the retry (if any).
        status_code: The HTTP status code that triggered the retry (if any).
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    wait_time: float
    error: Exception | None
    status_code: int | None


@dataclass
class ResponseInfo:
    """Information passed to on_success callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The attempt number that succeeded (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        status_code: The 2xx status code of the response.
        body: The parsed response body returned to the caller.
        total_time: Total time spent on all attempts including waits (seconds).
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    status_code: int
    body: Any
    total_time: float


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        url: The URL that was requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The final attempt number (1-indexed).
        max_retries: Maximum number of retry attempts configured.
        error: The error about to be raised to the caller.
        status_code: The final HTTP status code (None for transport failures).
        total_time: Total time spent on all attempts including waits (seconds).
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    error: Exception
    status_code: int | None
    total_time: float


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
) -> None:
    """Invoke on_request callback if provided.

    The 0-indexed ``attempt`` is passed to the callback as ``attempt + 1``.
    """
    if on_request is not None:
        on_request(
            RequestInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
            )
        )


def invoke_on_success(
    on_success: Callable[[ResponseInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    status_code: int,
    body: Any,
    start_time: float,
) -> None:
    """Invoke on_success callback if provided."""
    if on_success is not None:
        on_success(
            ResponseInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                status_code=status_code,
                body=body,
                total_time=time.time() - start_time,
            )
        )


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    sleep_time: float,
    last_error: Exception | None,
    last_status_code: int | None,
) -> None:
    """Invoke on_retry callback if provided.

    Args:
        on_retry: Optional callback to invoke before each retry.
        url: The URL being requested.
        method: The HTTP method (e.g., "GET", "POST").
        attempt: The 0-indexed number of the attempt that just failed. The
            callback receives the upcoming attempt as a 1-indexed value, so
            after the initial attempt (attempt=0) it receives attempt=2.
        max_retries: Maximum number of retry attempts.
        sleep_time: The sleep time in seconds before this retry.
        last_error: The transport exception that triggered the retry (if any).
        last_status_code: The HTTP status code that triggered the retry (if any).
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                url=url,
                method=method,
                attempt=attempt + 2,
                max_retries=max_retries,
                wait_time=sleep_time,
                error=last_error,
                status_code=last_status_code,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    error: Exception,
    status_code: int | None,
    start_time: float,
) -> None:
    """Invoke on_failure callback if provided."""
    if on_failure is not None:
        on_failure(
            FailureInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                error=error,
                status_code=status_code,
                total_time=time.time() - start_time,
            )
        )
