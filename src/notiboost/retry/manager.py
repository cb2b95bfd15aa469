r"""Callback manager for orchestrating request lifecycle events.

This module provides the CallbackManager class that invokes the
callbacks configured on a ``ClientConfig`` at each step of the retry
loop.
"""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from notiboost.callbacks import (
    invoke_on_failure,
    invoke_on_request,
    invoke_on_retry,
    invoke_on_success,
)

if TYPE_CHECKING:
    from notiboost.core.config import ClientConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attributes:
        config: The client configuration holding the callbacks.
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def on_request(self, url: str, method: str, attempt: int) -> None:
        invoke_on_request(
            self.config.on_request,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
        )

    def on_retry(
        self,
        url: str,
        method: str,
        attempt: int,
        sleep_time: float,
        error: Exception | None,
        status_code: int | None,
    ) -> None:
        invoke_on_retry(
            self.config.on_retry,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            sleep_time=sleep_time,
            last_error=error,
            last_status_code=status_code,
        )

    def on_success(
        self,
        url: str,
        method: str,
        attempt: int,
        status_code: int,
        body: Any,
        start_time: float,
    ) -> None:
        invoke_on_success(
            self.config.on_success,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            status_code=status_code,
            body=body,
            start_time=start_time,
        )

    def on_failure(
        self,
        url: str,
        method: str,
        attempt: int,
        error: Exception,
        status_code: int | None,
        start_time: float,
    ) -> None:
        invoke_on_failure(
            self.config.on_failure,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            error=error,
            status_code=status_code,
            start_time=start_time,
        )
