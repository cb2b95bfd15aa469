r"""Asynchronous request executor for the NotiBoost API.

This module provides the AsyncRequestExecutor class, the asyncio
counterpart of RequestExecutor. Waits between attempts use
``asyncio.sleep`` so concurrent tasks keep running, and they can be
cancelled like any other await.
"""

from __future__ import annotations

__all__ = ["AsyncRequestExecutor"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from notiboost.core.request import RequestSpec
from notiboost.retry.executor_core import (
    DECODING_ERRORS,
    TRANSPORT_ERRORS,
    finalize_failure,
    log_outcome,
    log_retry,
    prepare_request,
    undecodable_outcome,
)
from notiboost.retry.manager import CallbackManager
from notiboost.retry.outcome import ErrorResponse, Success, TransportFailure, classify_response
from notiboost.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

    from notiboost.core.config import ClientConfig
    from notiboost.retry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRequestExecutor:
    """Executes NotiBoost API requests asynchronously with automatic retry logic.

    The retry behavior and the wait durations are identical to
    ``RequestExecutor``; see its documentation for details.

    Attributes:
        config: Client configuration (credential, base URL, retry budget).
        client: The httpx async client used to send requests.
        strategy: Strategy for calculating retry delays.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import asyncio
        >>> import httpx
        >>> from notiboost.core import ClientConfig
        >>> from notiboost.retry import AsyncRequestExecutor
        >>>
        >>> async def main():
        ...     async with httpx.AsyncClient() as client:
        ...         executor = AsyncRequestExecutor(ClientConfig(api_key="key"), client)
        ...         return await executor.execute("GET", "/api/v1/templates")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, config: ClientConfig, client: httpx.AsyncClient) -> None:
        self.config = config
        self.client = client
        self.strategy: RetryStrategy = RetryStrategy(config.backoff_strategy)
        self.callbacks: CallbackManager = CallbackManager(config)

    async def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Execute a request with automatic retry logic.

        Args:
            method: HTTP method, one of GET, POST, PUT or DELETE.
            path: Resource path appended to the base URL.
            body: Optional JSON-compatible payload, only sent for POST and PUT.
            headers: Optional extra headers appended after the defaults.

        Returns:
            The parsed JSON body of the successful response, or an empty
            dict if the body is empty or malformed.

        Raises:
            NotiBoostError: For non-2xx, non-429 responses, or when every
                attempt was rate limited.
            httpx.TransportError: The last transport error, unmodified,
                when every attempt failed before receiving a response.
            ValueError: If the method is not supported.
        """
        spec = RequestSpec.create(method, path, body, headers)
        request = prepare_request(self.client, self.config, spec)
        url = str(request.url)
        max_retries = self.config.max_retries
        start_time = time.time()

        attempt = 0
        outcome: Outcome | None = None
        for attempt in range(max_retries + 1):
            self.callbacks.on_request(url, spec.method, attempt)
            outcome = await self._send(request)
            log_outcome(outcome, method=spec.method, url=url, attempt=attempt, max_retries=max_retries)

            if isinstance(outcome, Success):
                self.callbacks.on_success(
                    url, spec.method, attempt, outcome.status_code, outcome.body, start_time
                )
                return outcome.body

            if isinstance(outcome, ErrorResponse):
                raise finalize_failure(
                    outcome,
                    method=spec.method,
                    url=url,
                    attempt=attempt,
                    callbacks=self.callbacks,
                    start_time=start_time,
                )

            if attempt < max_retries:
                sleep_time = self.strategy.calculate_delay(attempt, outcome)
                log_retry(method=spec.method, url=url, attempt=attempt, sleep_time=sleep_time)
                self.callbacks.on_retry(
                    url,
                    spec.method,
                    attempt,
                    sleep_time,
                    outcome.error if isinstance(outcome, TransportFailure) else None,
                    outcome.status_code,
                )
                await asyncio.sleep(sleep_time)

        raise finalize_failure(
            outcome,
            method=spec.method,
            url=url,
            attempt=attempt,
            callbacks=self.callbacks,
            start_time=start_time,
        )

    async def _send(self, request: httpx.Request) -> Outcome:
        try:
            response = await self.client.send(request, stream=True)
            try:
                await response.aread()
            except DECODING_ERRORS as exc:
                return undecodable_outcome(response, exc)
            finally:
                await response.aclose()
        except TRANSPORT_ERRORS as exc:
            return TransportFailure(exc)
        return classify_response(response)
