r"""Synchronous request executor for the NotiBoost API.

This module provides the RequestExecutor class that sends a request,
classifies each attempt into an outcome and decides whether to return,
retry or fail.
"""

from __future__ import annotations

__all__ = ["RequestExecutor"]

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


class RequestExecutor:
    """Executes NotiBoost API requests with automatic retry logic.

    The executor is long-lived (one per client session) and holds no state
    between calls apart from its immutable configuration, so it can be
    shared between threads as long as the underlying ``httpx.Client`` is.

    The executor orchestrates the following components:
    - RetryStrategy: Calculates the wait before the next attempt
    - CallbackManager: Invokes user-defined callbacks at lifecycle events

    Attributes:
        config: Client configuration (credential, base URL, retry budget).
        client: The httpx client used to send requests.
        strategy: Strategy for calculating retry delays.
        callbacks: Manager for invoking callbacks.

    Example:
        ```pycon
        >>> import httpx
        >>> from notiboost.core import ClientConfig
        >>> from notiboost.retry import RequestExecutor
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))
        >>> with httpx.Client(transport=transport) as client:
        ...     executor = RequestExecutor(ClientConfig(api_key="key"), client)
        ...     executor.execute("GET", "/api/v1/users/u1")
        ...
        {'ok': True}

        ```
    """

    def __init__(self, config: ClientConfig, client: httpx.Client) -> None:
        self.config = config
        self.client = client
        self.strategy: RetryStrategy = RetryStrategy(config.backoff_strategy)
        self.callbacks: CallbackManager = CallbackManager(config)

    def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Execute a request with automatic retry logic.

        Makes at most ``max_retries + 1`` attempts:
        - 2xx responses: the parsed body is returned immediately
        - 429 responses: retried after the ``retry_after`` seconds hinted
          by the body, or 1 second
        - Other responses: ``NotiBoostError`` is raised immediately
        - Transport errors (connect, DNS, timeout): retried after
          ``2 ** attempt`` seconds with the default backoff

        Note:
            Waits block the calling thread. The configured timeout bounds
            one attempt, not the whole call.

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
            outcome = self._send(request)
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
                time.sleep(sleep_time)

        # All attempts exhausted on 429 responses or transport failures
        raise finalize_failure(
            outcome,
            method=spec.method,
            url=url,
            attempt=attempt,
            callbacks=self.callbacks,
            start_time=start_time,
        )

    def _send(self, request: httpx.Request) -> Outcome:
        try:
            response = self.client.send(request, stream=True)
            try:
                response.read()
            except DECODING_ERRORS as exc:
                return undecodable_outcome(response, exc)
            finally:
                response.close()
        except TRANSPORT_ERRORS as exc:
            return TransportFailure(exc)
        return classify_response(response)
