r"""Shared core logic for request executors.

This module provides the helpers used by both the synchronous and the
asynchronous request executor: building the ``httpx.Request`` of a call,
turning a terminal outcome into the error raised to the caller, and the
structured log records of the retry loop.
"""

from __future__ import annotations

__all__ = [
    "DECODING_ERRORS",
    "TRANSPORT_ERRORS",
    "finalize_failure",
    "log_outcome",
    "log_retry",
    "prepare_request",
    "terminal_error",
    "undecodable_outcome",
]

import logging
from typing import TYPE_CHECKING

import httpx

from notiboost.core.request import build_headers, build_url, encode_body
from notiboost.retry.outcome import (
    ErrorResponse,
    RateLimited,
    Success,
    TransportFailure,
    classify_status,
)
from notiboost.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from notiboost.core.config import ClientConfig
    from notiboost.core.request import RequestSpec
    from notiboost.retry.manager import CallbackManager
    from notiboost.retry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)

# Failures raised before any HTTP response is received
TRANSPORT_ERRORS = (httpx.TransportError,)

# Raised while reading a received body, e.g. a corrupt gzip payload
DECODING_ERRORS = (httpx.DecodingError,)


def prepare_request(
    client: httpx.Client | httpx.AsyncClient,
    config: ClientConfig,
    spec: RequestSpec,
) -> httpx.Request:
    """Build the request sent on every attempt of a call.

    The request inherits the client's timeout and default headers. The
    authorization and content-type headers come first, followed by the
    caller's extra headers.

    Args:
        client: The httpx client that will send the request.
        config: The client configuration (base URL and credential).
        spec: The call to perform.

    Returns:
        The prepared request.
    """
    return client.build_request(
        spec.method,
        build_url(config.base_url, spec.path),
        headers=build_headers(config.api_key, spec.headers),
        content=encode_body(spec),
    )


def terminal_error(outcome: Outcome, method: str, url: str) -> Exception:
    """Return the error to raise for an outcome that ends the call.

    Transport failures are returned unmodified. Error and rate-limited
    responses are converted to ``NotiBoostError``.

    Raises:
        TypeError: If the outcome is a success.
    """
    if isinstance(outcome, TransportFailure):
        return outcome.error
    if isinstance(outcome, (ErrorResponse, RateLimited)):
        return outcome.to_error(method, url)
    msg = f"{type(outcome).__name__} does not end a call with an error"
    raise TypeError(msg)


def finalize_failure(
    outcome: Outcome,
    *,
    method: str,
    url: str,
    attempt: int,
    callbacks: CallbackManager,
    start_time: float,
) -> Exception:
    """Log the terminal failure, notify ``on_failure`` and return the error.

    Args:
        outcome: The outcome of the last attempt.
        method: The HTTP method.
        url: The requested URL.
        attempt: The 0-indexed number of the last attempt.
        callbacks: Manager used to invoke ``on_failure``.
        start_time: Timestamp when the call started.

    Returns:
        The exception the executor must raise.
    """
    error = terminal_error(outcome, method, url)
    log_structured(
        logger,
        logging.DEBUG,
        f"{method} request to {url} failed after {attempt + 1} attempt(s): {error}",
        http_method=method,
        url=url,
        attempt=attempt + 1,
        status_code=outcome.status_code,
        error_type=type(error).__name__,
    )
    callbacks.on_failure(
        url=url,
        method=method,
        attempt=attempt,
        error=error,
        status_code=outcome.status_code,
        start_time=start_time,
    )
    return error


def log_outcome(outcome: Outcome, *, method: str, url: str, attempt: int, max_retries: int) -> None:
    """Log the outcome of one attempt at DEBUG level."""
    if isinstance(outcome, TransportFailure):
        message = (
            f"{method} request to {url} encountered {type(outcome.error).__name__} on attempt "
            f"{attempt + 1}/{max_retries + 1}: {outcome.error}"
        )
        error_type = type(outcome.error).__name__
    elif isinstance(outcome, Success):
        message = f"{method} request to {url} succeeded with status {outcome.status_code}"
        error_type = None
    else:
        message = (
            f"{method} request to {url} returned status {outcome.status_code} on attempt "
            f"{attempt + 1}/{max_retries + 1}"
        )
        error_type = None
    log_structured(
        logger,
        logging.DEBUG,
        message,
        http_method=method,
        url=url,
        attempt=attempt + 1,
        status_code=outcome.status_code,
        error_type=error_type,
    )


def log_retry(*, method: str, url: str, attempt: int, sleep_time: float) -> None:
    """Log the wait before the next attempt at DEBUG level."""
    log_structured(
        logger,
        logging.DEBUG,
        f"Waiting {sleep_time:.2f}s before retrying {method} request to {url}",
        http_method=method,
        url=url,
        attempt=attempt + 1,
        sleep_time=sleep_time,
    )


def undecodable_outcome(response: httpx.Response, error: Exception) -> Outcome:
    """Classify a response whose body could not be read.

    The status code is kept and the body degrades to an empty dict, like
    a body that is not valid JSON.
    """
    logger.debug(
        f"Response with status {response.status_code} has an undecodable body: {error}"
    )
    return classify_status(response.status_code, {})
