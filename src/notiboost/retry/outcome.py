r"""Tagged outcomes of a single request attempt.

Each attempt of the retry loop produces exactly one outcome, and the
executors decide what to do by inspecting its type rather than by
catching exceptions:

- ``Success``: 2xx response, the parsed body is returned
- ``RateLimited``: 429 response, retried after a flat wait
- ``ErrorResponse``: any other status, raised immediately
- ``TransportFailure``: no response was received, retried with backoff
"""

from __future__ import annotations

__all__ = [
    "ErrorResponse",
    "Outcome",
    "RateLimited",
    "Success",
    "TransportFailure",
    "classify_response",
    "classify_status",
]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Union

from notiboost.core.config import RATE_LIMIT_STATUS_CODE
from notiboost.exceptions import NotiBoostError
from notiboost.utils.response import extract_message, parse_body
from notiboost.utils.retry_after import parse_retry_after

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class Success:
    """A 2xx response."""

    status_code: int
    body: Any


@dataclass(frozen=True)
class RateLimited:
    """A 429 response.

    Attributes:
        status_code: Always 429.
        body: The parsed response body.
        retry_after: Seconds to wait as hinted by the body, or None.
    """

    status_code: int
    body: Any
    retry_after: float | None = None

    @property
    def message(self) -> str:
        return extract_message(self.body, self.status_code)

    def to_error(self, method: str, url: str) -> NotiBoostError:
        return NotiBoostError(
            self.message,
            status_code=self.status_code,
            response=self.body,
            method=method,
            url=url,
        )


@dataclass(frozen=True)
class ErrorResponse:
    """A non-2xx, non-429 response. Never retried."""

    status_code: int
    body: Any
    message: str = field(default="")

    def to_error(self, method: str, url: str) -> NotiBoostError:
        return NotiBoostError(
            self.message or extract_message(self.body, self.status_code),
            status_code=self.status_code,
            response=self.body,
            method=method,
            url=url,
        )


@dataclass(frozen=True)
class TransportFailure:
    """No HTTP response was received (DNS, connect, timeout, ...)."""

    error: Exception

    @property
    def status_code(self) -> None:
        return None


Outcome = Union[Success, RateLimited, ErrorResponse, TransportFailure]


def classify_response(response: httpx.Response) -> Outcome:
    """Classify a received response into an outcome.

    Args:
        response: The HTTP response of one attempt.

    Returns:
        ``Success`` for 2xx, ``RateLimited`` for 429 and ``ErrorResponse``
        for anything else.

    Example:
        ```pycon
        >>> import httpx
        >>> from notiboost.retry.outcome import classify_response
        >>> classify_response(httpx.Response(429, json={"retry_after": 2}))
        RateLimited(status_code=429, body={'retry_after': 2}, retry_after=2.0)
        >>> classify_response(httpx.Response(400, json={"message": "invalid field"}))
        ErrorResponse(status_code=400, body={'message': 'invalid field'}, message='invalid field')

        ```
    """
    return classify_status(response.status_code, parse_body(response))


def classify_status(status_code: int, body: Any) -> Outcome:
    """Classify a status code and its already parsed body into an outcome.

    Used directly when the body of a received response could not be read,
    in which case ``body`` is an empty dict.
    """
    if 200 <= status_code < 300:
        return Success(status_code=status_code, body=body)
    if status_code == RATE_LIMIT_STATUS_CODE:
        return RateLimited(
            status_code=status_code,
            body=body,
            retry_after=parse_retry_after(body),
        )
    return ErrorResponse(
        status_code=status_code,
        body=body,
        message=extract_message(body, status_code),
    )
