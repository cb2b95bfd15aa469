r"""Exceptions raised by the NotiBoost client.

Only terminal failures are represented here. Transport failures that
survive every retry are re-raised as the original ``httpx`` exception,
so callers can catch ``httpx.TransportError`` for network problems and
``NotiBoostError`` for anything the API itself answered with.
"""

from __future__ import annotations

__all__ = ["ConfigurationError", "NotiBoostError"]

from typing import Any


class NotiBoostError(Exception):
    """Error answered by the NotiBoost API.

    Raised for any non-2xx response other than a retryable 429, and for a
    429 that is still returned once every retry has been used.

    Args:
        message: Human-readable description, taken from the response
            body's ``message`` field when the API provides one.
        status_code: The HTTP status code of the response.
        response: The full parsed response body. Defaults to an empty dict.
        method: The HTTP method of the failed request, if known.
        url: The URL of the failed request, if known.

    Example:
        ```pycon
        >>> from notiboost.exceptions import NotiBoostError
        >>> error = NotiBoostError(
        ...     "invalid field", status_code=400, response={"message": "invalid field"}
        ... )
        >>> error.status_code
        400
        >>> str(error)
        'invalid field'

        ```
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        response: Any = None,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = {} if response is None else response
        self.method = method
        self.url = url

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(message={self.message!r}, "
            f"status_code={self.status_code})"
        )


class ConfigurationError(NotiBoostError, ValueError):
    """Raised when the client is constructed with invalid settings.

    This error is raised synchronously from the constructor, before any
    network activity, and is never retried.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
