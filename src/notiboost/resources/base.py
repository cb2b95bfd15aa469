r"""Base class for resource wrappers.

Resource wrappers only shape parameters into ``(method, path, body)``
and delegate to the owning client's ``request`` method. With an
``AsyncNotiBoostClient`` that method is a coroutine function, so every
resource method returns an awaitable instead of the parsed body.
"""

from __future__ import annotations

__all__ = ["BaseResource", "quote_segment"]

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from notiboost.client import NotiBoostClient
    from notiboost.client_async import AsyncNotiBoostClient


def quote_segment(value: str) -> str:
    """Percent-encode an identifier for use as one path segment.

    Example:
        ```pycon
        >>> from notiboost.resources.base import quote_segment
        >>> quote_segment("user/42")
        'user%2F42'

        ```
    """
    return quote(str(value), safe="")


class BaseResource:
    """Common plumbing of the resource wrappers."""

    def __init__(self, client: NotiBoostClient | AsyncNotiBoostClient) -> None:
        self._client = client

    def _request(self, method: str, path: str, body: Any = None) -> Any:
        return self._client.request(method, path, body)
