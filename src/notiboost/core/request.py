r"""Request construction for the NotiBoost API.

This module turns the ``(method, path, body, headers)`` arguments of a
call into the URL, header list and wire body sent on every attempt.
"""

from __future__ import annotations

__all__ = ["RequestSpec", "build_headers", "build_url", "encode_body"]

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from notiboost.core.config import BODY_METHODS
from notiboost.core.validation import validate_method

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class RequestSpec:
    """Description of one API call, shared by all of its attempts.

    Args:
        method: Upper-cased HTTP method (GET, POST, PUT or DELETE).
        path: Resource path relative to the base URL, usually with a
            leading slash. May carry a query string.
        body: Optional JSON-compatible payload. Only sent for POST and PUT.
        headers: Extra headers appended after the default headers.
    """

    method: str
    path: str
    body: Any = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        method: str,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> RequestSpec:
        """Create a spec after validating and normalizing the method.

        Raises:
            ValueError: If the method is not supported.

        Example:
            ```pycon
            >>> from notiboost.core.request import RequestSpec
            >>> spec = RequestSpec.create("get", "/api/v1/users/u1", body={"ignored": True})
            >>> spec.method
            'GET'
            >>> spec.has_body
            False

            ```
        """
        return cls(
            method=validate_method(method),
            path=path,
            body=body,
            headers=dict(headers or {}),
        )

    @property
    def has_body(self) -> bool:
        """Whether a JSON body is attached to this request."""
        return self.method in BODY_METHODS and self.body is not None


def build_url(base_url: str, path: str) -> str:
    """Join the base URL and a resource path with exactly one slash.

    Example:
        ```pycon
        >>> from notiboost.core.request import build_url
        >>> build_url("https://api.notiboost.com/", "/api/v1/events")
        'https://api.notiboost.com/api/v1/events'
        >>> build_url("https://api.notiboost.com", "api/v1/events")
        'https://api.notiboost.com/api/v1/events'

        ```
    """
    base = base_url.rstrip("/")
    if not path:
        return base
    return f"{base}/{path.lstrip('/')}"


def build_headers(api_key: str, extra: Mapping[str, str] | None = None) -> list[tuple[str, str]]:
    """Build the header list of a request.

    The two defaults come first and the extras are appended in order. A
    caller-supplied header with the same name as a default is sent in
    addition to it, not instead of it.

    Args:
        api_key: The bearer credential.
        extra: Optional extra headers.

    Returns:
        The headers as a list of ``(name, value)`` pairs.
    """
    headers = [
        ("Authorization", f"Bearer {api_key}"),
        ("Content-Type", "application/json"),
    ]
    if extra:
        headers.extend((str(key), str(value)) for key, value in extra.items())
    return headers


def encode_body(spec: RequestSpec) -> bytes | None:
    """Serialize the request body to UTF-8 JSON.

    Returns:
        The encoded body, or ``None`` for methods that carry no body.
    """
    if not spec.has_body:
        return None
    return json.dumps(spec.body, ensure_ascii=False).encode("utf-8")
