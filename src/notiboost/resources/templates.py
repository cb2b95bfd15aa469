r"""Templates resource."""

from __future__ import annotations

__all__ = ["Templates", "build_query"]

from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from notiboost.resources.base import BaseResource, quote_segment

if TYPE_CHECKING:
    from collections.abc import Mapping


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(filters: Mapping[str, Any]) -> str:
    """Encode list filters as a query string.

    ``None`` values are dropped, booleans are rendered as ``true`` or
    ``false`` and list or tuple values repeat the key.

    Example:
        ```pycon
        >>> from notiboost.resources.templates import build_query
        >>> build_query({"channel": "email", "active": True, "page": None})
        'channel=email&active=true'
        >>> build_query({"tag": ["a", "b"]})
        'tag=a&tag=b'

        ```
    """
    pairs: list[tuple[str, str]] = []
    for key, value in filters.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _format_value(item)) for item in value)
        else:
            pairs.append((key, _format_value(value)))
    return urlencode(pairs)


class Templates(BaseResource):
    """Message templates rendered for each channel."""

    def create(self, template: Mapping[str, Any]) -> Any:
        return self._request("POST", "/api/v1/templates", dict(template))

    def list(self, **filters: Any) -> Any:
        """List templates, optionally filtered (e.g. ``channel="email"``)."""
        query = build_query(filters)
        path = f"/api/v1/templates?{query}" if query else "/api/v1/templates"
        return self._request("GET", path)

    def get(self, template_id: str) -> Any:
        return self._request("GET", f"/api/v1/templates/{quote_segment(template_id)}")

    def update(self, template_id: str, data: Mapping[str, Any]) -> Any:
        return self._request("PUT", f"/api/v1/templates/{quote_segment(template_id)}", dict(data))
