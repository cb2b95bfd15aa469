r"""HTTP response body handling.

The NotiBoost API answers with JSON. A body that is empty, ``null`` or
not valid JSON is never an error for the caller: it degrades to an empty
mapping.
"""

from __future__ import annotations

__all__ = ["extract_message", "parse_body"]

import json
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

logger: logging.Logger = logging.getLogger(__name__)


def parse_body(response: httpx.Response) -> Any:
    """Parse the JSON body of a response.

    Args:
        response: The HTTP response to parse.

    Returns:
        The decoded JSON value, or an empty dict if the body is empty,
        ``null`` or cannot be decoded.

    Example:
        ```pycon
        >>> import httpx
        >>> from notiboost.utils.response import parse_body
        >>> parse_body(httpx.Response(200, json={"id": "evt_1"}))
        {'id': 'evt_1'}
        >>> parse_body(httpx.Response(502, text="<html>Bad Gateway</html>"))
        {}

        ```
    """
    if not response.content:
        return {}
    try:
        data = json.loads(response.content)
    except (ValueError, UnicodeDecodeError):
        logger.debug(f"Response with status {response.status_code} has a malformed JSON body")
        return {}
    return {} if data is None else data


def extract_message(body: Any, status_code: int) -> str:
    """Return the ``message`` field of an error body, or a generic one.

    A string ``message`` is returned as-is, even when it is empty.

    Example:
        ```pycon
        >>> from notiboost.utils.response import extract_message
        >>> extract_message({"message": "invalid field"}, 400)
        'invalid field'
        >>> extract_message({}, 503)
        'HTTP 503'
        >>> extract_message({"message": ""}, 400)
        ''

        ```
    """
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str):
            return message
    return f"HTTP {status_code}"
