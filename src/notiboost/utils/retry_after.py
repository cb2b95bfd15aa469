r"""Parsing of the ``retry_after`` hint of rate-limited responses.

The NotiBoost API sends the number of seconds to wait in the JSON body of
a 429 response, under the ``retry_after`` key.
"""

from __future__ import annotations

__all__ = ["parse_retry_after"]

import logging
import math
from typing import Any

logger: logging.Logger = logging.getLogger(__name__)


def parse_retry_after(body: Any) -> float | None:
    """Parse the ``retry_after`` field of a rate-limited response body.

    Integers, floats and numeric strings are accepted. Negative values
    are clamped to 0.0.

    Args:
        body: The parsed response body.

    Returns:
        The number of seconds to wait, or None if the body carries no
        usable hint, so the caller can fall back to its default wait.

    Example:
        ```pycon
        >>> from notiboost.utils.retry_after import parse_retry_after
        >>> parse_retry_after({"retry_after": 5})
        5.0
        >>> parse_retry_after({"retry_after": "2.5"})
        2.5
        >>> parse_retry_after({}) is None
        True
        >>> parse_retry_after({"retry_after": "soon"}) is None
        True

        ```
    """
    if not isinstance(body, dict):
        return None
    value = body.get("retry_after")
    if value is None or isinstance(value, bool):
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        logger.debug(f"Failed to parse retry_after value: {value!r}")
        return None
    if math.isnan(seconds) or math.isinf(seconds):
        logger.debug(f"Ignoring non-finite retry_after value: {value!r}")
        return None
    return max(0.0, seconds)
