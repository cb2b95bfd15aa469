r"""Parameter validation utilities for the NotiBoost client.

This module provides validation functions for the client configuration
and the per-call request parameters. Configuration problems raise
``ConfigurationError`` while an unsupported HTTP verb, which is a
programming error in the calling layer, raises ``ValueError``.
"""

from __future__ import annotations

__all__ = [
    "validate_api_key",
    "validate_max_retries",
    "validate_method",
    "validate_timeout",
]

from notiboost.exceptions import ConfigurationError

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


def validate_api_key(api_key: str | None) -> None:
    """Validate the API credential.

    Args:
        api_key: The bearer credential used to authenticate every request.

    Raises:
        ConfigurationError: If the credential is missing or blank.

    Example:
        ```pycon
        >>> from notiboost.core.validation import validate_api_key
        >>> validate_api_key("nb_live_123")
        >>> validate_api_key("")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        notiboost.exceptions.ConfigurationError: API key is required

        ```
    """
    if not isinstance(api_key, str) or not api_key.strip():
        msg = "API key is required"
        raise ConfigurationError(msg)


def validate_timeout(timeout: float) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for a single attempt.
            Must be > 0.

    Raises:
        ConfigurationError: If timeout is <= 0.
    """
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ConfigurationError(msg)


def validate_max_retries(max_retries: int) -> None:
    """Validate the retry budget.

    Args:
        max_retries: Maximum number of retry attempts. Must be >= 0.
            A value of 0 means only the initial attempt is made.

    Raises:
        ConfigurationError: If max_retries is negative or not an integer.
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an integer, got {max_retries!r}"
        raise ConfigurationError(msg)
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ConfigurationError(msg)


def validate_method(method: str) -> str:
    """Normalize and validate an HTTP method.

    Args:
        method: The HTTP method name, in any case.

    Returns:
        The upper-cased method name.

    Raises:
        ValueError: If the method is not one of GET, POST, PUT or DELETE.

    Example:
        ```pycon
        >>> from notiboost.core.validation import validate_method
        >>> validate_method("post")
        'POST'

        ```
    """
    normalized = method.upper()
    if normalized not in SUPPORTED_METHODS:
        msg = f"Unsupported HTTP method {method!r}; expected one of {SUPPORTED_METHODS}"
        raise ValueError(msg)
    return normalized
