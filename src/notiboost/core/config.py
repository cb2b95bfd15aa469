r"""Configuration dataclass and defaults for the NotiBoost client.

This module provides configuration constants and the immutable
configuration object shared by ``NotiBoostClient`` and
``AsyncNotiBoostClient`` and their request executors.
"""

from __future__ import annotations

__all__ = [
    "BODY_METHODS",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RATE_LIMIT_WAIT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "MAX_RETRY_WAIT",
    "RATE_LIMIT_STATUS_CODE",
    "SUPPORTED_METHODS",
]

from dataclasses import dataclass, field, replace
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING, Any

from notiboost.core.validation import (
    SUPPORTED_METHODS,
    validate_api_key,
    validate_max_retries,
    validate_timeout,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from notiboost.backoff import BaseBackoffStrategy
    from notiboost.callbacks import FailureInfo, RequestInfo, ResponseInfo, RetryInfo


# Production endpoint of the NotiBoost API
DEFAULT_BASE_URL = "https://api.notiboost.com"

# Timeout in seconds for a single attempt, not for the whole retry sequence
DEFAULT_TIMEOUT = 30.0

# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Wait in seconds after a 429 whose body carries no retry_after hint
DEFAULT_RATE_LIMIT_WAIT = 1.0

# Longest single wait in seconds; larger values overflow time.sleep on some platforms
MAX_RETRY_WAIT = float(2**31 - 1)

RATE_LIMIT_STATUS_CODE = 429

# Only these verbs carry a JSON body
BODY_METHODS = ("POST", "PUT")

try:
    DEFAULT_USER_AGENT = f"notiboost-python/{version('notiboost')}"
except PackageNotFoundError:  # pragma: no cover
    DEFAULT_USER_AGENT = "notiboost-python/0.0.0"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for a NotiBoost client session.

    Args:
        api_key: Bearer credential sent with every request. Required.
        base_url: Base address of the API. Paths are appended to it.
        timeout: Timeout in seconds for one attempt. Must be > 0.
        max_retries: Maximum number of retry attempts. Must be >= 0.
        user_agent: Value of the ``User-Agent`` header.
        backoff_strategy: Backoff applied after transport failures. If
            ``None``, ``ExponentialBackoff(base_delay=1.0)`` is used, i.e.
            ``2 ** attempt`` seconds with no cap.
        on_request: Optional callback called before each attempt.
        on_retry: Optional callback called before each retry wait.
        on_success: Optional callback called when a request succeeds.
        on_failure: Optional callback called before a terminal error is raised.

    Raises:
        ConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from notiboost.core.config import ClientConfig
        >>> config = ClientConfig(api_key="nb_test_key")
        >>> config.base_url
        'https://api.notiboost.com'
        >>> config.max_retries
        3
        >>> config.merge(max_retries=0).max_retries
        0

        ```
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    user_agent: str = DEFAULT_USER_AGENT
    backoff_strategy: BaseBackoffStrategy | None = None
    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        validate_api_key(self.api_key)
        validate_timeout(self.timeout)
        validate_max_retries(self.max_retries)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied; the original instance
        is left unchanged.

        Args:
            **overrides: Keyword arguments for fields to override.

        Returns:
            A new, validated ClientConfig instance.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary.

        The credential is masked so the result is safe to log.

        Returns:
            Dictionary with the configuration parameters.
        """
        return {
            "api_key": "***",
            "base_url": self.base_url,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "user_agent": self.user_agent,
            "backoff_strategy": self.backoff_strategy,
        }
