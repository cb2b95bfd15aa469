r"""Core configuration, validation and request construction.

This package contains the pieces shared by the synchronous and
asynchronous clients: the immutable client configuration, parameter
validation and the translation of a call into URL, headers and body.
"""

from __future__ import annotations

__all__ = [
    "BODY_METHODS",
    "DEFAULT_BASE_URL",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RATE_LIMIT_WAIT",
    "DEFAULT_TIMEOUT",
    "RATE_LIMIT_STATUS_CODE",
    "SUPPORTED_METHODS",
    "ClientConfig",
    "RequestSpec",
    "build_headers",
    "build_url",
    "encode_body",
    "validate_api_key",
    "validate_max_retries",
    "validate_method",
    "validate_timeout",
]

from notiboost.core.config import (
    BODY_METHODS,
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RATE_LIMIT_WAIT,
    DEFAULT_TIMEOUT,
    RATE_LIMIT_STATUS_CODE,
    SUPPORTED_METHODS,
    ClientConfig,
)
from notiboost.core.request import RequestSpec, build_headers, build_url, encode_body
from notiboost.core.validation import (
    validate_api_key,
    validate_max_retries,
    validate_method,
    validate_timeout,
)
