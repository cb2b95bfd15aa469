r"""Utility functions for response handling and logging.

This package provides helpers for decoding response bodies, reading the
``retry_after`` hint of rate-limited responses and emitting structured
log records.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "extract_message",
    "get_correlation_id",
    "log_structured",
    "parse_body",
    "parse_retry_after",
    "set_correlation_id",
]

from notiboost.utils.response import extract_message, parse_body
from notiboost.utils.retry_after import parse_retry_after
from notiboost.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
