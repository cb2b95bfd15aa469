r"""Request execution engine with retry and backoff.

Public API:
    - RequestExecutor: Synchronous request executor
    - AsyncRequestExecutor: Asynchronous request executor
    - RetryStrategy: Strategy for calculating retry delays
    - CallbackManager: Manager for callback invocations
    - Success, RateLimited, ErrorResponse, TransportFailure: Attempt outcomes
"""

from __future__ import annotations

__all__ = [
    "AsyncRequestExecutor",
    "CallbackManager",
    "ErrorResponse",
    "Outcome",
    "RateLimited",
    "RequestExecutor",
    "RetryStrategy",
    "Success",
    "TransportFailure",
    "classify_response",
    "classify_status",
]

from notiboost.retry.executor import RequestExecutor
from notiboost.retry.executor_async import AsyncRequestExecutor
from notiboost.retry.manager import CallbackManager
from notiboost.retry.outcome import (
    ErrorResponse,
    Outcome,
    RateLimited,
    Success,
    TransportFailure,
    classify_response,
    classify_status,
)
from notiboost.retry.strategy import RetryStrategy
