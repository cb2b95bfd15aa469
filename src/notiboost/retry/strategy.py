r"""Retry strategy for calculating the wait before the next attempt.

This module provides the RetryStrategy class for calculating retry
delays from the outcome of the attempt that just failed.
"""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from notiboost.backoff import ConstantBackoff, ExponentialBackoff
from notiboost.core.config import DEFAULT_RATE_LIMIT_WAIT, MAX_RETRY_WAIT
from notiboost.retry.outcome import RateLimited, TransportFailure

if TYPE_CHECKING:
    from notiboost.backoff import BaseBackoffStrategy
    from notiboost.retry.outcome import Outcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating retry delays.

    Rate-limited responses wait the number of seconds hinted by the
    server, or a flat default, and never consume the exponential backoff.
    Transport failures wait according to the backoff strategy. Every wait
    is clamped to ``MAX_RETRY_WAIT`` seconds.

    Args:
        backoff_strategy: Backoff applied after transport failures.
            Defaults to ExponentialBackoff(), i.e. ``2 ** attempt`` seconds.
        rate_limit_wait: Wait in seconds after a 429 without hint.

    Example:
        ```pycon
        >>> from notiboost.retry.outcome import RateLimited
        >>> from notiboost.retry.strategy import RetryStrategy
        >>> strategy = RetryStrategy()
        >>> strategy.calculate_delay(2, RateLimited(status_code=429, body={}))
        1.0
        >>> strategy.calculate_delay(2, RateLimited(status_code=429, body={}, retry_after=7.0))
        7.0

        ```
    """

    def __init__(
        self,
        backoff_strategy: BaseBackoffStrategy | None = None,
        rate_limit_wait: float = DEFAULT_RATE_LIMIT_WAIT,
    ) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else ExponentialBackoff()
        )
        self.rate_limit_backoff = ConstantBackoff(rate_limit_wait)

    def calculate_delay(self, attempt: int, outcome: Outcome) -> float:
        """Calculate delay before next retry.

        Args:
            attempt: The 0-indexed number of the attempt that failed.
            outcome: The retryable outcome of that attempt.

        Returns:
            Sleep time in seconds, at most ``MAX_RETRY_WAIT``.

        Raises:
            TypeError: If the outcome is not retryable.
        """
        if isinstance(outcome, RateLimited):
            if outcome.retry_after is not None:
                logger.debug(f"Using retry_after hint from response body: {outcome.retry_after}s")
                delay = outcome.retry_after
            else:
                delay = self.rate_limit_backoff.calculate(attempt)
        elif isinstance(outcome, TransportFailure):
            delay = self.backoff_strategy.calculate(attempt)
        else:
            msg = f"{type(outcome).__name__} is not a retryable outcome"
            raise TypeError(msg)
        return min(delay, MAX_RETRY_WAIT)
