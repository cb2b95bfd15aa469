r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from notiboost.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (2 ** attempt), with optional max_delay cap.

    This is the backoff applied after transport failures. With the default
    ``base_delay`` of 1.0 and no ``max_delay`` the waits are 1s, 2s, 4s, ...
    and keep growing with the attempt number, up to ``inf`` once the
    result no longer fits in a float.

    Args:
        base_delay: The base delay factor (default: 1.0).
        max_delay: Optional maximum delay cap in seconds. Unset by default.

    Example:
        ```pycon
        >>> from notiboost.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff()
        >>> backoff.calculate(0)
        1.0
        >>> backoff.calculate(3)
        8.0
        >>> backoff.calculate(10)
        1024.0
        >>> ExponentialBackoff(max_delay=30.0).calculate(10)
        30.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def calculate(self, attempt: int) -> float:
        try:
            delay = math.ldexp(self.base_delay, attempt)
        except OverflowError:
            delay = math.inf
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return float(delay)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay}, max_delay={self.max_delay})"
