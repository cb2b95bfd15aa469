r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from notiboost.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every attempt. The client uses it for the
    flat wait after a 429 response that carries no ``retry_after`` hint.

    Args:
        delay: The fixed delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from notiboost.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff()
        >>> backoff.calculate(0)
        1.0
        >>> backoff.calculate(5)
        1.0

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = float(delay)

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"
