r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before the next
    attempt after a failed one, based on the 0-indexed number of the
    attempt that just failed.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay for a given attempt.

        Args:
            attempt: The 0-indexed number of the attempt that failed.
                For example, attempt=0 is the initial request.

        Returns:
            The delay in seconds before the next attempt.
        """
