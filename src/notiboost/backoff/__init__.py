r"""Backoff strategies for retry delays.

This package provides the backoff strategies used between attempts:
exponential backoff after transport failures and a constant wait after
rate-limited responses.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff", "ExponentialBackoff"]

from notiboost.backoff.base import BaseBackoffStrategy
from notiboost.backoff.constant import ConstantBackoff
from notiboost.backoff.exponential import ExponentialBackoff
