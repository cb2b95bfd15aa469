r"""notiboost - Resilient Python client for the NotiBoost notification API.

This package translates resource-oriented operations (events, users,
flows, templates, webhooks) into authenticated HTTPS requests built on
httpx, and absorbs transient failures with bounded retries.

Key Features:
    - Rate-limited responses (429) retried after the server's retry_after hint
    - Transport failures (DNS, connect, timeout) retried with exponential backoff
    - Other error responses raised immediately as NotiBoostError
    - Malformed response bodies degrade to an empty dict
    - Synchronous and asyncio clients with the same behavior
    - Callback hooks and structured logging for observability

Example:
    ```pycon
    >>> from notiboost import NotiBoostClient
    >>> with NotiBoostClient("nb_live_key", max_retries=5) as client:  # doctest: +SKIP
    ...     client.events.ingest({"event_name": "order_shipped", "user_id": "u1"})
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncNotiBoostClient",
    "ClientConfig",
    "ConfigurationError",
    "NotiBoostClient",
    "NotiBoostError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from notiboost.client import NotiBoostClient
from notiboost.client_async import AsyncNotiBoostClient
from notiboost.core.config import ClientConfig
from notiboost.exceptions import ConfigurationError, NotiBoostError

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
