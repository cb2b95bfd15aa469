r"""Synchronous client for the NotiBoost API.

This module provides ``NotiBoostClient``, which owns the client
configuration, the underlying ``httpx.Client`` and the request executor,
and exposes the API resources as attributes.
"""

from __future__ import annotations

__all__ = ["NotiBoostClient"]

from typing import TYPE_CHECKING, Any

import httpx

from notiboost.core.config import ClientConfig
from notiboost.resources import Events, Flows, Templates, Users, Webhooks
from notiboost.retry.executor import RequestExecutor

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self


def resolve_config(
    api_key: str | None,
    config: ClientConfig | None,
    **overrides: Any,
) -> ClientConfig:
    """Combine an optional base config with keyword overrides.

    Keyword values that are not None take precedence over the fields of
    ``config``. Without a config, defaults are used for everything that
    is not given.

    Raises:
        ConfigurationError: If the resulting configuration is invalid,
            for instance when no API key was given.
    """
    if config is None:
        filtered = {k: v for k, v in overrides.items() if v is not None}
        return ClientConfig(api_key=api_key, **filtered)
    return config.merge(api_key=api_key, **overrides)


class NotiBoostClient:
    r"""Synchronous client for the NotiBoost notification API.

    Every call goes through a ``RequestExecutor``: rate-limited responses
    and transport failures are retried up to ``max_retries`` times, other
    error responses raise ``NotiBoostError`` immediately.

    Args:
        api_key: Bearer credential. Required unless given through ``config``.
        config: Optional base configuration.
        base_url: Overrides the base URL of the API.
        timeout: Overrides the per-attempt timeout in seconds.
        max_retries: Overrides the maximum number of retries.
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``
            in tests. TLS certificate verification is always enabled.

    Raises:
        ConfigurationError: If the API key is missing or another setting
            is invalid. Raised before any network activity.

    Example:
        ```pycon
        >>> from notiboost import NotiBoostClient
        >>> with NotiBoostClient("nb_live_key") as client:  # doctest: +SKIP
        ...     client.users.create({"user_id": "u1", "email": "ada@example.com"})
        ...     client.events.ingest({"event_name": "welcome", "user_id": "u1"})
        ...

        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: ClientConfig | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = resolve_config(
            api_key, config, base_url=base_url, timeout=timeout, max_retries=max_retries
        )
        self._http: httpx.Client = httpx.Client(
            timeout=self._config.timeout,
            verify=True,
            headers={"User-Agent": self._config.user_agent},
            transport=transport,
        )
        self._executor: RequestExecutor = RequestExecutor(self._config, self._http)

        self.events = Events(self)
        self.users = Users(self)
        self.flows = Flows(self)
        self.templates = Templates(self)
        self.webhooks = Webhooks(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_url={self._config.base_url!r})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._http.close()

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        r"""Send a request to the API with automatic retry logic.

        Args:
            method: HTTP method, one of GET, POST, PUT or DELETE.
            path: Resource path, e.g. ``"/api/v1/users/u1"``.
            body: Optional JSON-compatible payload, only sent for POST and PUT.
            headers: Optional extra headers, appended after the defaults.

        Returns:
            The parsed JSON body of the response.

        Raises:
            NotiBoostError: If the API answers with an error.
            httpx.TransportError: If no response could be obtained.
        """
        return self._executor.execute(method, path, body, headers)
