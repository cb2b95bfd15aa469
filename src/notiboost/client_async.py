r"""Asynchronous client for the NotiBoost API.

This module provides ``AsyncNotiBoostClient``, the asyncio counterpart of
``NotiBoostClient``. Resource methods return awaitables.
"""

from __future__ import annotations

__all__ = ["AsyncNotiBoostClient"]

from typing import TYPE_CHECKING, Any

import httpx

from notiboost.client import resolve_config
from notiboost.resources import Events, Flows, Templates, Users, Webhooks
from notiboost.retry.executor_async import AsyncRequestExecutor

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from notiboost.core.config import ClientConfig


class AsyncNotiBoostClient:
    r"""Asynchronous client for the NotiBoost notification API.

    Waits between retries use ``asyncio.sleep`` and do not block the
    event loop. Arguments are the same as for ``NotiBoostClient``, except
    that ``transport`` must be an ``httpx.AsyncBaseTransport``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from notiboost import AsyncNotiBoostClient
        >>> async def main():
        ...     async with AsyncNotiBoostClient("nb_live_key") as client:
        ...         return await client.templates.list(channel="email")
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

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
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = resolve_config(
            api_key, config, base_url=base_url, timeout=timeout, max_retries=max_retries
        )
        self._http: httpx.AsyncClient = httpx.AsyncClient(
            timeout=self._config.timeout,
            verify=True,
            headers={"User-Agent": self._config.user_agent},
            transport=transport,
        )
        self._executor: AsyncRequestExecutor = AsyncRequestExecutor(self._config, self._http)

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

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._http.aclose()

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        r"""Send a request to the API with automatic retry logic.

        See ``NotiBoostClient.request`` for the arguments and errors.
        """
        return await self._executor.execute(method, path, body, headers)
