"""
Async adapter over the same request assembly and caching as BaseClient.
"""
import logging
from typing import Any, Optional

import httpx

from ..cache.integration import lookup_cached, store_cached
from ..config import ClientConfig, RestRequest
from ..errors import TransportError
from ..types import PreparedRequest, RestResponse
from .base_client import _format_body, _request_kwargs, _timeout
from .request import prepare_request
from .response import from_cache, from_httpx

logger = logging.getLogger(__name__)

LOG_PREFIX = "[AsyncRestClient]"


class AsyncRestClient:
    """Async executor; ``httpx_client`` on the config must be an httpx.AsyncClient if set."""

    def __init__(self, config: ClientConfig):
        self._config = config
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def create(cls, config: ClientConfig) -> "AsyncRestClient":
        """Factory method to create a client."""
        return cls(config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def connect(self) -> None:
        if self._config.httpx_client is not None or self._client is not None:
            return
        self._client = httpx.AsyncClient(timeout=_timeout(self._config), follow_redirects=True)

    async def close(self) -> None:
        """Close the shared client if we own it."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncRestClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def request(self, request: RestRequest, entity_type: Any = None) -> RestResponse:
        config = self._config

        key, cached = lookup_cached(config)
        if cached is not None:
            logger.debug(f"{LOG_PREFIX} Served from cache: key={key!r}")
            return from_cache(cached, config.deserializer, entity_type)

        prepared = prepare_request(config, request, config.serializer)
        logger.debug(f"{LOG_PREFIX} Request: {prepared.method} {prepared.url}")
        logger.debug(f"{LOG_PREFIX} Body: {_format_body(prepared.content)}")

        try:
            response = await self._send(prepared)
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {e}")
            raise TransportError(prepared.method, prepared.url, e) from e

        result = from_httpx(response, config.deserializer, entity_type)
        store_cached(config, key, result)
        return result

    async def _send(self, prepared: PreparedRequest) -> httpx.Response:
        client: Optional[httpx.AsyncClient] = self._config.httpx_client or self._client
        if client is not None:
            return await client.request(**_request_kwargs(prepared))

        async with httpx.AsyncClient(timeout=_timeout(self._config), follow_redirects=True) as client:
            return await client.request(**_request_kwargs(prepared))
