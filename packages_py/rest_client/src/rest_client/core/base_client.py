"""
Core request executor based on httpx.
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..cache.integration import lookup_cached, store_cached
from ..config import ClientConfig, RestRequest, normalize_timeout
from ..errors import TransportError
from ..types import PreparedRequest, RestResponse
from .request import prepare_request
from .response import from_cache, from_httpx

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[RestClient]"


def _format_body(body: Optional[str]) -> str:
    """Summarise a prepared request body for debug logs."""
    if body is None:
        return "<empty>"
    if body.lstrip().startswith(("{", "[")):
        try:
            return json.dumps(json.loads(body), indent=2)
        except json.JSONDecodeError:
            pass
    if len(body) > 5000:
        return body[:5000] + "... (truncated)"
    return body


def _timeout(config: ClientConfig) -> httpx.Timeout:
    timeout = normalize_timeout(config.timeout)
    return httpx.Timeout(
        connect=timeout.connect,
        read=timeout.read,
        write=timeout.write,
        pool=timeout.pool,
    )


def _request_kwargs(prepared: PreparedRequest) -> Dict[str, Any]:
    return {
        "method": prepared.method,
        "url": prepared.url,
        "params": prepared.params or None,
        "headers": prepared.headers,
        "content": prepared.content,
    }


class BaseClient:
    """
    Synchronous request executor.

    Each call opens and closes its own httpx.Client unless the config carries
    a caller-owned ``httpx_client`` or the executor is used as a context
    manager, in which case one owned client is shared until ``close()``.
    """
    def __init__(self, config: ClientConfig):
        self._config = config
        self._client: Optional[httpx.Client] = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    def connect(self) -> None:
        """Open a shared client if none is configured."""
        if self._config.httpx_client is not None or self._client is not None:
            return
        self._client = httpx.Client(timeout=_timeout(self._config), follow_redirects=True)

    def close(self) -> None:
        """Close the shared client if we own it."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "BaseClient":
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def request(self, request: RestRequest, entity_type: Any = None) -> RestResponse:
        """Execute a request, serving it from the cache when possible."""
        config = self._config

        key, cached = lookup_cached(config)
        if cached is not None:
            logger.debug(f"{LOG_PREFIX} Served from cache: key={key!r}")
            return from_cache(cached, config.deserializer, entity_type)

        prepared = prepare_request(config, request, config.serializer)

        # Logging
        logger.debug(f"{LOG_PREFIX} Request: {prepared.method} {prepared.url}")
        logger.debug(f"{LOG_PREFIX} Body: {_format_body(prepared.content)}")

        try:
            response = self._send(prepared)
        except httpx.RequestError as e:
            logger.error(f"{LOG_PREFIX} Request failed: {e}")
            raise TransportError(prepared.method, prepared.url, e) from e

        logger.debug(f"{LOG_PREFIX} Response: {response.status_code} {response.reason_phrase}")
        result = from_httpx(response, config.deserializer, entity_type)
        store_cached(config, key, result)
        return result

    def _send(self, prepared: PreparedRequest) -> httpx.Response:
        client: Optional[httpx.Client] = self._config.httpx_client or self._client
        if client is not None:
            return client.request(**_request_kwargs(prepared))

        with httpx.Client(timeout=_timeout(self._config), follow_redirects=True) as client:
            return client.request(**_request_kwargs(prepared))
