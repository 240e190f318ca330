"""
Response cache lookups and stores for the request executor.
"""
import logging
from typing import Optional, Tuple

from ..config import ClientConfig
from ..errors import ConfigurationError
from ..types import CachedResponse, RestResponse

logger = logging.getLogger(__name__)
LOG_PREFIX = "[CACHE]"


def validate_cache_config(config: ClientConfig) -> None:
    if config.cache is not None and config.cache_key_function is None:
        raise ConfigurationError("cache is configured but cache_key_function is missing")


def cache_key(config: ClientConfig) -> Optional[str]:
    """Compute the cache key, or None when caching is not configured."""
    validate_cache_config(config)
    if config.cache is None:
        if config.cache_key_function is not None:
            logger.debug(f"{LOG_PREFIX} cache_key_function set without a cache; ignoring")
        return None

    key = config.cache_key_function()
    if not isinstance(key, str) or not key:
        raise ConfigurationError(f"cache_key_function must return a non-empty string, got {key!r}")
    return key


def lookup_cached(config: ClientConfig) -> Tuple[Optional[str], Optional[CachedResponse]]:
    """Return (key, cached entry); both None when caching is off."""
    key = cache_key(config)
    if key is None:
        return None, None

    cached = config.cache.get(key)
    if cached is None:
        logger.debug(f"{LOG_PREFIX} miss key={key!r}")
        return key, None
    if not isinstance(cached, CachedResponse):
        logger.warning(f"{LOG_PREFIX} Ignoring foreign entry under key={key!r}")
        return key, None

    logger.debug(f"{LOG_PREFIX} hit key={key!r}")
    return key, cached


def store_cached(config: ClientConfig, key: Optional[str], response: RestResponse) -> None:
    if key is None or config.cache is None:
        return
    if not response.is_success:
        logger.debug(f"{LOG_PREFIX} Not caching status={response.status_code} for key={key!r}")
        return

    entry = CachedResponse(
        status_code=response.status_code,
        status_description=response.status_description,
        headers=dict(response.headers),
        url=response.url,
        content=response.content,
    )
    options = config.cache_options
    config.cache.set(key, entry, options.duration, options.mode)
    logger.debug(f"{LOG_PREFIX} stored key={key!r} duration={options.duration} mode={options.mode.value}")
