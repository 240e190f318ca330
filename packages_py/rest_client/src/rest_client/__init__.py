"""
Rest Client - configurable REST client with pluggable auth, caching and serialization
"""

__version__ = "0.1.0"

from .auth import BasicAuthCredentials, OAuthCredentials, WebCredentials
from .cache import MemoryCache, create_memory_cache
from .client import RestClient
from .config import CacheOptions, ClientConfig, RestRequest, TimeoutConfig
from .core.async_client import AsyncRestClient
from .errors import ConfigurationError, RestClientError, SerializationError, TransportError
from .serialization import JsonSerializer
from .types import (
    CacheMode,
    OAuthParameterHandling,
    OAuthSignatureMethod,
    OAuthType,
    RestResponse,
)

__all__ = [
    "ClientConfig", "RestRequest", "CacheOptions", "TimeoutConfig",
    "RestClient", "AsyncRestClient",
    "RestResponse",
    "WebCredentials", "BasicAuthCredentials", "OAuthCredentials",
    "OAuthType", "OAuthSignatureMethod", "OAuthParameterHandling",
    "MemoryCache", "create_memory_cache", "CacheMode",
    "JsonSerializer",
    "RestClientError", "ConfigurationError", "TransportError", "SerializationError",
]
