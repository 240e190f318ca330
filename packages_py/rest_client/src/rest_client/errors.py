from typing import Any, Optional


class RestClientError(Exception):
    """Base exception for rest-client errors."""
    pass


class ConfigurationError(RestClientError, ValueError):
    """Raised when client or request configuration is invalid."""
    pass


class TransportError(RestClientError):
    def __init__(self, method: str, url: str, cause: Exception):
        msg = f"{method} {url} failed: {cause}"
        super().__init__(msg)
        self.method = method
        self.url = url
        self.cause = cause


class SerializationError(RestClientError):
    def __init__(self, message: str, entity_type: Optional[Any] = None):
        super().__init__(message)
        self.entity_type = entity_type
