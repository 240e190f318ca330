"""
Core type definitions for rest-client.
"""
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, Dict, Generic, List, Literal, Optional, Protocol, Tuple, TypeVar, Union, runtime_checkable

T = TypeVar("T")

# HTTP Methods
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# Methods that carry a body when no entity is set
BODY_METHODS = ("POST", "PUT", "PATCH")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Ordered, multi-valued headers / parameters
Pairs = List[Tuple[str, str]]


class OAuthType(str, Enum):
    REQUEST_TOKEN = "request_token"
    ACCESS_TOKEN = "access_token"
    PROTECTED_RESOURCE = "protected_resource"


class OAuthSignatureMethod(str, Enum):
    HMAC_SHA1 = "HMAC-SHA1"
    HMAC_SHA256 = "HMAC-SHA256"
    PLAINTEXT = "PLAINTEXT"


class OAuthParameterHandling(str, Enum):
    HTTP_AUTHORIZATION_HEADER = "http_authorization_header"
    URL_OR_POST_PARAMETERS = "url_or_post_parameters"


class CacheMode(str, Enum):
    ABSOLUTE = "absolute"
    SLIDING = "sliding"


@dataclass(frozen=True)
class RestResponse(Generic[T]):
    """Standardized response object."""
    status_code: int
    status_description: str
    headers: Dict[str, str]
    url: str
    content: str
    content_entity: Optional[T] = None
    is_from_cache: bool = False

    @property
    def is_success(self) -> bool:
        """Check if status code is 2xx."""
        return 200 <= self.status_code <= 299

    @property
    def content_type(self) -> Optional[str]:
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None


@dataclass(frozen=True)
class CachedResponse:
    """What the response cache keeps for a key."""
    status_code: int
    status_description: str
    headers: Dict[str, str] = field(default_factory=dict)
    url: str = ""
    content: str = ""


@dataclass
class PreparedRequest:
    """Outgoing request after merging client and request configuration."""
    method: str
    url: str  # Without query string
    params: Pairs = field(default_factory=list)
    headers: Pairs = field(default_factory=list)
    content: Optional[str] = None

    def get_header(self, name: str) -> Optional[str]:
        for key, value in self.headers:
            if key.lower() == name.lower():
                return value
        return None

    def has_header(self, name: str) -> bool:
        return self.get_header(name) is not None


@runtime_checkable
class Serializer(Protocol):
    """Protocol for request entity serialization."""
    content_type: str

    def serialize(self, entity: Any) -> str: ...


@runtime_checkable
class Deserializer(Protocol):
    """Protocol for response entity deserialization."""
    def deserialize(self, content: Union[str, bytes], entity_type: Any = None) -> Any: ...


@runtime_checkable
class Cache(Protocol):
    """Key/value store with per-entry expiration, owned by the caller."""
    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any, duration: timedelta, mode: CacheMode) -> None: ...

    def invalidate(self, key: str) -> None: ...
