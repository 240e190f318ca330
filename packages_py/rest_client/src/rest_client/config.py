"""
Configuration models and validation for rest-client.
"""
from datetime import timedelta
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, Field, field_validator

from .auth.credentials import WebCredentials
from .errors import ConfigurationError
from .settings import DEFAULT_ENV_PREFIX, env_key, resolve, resolve_float
from .types import Cache, CacheMode, Deserializer, HttpMethod, Pairs, Serializer

# Constants
DEFAULT_TIMEOUT_CONNECT = 5.0
DEFAULT_TIMEOUT_READ = 30.0
DEFAULT_TIMEOUT_WRITE = 10.0
DEFAULT_CACHE_DURATION = timedelta(minutes=5)
DEFAULT_USER_AGENT = "rest-client-python/0.1.0"


class TimeoutConfig(BaseModel):
    """Timeout configuration."""
    connect: float = DEFAULT_TIMEOUT_CONNECT
    read: float = DEFAULT_TIMEOUT_READ
    write: float = DEFAULT_TIMEOUT_WRITE
    pool: Optional[float] = None


class CacheOptions(BaseModel):
    """Expiration policy for cached responses."""
    duration: timedelta = DEFAULT_CACHE_DURATION
    mode: CacheMode = CacheMode.ABSOLUTE

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: timedelta) -> timedelta:
        if v.total_seconds() <= 0:
            raise ValueError("cache duration must be positive")
        return v


def _to_pairs(value: Any) -> Pairs:
    """Normalize a mapping or pair iterable; pairs with a None value are dropped."""
    if value is None:
        return []
    if isinstance(value, dict):
        value = value.items()
    return [(str(k), str(v)) for k, v in value if v is not None]


class _PairsModel(BaseModel):
    """Shared headers/parameters handling for client and request models."""
    model_config = {"arbitrary_types_allowed": True, "validate_assignment": True}

    headers: Pairs = Field(default_factory=list)
    parameters: Pairs = Field(default_factory=list)

    @field_validator("headers", "parameters", mode="before")
    @classmethod
    def normalize_pairs(cls, v: Any) -> Pairs:
        return _to_pairs(v)

    def add_header(self, name: str, value: Any):
        """Append a header; existing headers with the same name are kept."""
        if value is not None:
            self.headers.append((name, str(value)))
        return self

    def add_parameter(self, name: str, value: Any):
        """Append a parameter; existing parameters with the same name are kept."""
        if value is not None:
            self.parameters.append((name, str(value)))
        return self


def _normalize_method(v: Any) -> Any:
    return v.upper() if isinstance(v, str) else v


class ClientConfig(_PairsModel):
    """Client configuration, created once and reused across requests."""

    authority: str
    version_path: Optional[str] = None
    method: HttpMethod = "GET"
    credentials: Optional[WebCredentials] = None
    user_agent: Optional[str] = None
    timeout: Optional[Union[float, TimeoutConfig]] = None

    cache: Optional[Any] = None
    cache_key_function: Optional[Callable[[], str]] = None
    cache_options: CacheOptions = Field(default_factory=CacheOptions)

    serializer: Optional[Any] = None
    deserializer: Optional[Any] = None

    # Optional pre-configured client (httpx), owned by the caller
    httpx_client: Any = None

    @field_validator("authority")
    @classmethod
    def validate_authority(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("authority must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("method", mode="before")
    @classmethod
    def validate_method(cls, v: Any) -> Any:
        return _normalize_method(v)

    @field_validator("cache")
    @classmethod
    def validate_cache(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, Cache):
            raise ValueError("cache must provide get(), set() and invalidate()")
        return v

    @field_validator("serializer")
    @classmethod
    def validate_serializer(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, Serializer):
            raise ValueError("serializer must provide content_type and serialize()")
        return v

    @field_validator("deserializer")
    @classmethod
    def validate_deserializer(cls, v: Any) -> Any:
        if v is not None and not isinstance(v, Deserializer):
            raise ValueError("deserializer must provide deserialize()")
        return v

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX, **overrides: Any) -> "ClientConfig":
        """
        Build a config from keyword arguments and ``{PREFIX}_*`` environment variables.

        Resolved keys: AUTHORITY, VERSION_PATH, USER_AGENT, TIMEOUT.
        Arguments win over the environment.
        """
        authority = resolve(overrides.pop("authority", None), env_key(prefix, "AUTHORITY"), None)
        if not authority:
            raise ConfigurationError(f"authority is required (argument or {env_key(prefix, 'AUTHORITY')})")

        return cls(
            authority=authority,
            version_path=resolve(overrides.pop("version_path", None), env_key(prefix, "VERSION_PATH"), None),
            user_agent=resolve(overrides.pop("user_agent", None), env_key(prefix, "USER_AGENT"), None),
            timeout=resolve_float(overrides.pop("timeout", None), env_key(prefix, "TIMEOUT"), None),
            **overrides,
        )


class RestRequest(_PairsModel):
    """Per-call request configuration."""

    path: str = ""
    method: Optional[HttpMethod] = None
    credentials: Optional[WebCredentials] = None
    entity: Any = None

    @field_validator("method", mode="before")
    @classmethod
    def validate_method(cls, v: Any) -> Any:
        return _normalize_method(v)


def normalize_timeout(timeout: Optional[Union[float, TimeoutConfig]]) -> TimeoutConfig:
    """Normalize timeout to TimeoutConfig object."""
    if timeout is None:
        return TimeoutConfig()
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=float(timeout), read=float(timeout), write=float(timeout))
    return timeout
