"""
Credential strategies for rest_client.
"""
import base64
import logging
from abc import abstractmethod
from dataclasses import replace
from typing import Optional

from pydantic import BaseModel, SecretStr, model_validator

from ..types import PreparedRequest

logger = logging.getLogger(__name__)
LOG_PREFIX = "[AUTH]"


def _mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


class WebCredentials(BaseModel):
    """Authentication strategy attached to a client or a request."""

    @abstractmethod
    def apply(self, prepared: PreparedRequest) -> PreparedRequest:
        """Return the request with this strategy's header or parameters added."""
        ...


class BasicAuthCredentials(WebCredentials):
    """HTTP basic authentication."""
    username: str
    password: SecretStr

    @model_validator(mode="after")
    def validate_credentials(self) -> "BasicAuthCredentials":
        if not self.username or not self.password.get_secret_value():
            raise ValueError("Basic auth requires 'username' and 'password'")
        return self

    @property
    def header_value(self) -> str:
        raw = f"{self.username}:{self.password.get_secret_value()}"
        return "Basic " + base64.b64encode(raw.encode("utf-8")).decode("ascii")

    def apply(self, prepared: PreparedRequest) -> PreparedRequest:
        value = self.header_value
        logger.debug(
            f"{LOG_PREFIX} BasicAuthCredentials.apply: username={_mask_value(self.username)} -> "
            f"Authorization={_mask_value(value)}"
        )
        return replace(prepared, headers=[*prepared.headers, ("Authorization", value)])
