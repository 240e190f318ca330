"""
High-level RestClient implementation.
"""
from typing import Any, Dict, Optional

from .auth.credentials import WebCredentials
from .config import ClientConfig, RestRequest
from .core.base_client import BaseClient
from .types import RestResponse


class RestClient(BaseClient):
    """
    Synchronous REST client with convenience methods.
    """

    @classmethod
    def create(cls, config: ClientConfig) -> "RestClient":
        """Factory method to create a client."""
        return cls(config)

    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        credentials: Optional[WebCredentials] = None,
        entity_type: Any = None,
    ) -> RestResponse:
        """Execute GET request."""
        request = RestRequest(path=path, method="GET", parameters=params, headers=headers, credentials=credentials)
        return self.request(request, entity_type=entity_type)

    def post(
        self,
        path: str,
        entity: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        credentials: Optional[WebCredentials] = None,
        entity_type: Any = None,
    ) -> RestResponse:
        """Execute POST request."""
        request = RestRequest(
            path=path, method="POST", entity=entity, parameters=params, headers=headers, credentials=credentials
        )
        return self.request(request, entity_type=entity_type)

    def put(
        self,
        path: str,
        entity: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        credentials: Optional[WebCredentials] = None,
        entity_type: Any = None,
    ) -> RestResponse:
        """Execute PUT request."""
        request = RestRequest(
            path=path, method="PUT", entity=entity, parameters=params, headers=headers, credentials=credentials
        )
        return self.request(request, entity_type=entity_type)

    def delete(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        credentials: Optional[WebCredentials] = None,
    ) -> RestResponse:
        """Execute DELETE request."""
        request = RestRequest(path=path, method="DELETE", parameters=params, headers=headers, credentials=credentials)
        return self.request(request)
