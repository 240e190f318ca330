from .async_client import AsyncRestClient
from .base_client import BaseClient
from .request import build_url, prepare_request

__all__ = ["BaseClient", "AsyncRestClient", "build_url", "prepare_request"]
