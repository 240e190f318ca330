"""
Response construction shared by the sync and async executors.
"""
from typing import Any, Optional

import httpx

from ..serialization import JsonSerializer
from ..types import CachedResponse, Deserializer, RestResponse


def _entity(deserializer: Optional[Deserializer], status_code: int, content: str, entity_type: Any) -> Any:
    if entity_type is None or not 200 <= status_code <= 299:
        return None
    return (deserializer or JsonSerializer()).deserialize(content, entity_type)


def from_httpx(
    response: httpx.Response,
    deserializer: Optional[Deserializer] = None,
    entity_type: Any = None,
) -> RestResponse:
    content = response.text
    return RestResponse(
        status_code=response.status_code,
        status_description=response.reason_phrase,
        headers=dict(response.headers),
        url=str(response.url),
        content=content,
        content_entity=_entity(deserializer, response.status_code, content, entity_type),
        is_from_cache=False,
    )


def from_cache(
    cached: CachedResponse,
    deserializer: Optional[Deserializer] = None,
    entity_type: Any = None,
) -> RestResponse:
    return RestResponse(
        status_code=cached.status_code,
        status_description=cached.status_description,
        headers=dict(cached.headers),
        url=cached.url,
        content=cached.content,
        content_entity=_entity(deserializer, cached.status_code, cached.content, entity_type),
        is_from_cache=True,
    )
