"""
Entity serialization for request and response bodies.
"""
import json
from functools import lru_cache
from typing import Any, Union

from pydantic import BaseModel, PydanticSchemaGenerationError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from .errors import SerializationError

DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"


@lru_cache(maxsize=128)
def _adapter(entity_type: Any) -> TypeAdapter:
    return TypeAdapter(entity_type)


def _type_name(entity_type: Any) -> str:
    return getattr(entity_type, "__name__", None) or repr(entity_type)


class JsonSerializer:
    """
    JSON serializer and deserializer.

    Pydantic models are written by alias, so models declaring PascalCase
    aliases produce PascalCase JSON.
    """
    content_type = DEFAULT_CONTENT_TYPE

    def __init__(self, by_alias: bool = True, exclude_none: bool = False):
        self._by_alias = by_alias
        self._exclude_none = exclude_none

    def serialize(self, entity: Any) -> str:
        try:
            if isinstance(entity, BaseModel):
                return entity.model_dump_json(by_alias=self._by_alias, exclude_none=self._exclude_none)
            return to_json(entity, by_alias=self._by_alias, exclude_none=self._exclude_none).decode("utf-8")
        except PydanticSerializationError as e:
            raise SerializationError(
                f"Could not serialize {_type_name(type(entity))}: {e}", type(entity)
            ) from e

    def deserialize(self, content: Union[str, bytes], entity_type: Any = None) -> Any:
        if entity_type is None or entity_type is Any:
            try:
                return json.loads(content)
            except json.JSONDecodeError as e:
                raise SerializationError(f"Response is not valid JSON: {e}", entity_type) from e
        try:
            return _adapter(entity_type).validate_json(content)
        except (PydanticSchemaGenerationError, TypeError) as e:
            raise SerializationError(
                f"Cannot deserialize into {_type_name(entity_type)}: {e}", entity_type
            ) from e
        except ValidationError as e:
            raise SerializationError(
                f"Could not deserialize response into {_type_name(entity_type)}: {e}", entity_type
            ) from e


__all__ = ["JsonSerializer", "DEFAULT_CONTENT_TYPE"]
